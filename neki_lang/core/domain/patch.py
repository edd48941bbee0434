# neki_lang/core/domain/patch.py

"""Patch operation domain model"""

# Standard library imports
from dataclasses import dataclass
from dataclasses import field
from typing import NotRequired
from typing import TypedDict

# Local imports
from neki_lang.core.domain.enums import OperationType
from neki_lang.core.domain.enums import PatchKind
from neki_lang.core.types.json import JSONType


class PatchOperation(TypedDict):
    """A single `{op, path, value?}` edit, serialized in that key order"""

    op: str
    path: str
    value: NotRequired[JSONType]


type PatchBatch = list[PatchOperation]


def replace_operation(path: str, value: JSONType) -> PatchOperation:
    """Build a replace operation"""
    return {"op": OperationType.REPLACE.value, "path": path, "value": value}


def guard_operation(path: str) -> PatchOperation:
    """Build the test operation that guards an edit at `path`"""
    return {"op": OperationType.TEST.value, "path": path}


@dataclass(slots=True, frozen=True)
class PatchData:
    """Generated patch for one asset file

    A common patch is a flat list of operations. A batches patch is a list of
    `[test, operation]` pairs, so a failing test only skips its own edit.
    """

    kind: PatchKind = PatchKind.COMMON
    operations: list[PatchOperation] = field(default_factory=list)
    batches: list[PatchBatch] = field(default_factory=list)

    @classmethod
    def common(cls, operations: list[PatchOperation]) -> "PatchData":
        """Wrap a flat list of operations"""
        return cls(kind=PatchKind.COMMON, operations=operations)

    @classmethod
    def batched(cls, batches: list[PatchBatch]) -> "PatchData":
        """Wrap a list of operation batches"""
        return cls(kind=PatchKind.BATCHES, batches=batches)

    def is_empty(self) -> bool:
        """A common patch is empty with no operations, a batches patch when every batch is"""
        if self.kind is PatchKind.BATCHES:
            return all(not batch for batch in self.batches)
        return not self.operations

    def operation_count(self) -> int:
        """Number of edit operations, test guards excluded"""
        if self.kind is PatchKind.BATCHES:
            return sum(
                1
                for batch in self.batches
                for operation in batch
                if operation["op"] != OperationType.TEST.value
            )
        return len(self.operations)

    def to_json(self) -> list[PatchOperation] | list[PatchBatch]:
        """Plain JSON payload written to the patch file"""
        if self.kind is PatchKind.BATCHES:
            return self.batches
        return self.operations
