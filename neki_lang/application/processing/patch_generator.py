# neki_lang/application/processing/patch_generator.py

"""Patch generation for translatable text

Walks a parsed asset and emits a `replace` operation for every string, or
string array, whose pointer path matches the patterns configured for the
asset's extension. The replacement value carries the translatable marker so
translators can find it in the generated language template.

Two inputs are supported:

- a plain asset, walked from the document root
- an existing patch file, where the `value` of each `replace`/`add`
  operation is walked from that operation's `path`

Unrecognized shapes never raise; they simply produce no operations. The walk
uses an explicit stack, so deeply nested assets cannot exhaust the
interpreter stack, and emits operations in depth-first, source order.
"""

# Standard library imports
from logging import getLogger

# Local imports
from neki_lang.application.processing.patterns import PatternConfig
from neki_lang.application.processing.patterns import PatternSet
from neki_lang.core.domain.enums import TRANSLATABLE_MARKER
from neki_lang.core.domain.enums import VALUE_OPERATIONS
from neki_lang.core.domain.patch import PatchBatch
from neki_lang.core.domain.patch import PatchData
from neki_lang.core.domain.patch import PatchOperation
from neki_lang.core.domain.patch import guard_operation
from neki_lang.core.domain.patch import replace_operation
from neki_lang.core.types.json import JSONDict
from neki_lang.core.types.json import JSONList
from neki_lang.core.types.json import JSONType

logger = getLogger(__name__)


def mark_translatable(text: str) -> str:
    """Prefix a string with the translatable marker"""
    return f"{TRANSLATABLE_MARKER}{text}"


def mark_array(items: JSONList) -> JSONList:
    """Copy an array, marking its direct string elements"""
    return [mark_translatable(item) if isinstance(item, str) else item for item in items]


def _match_leaf(
    node: JSONType, path: str, matcher: PatternSet, operations: list[PatchOperation]
) -> bool:
    """Emit an operation for a matching string or array

    Returns:
        True if the node was consumed and must not be descended into
    """
    if isinstance(node, str):
        if matcher.matches(path):
            operations.append(replace_operation(path, mark_translatable(node)))
        return True
    if isinstance(node, list) and matcher.matches(path):
        operations.append(replace_operation(path, mark_array(node)))
        return True
    return False


def collect_asset_operations(root: JSONType, matcher: PatternSet) -> list[PatchOperation]:
    """Collect replace operations from a plain asset document

    Args:
        root: Parsed asset
        matcher: Patterns for the asset's extension

    Returns:
        Replace operations in depth-first source order
    """
    operations: list[PatchOperation] = []
    stack: list[tuple[JSONType, str]] = [(root, "")]

    while stack:
        node, path = stack.pop()
        if _match_leaf(node, path, matcher, operations):
            continue
        # Children are pushed in reverse so they pop in source order
        if isinstance(node, list):
            for index in range(len(node) - 1, -1, -1):
                stack.append((node[index], f"{path}/{index}"))
        elif isinstance(node, dict):
            for key, child in reversed(node.items()):
                stack.append((child, f"{path}/{key}"))

    return operations


def _operation_target(node: JSONDict) -> tuple[str, JSONType] | None:
    """Get (path, value) of a replace/add operation object, None for any other shape"""
    op = node.get("op")
    path = node.get("path")
    if isinstance(op, str) and op in VALUE_OPERATIONS and isinstance(path, str) and "value" in node:
        return path, node["value"]
    return None


def collect_patch_operations(root: JSONType, matcher: PatternSet) -> list[PatchOperation]:
    """Collect replace operations from an existing patch document

    Outside an operation's value, object keys replace the current path
    instead of extending it, so a top-level dictionary of independent patch
    descriptions is walked key by key.

    Args:
        root: Parsed patch file (list of operations, batches, or a dictionary of them)
        matcher: Patterns for the patch's compound extension

    Returns:
        Replace operations in depth-first source order
    """
    operations: list[PatchOperation] = []
    # (node, path, inside an operation value)
    stack: list[tuple[JSONType, str, bool]] = [(root, "", False)]

    while stack:
        node, path, in_value = stack.pop()
        if _match_leaf(node, path, matcher, operations):
            continue
        if isinstance(node, list):
            for index in range(len(node) - 1, -1, -1):
                stack.append((node[index], f"{path}/{index}", in_value))
        elif isinstance(node, dict):
            if not in_value:
                target = _operation_target(node)
                if target is not None:
                    target_path, value = target
                    stack.append((value, target_path, True))
                    continue
            for key, child in reversed(node.items()):
                stack.append((child, f"{path}/{key}" if in_value else key, in_value))

    return operations


def add_test_guards(operations: list[PatchOperation]) -> list[PatchBatch]:
    """Pair every operation with a test on its path"""
    return [[guard_operation(operation["path"]), operation] for operation in operations]


def generate_patch(
    is_patch: bool,
    root: JSONType,
    extension: str,
    config: PatternConfig,
    with_test_guard: bool = False,
) -> PatchData:
    """Generate the language template patch for one parsed file

    Args:
        is_patch: Whether the file is itself a patch file
        root: Parsed file content
        extension: File extension used to select patterns
        config: Compiled pattern configuration
        with_test_guard: Wrap each operation in a `[test, operation]` batch

    Returns:
        Generated patch data; empty when the extension is not configured
    """
    matcher = config.matcher_for(extension)
    if matcher is None:
        logger.debug(f"No patterns configured for .{extension}")
        return PatchData.common([])

    if is_patch:
        operations = collect_patch_operations(root, matcher)
    else:
        operations = collect_asset_operations(root, matcher)

    if with_test_guard:
        return PatchData.batched(add_test_guards(operations))
    return PatchData.common(operations)
