# neki_lang/core/domain/enums.py

"""Domain enumerations for neki_lang"""

# Standard library imports
from enum import Enum


class OperationType(Enum):
    """Patch operation kinds handled by the generator"""

    REPLACE = "replace"
    ADD = "add"
    TEST = "test"


class PatchKind(Enum):
    """Shape of a generated patch file"""

    COMMON = "common"  # Flat list of operations
    BATCHES = "batches"  # List of [test, operation] pairs


class ConfigSource(Enum):
    """Where a configuration file was read from"""

    BUILT_IN = "built-in"
    EXTERNAL = "external"


# Marker prepended to every string flagged as translatable
TRANSLATABLE_MARKER = "(T) "

# Operations whose value is walked when reading an existing patch file
VALUE_OPERATIONS = frozenset({OperationType.REPLACE.value, OperationType.ADD.value})
