# neki_lang/core/domain/__init__.py

"""Domain models for patch generation"""

# Local imports
from neki_lang.core.domain.enums import ConfigSource
from neki_lang.core.domain.enums import OperationType
from neki_lang.core.domain.enums import PatchKind
from neki_lang.core.domain.enums import TRANSLATABLE_MARKER
from neki_lang.core.domain.exceptions import ConfigError
from neki_lang.core.domain.exceptions import ParseError
from neki_lang.core.domain.exceptions import SourcePosition
from neki_lang.core.domain.patch import PatchBatch
from neki_lang.core.domain.patch import PatchData
from neki_lang.core.domain.patch import PatchOperation

__all__ = [
    "ConfigError",
    "ConfigSource",
    "OperationType",
    "ParseError",
    "PatchBatch",
    "PatchData",
    "PatchKind",
    "PatchOperation",
    "SourcePosition",
    "TRANSLATABLE_MARKER",
]
