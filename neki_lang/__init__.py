# neki_lang/__init__.py

"""neki_lang - language template generator for game mods

Reads mod assets written in a relaxed JSON dialect and generates patch files
that replace every translatable string with a marked copy, ready to be
handed to translators.
"""

# Version info
__version__ = "0.1.0"

# Local imports
# High-level API
from neki_lang.application.processing.patch_generator import generate_patch  # noqa: E402
from neki_lang.application.processing.patterns import PatternConfig  # noqa: E402
from neki_lang.application.processing.patterns import PatternSet  # noqa: E402
from neki_lang.application.processing.relaxed_json import parse  # noqa: E402
from neki_lang.application.services import PatchGenerationService  # noqa: E402

# Data models
from neki_lang.core.domain.enums import PatchKind  # noqa: E402
from neki_lang.core.domain.exceptions import ConfigError  # noqa: E402
from neki_lang.core.domain.exceptions import ParseError  # noqa: E402
from neki_lang.core.domain.patch import PatchData  # noqa: E402
from neki_lang.core.domain.patch import PatchOperation  # noqa: E402

# For users who want lower-level control
from neki_lang.infrastructure.config import ConfigLoader  # noqa: E402
from neki_lang.infrastructure.persistence import AssetLoader  # noqa: E402

__all__: list[str] = [
    # Primary API
    "parse",
    "generate_patch",
    "PatternConfig",
    "PatternSet",
    "PatchGenerationService",
    # Data models
    "PatchData",
    "PatchKind",
    "PatchOperation",
    "ParseError",
    "ConfigError",
    # Advanced usage
    "ConfigLoader",
    "AssetLoader",
    # Version
    "__version__",
]
