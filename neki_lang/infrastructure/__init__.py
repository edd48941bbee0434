# neki_lang/infrastructure/__init__.py

"""System infrastructure components for configuration, logging and persistence."""

# Local imports
from neki_lang.infrastructure.config import ConfigLoader
from neki_lang.infrastructure.persistence import AssetLoader

__all__ = ["AssetLoader", "ConfigLoader"]
