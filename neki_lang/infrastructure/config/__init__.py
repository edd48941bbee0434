# neki_lang/infrastructure/config/__init__.py

"""Configuration infrastructure for neki_lang.

This module manages configuration loading, validation, built-in defaults and
initialization of external configuration files.
"""

# Local imports
from neki_lang.infrastructure.config._defaults import DIRS_CONFIG_FILENAME
from neki_lang.infrastructure.config._defaults import REGEX_CONFIG_FILENAME
from neki_lang.infrastructure.config._defaults import init_config_files
from neki_lang.infrastructure.config._defaults import read_default_config
from neki_lang.infrastructure.config._loader import ConfigLoader
from neki_lang.infrastructure.config._models import DirWhitelistConfig
from neki_lang.infrastructure.config._models import RegexConfig

__all__ = [
    "ConfigLoader",
    "DIRS_CONFIG_FILENAME",
    "DirWhitelistConfig",
    "REGEX_CONFIG_FILENAME",
    "RegexConfig",
    "init_config_files",
    "read_default_config",
]
