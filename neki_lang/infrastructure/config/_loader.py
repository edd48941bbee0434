# neki_lang/infrastructure/config/_loader.py

"""Configuration loader for the directory whitelist and the path patterns"""

# Standard library imports
from functools import cached_property
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import ValidationError

# Local imports
from neki_lang.application.processing.patterns import PatternConfig
from neki_lang.application.processing.relaxed_json import parse
from neki_lang.core.domain.enums import ConfigSource
from neki_lang.core.domain.exceptions import ConfigError
from neki_lang.core.domain.exceptions import ParseError
from neki_lang.infrastructure.config._defaults import DIRS_CONFIG_FILENAME
from neki_lang.infrastructure.config._defaults import REGEX_CONFIG_FILENAME
from neki_lang.infrastructure.config._defaults import read_default_config
from neki_lang.infrastructure.config._models import DirWhitelistConfig
from neki_lang.infrastructure.config._models import RegexConfig

logger = getLogger(__name__)

SOURCE_MESSAGES = {
    (ConfigSource.BUILT_IN, ConfigSource.BUILT_IN): "Using built-in configurations",
    (ConfigSource.EXTERNAL, ConfigSource.EXTERNAL): "Using external configurations",
    (ConfigSource.BUILT_IN, ConfigSource.EXTERNAL): (
        "Using built-in dir whitelist and external regex config"
    ),
    (ConfigSource.EXTERNAL, ConfigSource.BUILT_IN): (
        "Using external dir whitelist and built-in regex config"
    ),
}


def read_config_file(path: Path, default_filename: str) -> tuple[str, ConfigSource]:
    """Read a configuration file, falling back to the built-in one when it is missing

    Args:
        path: Location of the external configuration file
        default_filename: Name of the built-in file to use instead

    Returns:
        File text and where it came from

    Raises:
        ConfigError: If the external file exists but cannot be read
    """
    if not path.exists():
        return read_default_config(default_filename), ConfigSource.BUILT_IN
    try:
        return path.read_text(encoding="utf-8"), ConfigSource.EXTERNAL
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read config file {path}") from e


def load_model[M: BaseModel](text: str, model: type[M], description: str) -> M:
    """Parse relaxed JSON text and validate it into a configuration model

    Raises:
        ConfigError: If the text does not parse or does not validate
    """
    try:
        value = parse(text)
    except ParseError as e:
        raise ConfigError(f"Failed to parse {description}: {e}") from e
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise ConfigError(f"Failed to deserialize {description}: {e}") from e


class ConfigLoader:
    """Loads `dirs_config.json` and `regex_config.json`

    Each file is looked up in the configuration directory and, when absent,
    replaced by the built-in default independently of the other one.
    """

    def __init__(self, config_dir: str | Path | None = None):
        """Initialize configuration loader

        Args:
            config_dir: Directory holding the configuration files, None for
                the current working directory

        Raises:
            ConfigError: If a configuration file is unreadable or invalid
        """
        self.config_dir = Path(config_dir) if config_dir is not None else Path.cwd()

        dirs_text, self.dirs_source = read_config_file(
            self.config_dir / DIRS_CONFIG_FILENAME, DIRS_CONFIG_FILENAME
        )
        regex_text, self.regex_source = read_config_file(
            self.config_dir / REGEX_CONFIG_FILENAME, REGEX_CONFIG_FILENAME
        )
        logger.info(self.source_summary)

        self._dir_whitelist = load_model(dirs_text, DirWhitelistConfig, "dir whitelist config")
        self._regex = load_model(regex_text, RegexConfig, "regex config")

    @property
    def source_summary(self) -> str:
        """Which configuration files are built-in and which are external"""
        return SOURCE_MESSAGES[(self.dirs_source, self.regex_source)]

    @property
    def dir_whitelist(self) -> list[str]:
        """Whitelisted directories relative to the mod root"""
        return self._dir_whitelist.directories

    @property
    def patterns(self) -> dict[str, list[str]]:
        """Raw patterns keyed by extension"""
        return self._regex.root

    @cached_property
    def pattern_config(self) -> PatternConfig:
        """Compiled pattern configuration, built once"""
        return self._regex.to_pattern_config()
