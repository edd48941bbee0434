# neki_lang/infrastructure/config/_defaults.py

"""Built-in configuration files shipped with the package"""

# Standard library imports
from importlib.resources import files
from logging import getLogger
from pathlib import Path

# Local imports
from neki_lang.core.domain.exceptions import ConfigError

logger = getLogger(__name__)

DIRS_CONFIG_FILENAME = "dirs_config.json"
REGEX_CONFIG_FILENAME = "regex_config.json"


def read_default_config(filename: str) -> str:
    """Read a built-in configuration file as text"""
    return (files("neki_lang") / "data" / filename).read_text(encoding="utf-8")


def _write_default(target_dir: Path, filename: str) -> None:
    path = target_dir / filename
    logger.info(f'Writing "{filename}"...')
    try:
        path.write_text(read_default_config(filename), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f'Failed to write "{filename}" to {target_dir}') from e


def init_config_files(target_dir: str | Path, force: bool = False) -> list[Path]:
    """Write the built-in configuration files into a directory

    Without `force`, existing files are kept: if both files exist nothing is
    written and ConfigError is raised, if only one exists the other is written.

    Args:
        target_dir: Directory receiving `dirs_config.json` and `regex_config.json`
        force: Overwrite existing files

    Returns:
        Paths of the files written

    Raises:
        ConfigError: If both files exist without `force`, or writing fails
    """
    target = Path(target_dir)
    logger.info("Initializing configuration files...")
    target.mkdir(parents=True, exist_ok=True)

    pending: list[str] = []
    for filename in (DIRS_CONFIG_FILENAME, REGEX_CONFIG_FILENAME):
        if force or not (target / filename).exists():
            pending.append(filename)
        else:
            logger.warning(
                f'"{filename}" already exists in {target}. Use --force to overwrite.'
            )

    if not pending:
        raise ConfigError(
            f"All config files already exist in {target}. Use --force to overwrite."
        )

    for filename in pending:
        _write_default(target, filename)

    logger.info(f"Configuration files initialized in {target}")
    return [target / filename for filename in pending]
