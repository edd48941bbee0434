# neki_lang/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from pathlib import Path

# Local imports
from neki_lang.application.models.generation_stats import GenerationStats


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to a log file, None to log to the console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = getLevelNamesMapping().get(log_level.upper(), INFO)

    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers = []

    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)
        # The file gets debug records even when the console does not
        root_logger.setLevel(DEBUG)

        getLogger(__name__).info(f"Logging to file: {log_file}")
        return log_file

    return None


def log_run_summary(stats: GenerationStats, output_dir: str) -> None:
    """Log final run summary with statistics

    Args:
        stats: Statistics of the finished generation run
        output_dir: Directory the patches were written to
    """
    logger = getLogger(__name__)

    summary_lines = [
        "=" * 60,
        "GENERATION COMPLETE",
        "=" * 60,
        f"Files read: {stats.files_read:,}",
        f"Patch files written: {stats.patches_written:,}",
        f"Files without translatable text: {stats.files_skipped:,}",
        f"Replace operations: {stats.operations:,}",
        f"Total time: {stats.total_seconds:.3f}s",
        f"Output: {output_dir}",
        "=" * 60,
    ]
    logger.info("\n".join(summary_lines))
