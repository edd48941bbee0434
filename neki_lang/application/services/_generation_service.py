# neki_lang/application/services/_generation_service.py

"""Generation service producing the language template of a mod.

This service reads the whitelisted asset files of a mod, generates the
translatable-text patch of each one and writes the non-empty patches to
the output directory, mirroring the input tree.
"""

# Standard library imports
from logging import getLogger
from pathlib import Path
from time import perf_counter

# Local imports
from neki_lang.application.models.config_models import GenerationOptions
from neki_lang.application.models.generation_stats import GenerationStats
from neki_lang.application.processing.patch_generator import generate_patch
from neki_lang.application.processing.relaxed_json import parse
from neki_lang.core.domain.exceptions import ParseError
from neki_lang.core.domain.patch import PatchData
from neki_lang.infrastructure.config import ConfigLoader
from neki_lang.infrastructure.persistence import AssetLoader
from neki_lang.infrastructure.persistence import output_path_for
from neki_lang.infrastructure.persistence import write_patch

logger = getLogger(__name__)


class PatchGenerationService:
    """Application service running the read, generate and write phases"""

    __slots__ = ("_config",)

    def __init__(self, config: ConfigLoader | None = None) -> None:
        """Initialize the generation service.

        Args:
            config: Configuration loader, loads from the current directory if None
        """
        self._config = config or ConfigLoader()

    @property
    def config(self) -> ConfigLoader:
        return self._config

    def run(self, options: GenerationOptions) -> GenerationStats:
        """Generate and write the patches of every selected asset

        Args:
            options: Input and output directories and test operation flag

        Returns:
            Statistics of the run

        Raises:
            ParseError: If an asset is not valid relaxed JSON; nothing is written
            OSError: If an asset cannot be read or a patch cannot be written
        """
        stats = GenerationStats()
        loader = AssetLoader(
            options.input_dir, self._config.dir_whitelist, self._config.pattern_config
        )

        start = perf_counter()
        assets = loader.load_all()
        stats.files_read = len(assets)
        stats.reading_seconds = perf_counter() - start
        logger.info(f"Files reading completed - time elapsed: {stats.reading_seconds:.3f}s")

        start = perf_counter()
        outputs: dict[Path, PatchData] = {}
        for asset in assets:
            try:
                value = parse(asset.text)
            except ParseError as e:
                logger.error(f"Failed to parse {asset.path}: {e}")
                raise

            patch = generate_patch(
                asset.is_patch,
                value,
                asset.extension,
                self._config.pattern_config,
                options.test_operations,
            )
            if patch.is_empty():
                stats.files_skipped += 1
                logger.debug(f"No translatable text in {asset.relative_path}")
                continue

            outputs[output_path_for(asset, options.output_dir)] = patch
        stats.generation_seconds = perf_counter() - start
        logger.info(
            f"Patches generation completed - time elapsed: {stats.generation_seconds:.3f}s"
        )

        start = perf_counter()
        for output_path, patch in outputs.items():
            try:
                write_patch(patch, output_path)
            except ValueError as e:
                logger.error(f"Failed to write {output_path}: {e}")
                stats.files_skipped += 1
                continue
            stats.patches_written += 1
            stats.operations += patch.operation_count()
        stats.writing_seconds = perf_counter() - start
        logger.info(f"Patches writing completed - time elapsed: {stats.writing_seconds:.3f}s")

        return stats
