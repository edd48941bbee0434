# neki_lang/infrastructure/persistence/_asset_loader.py

"""Asset file discovery and loading from a mod directory"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path

# Local imports
from neki_lang.application.processing.patterns import PatternConfig

logger = getLogger(__name__)

PATCH_EXTENSION = "patch"


@dataclass(slots=True, frozen=True)
class AssetFile:
    """An asset or patch file selected for generation"""

    path: Path
    relative_path: Path
    extension: str
    is_patch: bool
    text: str


def get_extension_info(file_path: Path) -> tuple[str, bool]:
    """Get the pattern lookup extension of a file and whether it is a patch

    The extension of `foo.item` is `item`. A patch file also keeps the
    extension it patches, so `foo.item.patch` gives `item.patch`; a bare
    `foo.patch` gives `patch`. Files without an extension give an empty string.

    Args:
        file_path: File to inspect

    Returns:
        Tuple of (extension, is_patch)
    """
    extension = file_path.suffix[1:]
    is_patch = extension == PATCH_EXTENSION
    if is_patch:
        stem = file_path.stem
        dot = stem.rfind(".")
        if dot != -1:
            extension = f"{stem[dot + 1:]}.{extension}"
    return extension, is_patch


class AssetLoader:
    """Finds whitelisted asset files with a configured extension and reads them"""

    __slots__ = ("input_dir", "dir_whitelist", "pattern_config")

    def __init__(
        self, input_dir: str | Path, dir_whitelist: Iterable[str], pattern_config: PatternConfig
    ) -> None:
        """Initialize the loader

        Args:
            input_dir: Mod root directory
            dir_whitelist: Directories, relative to the root, that are scanned
            pattern_config: Pattern configuration deciding which extensions are kept
        """
        self.input_dir = Path(input_dir)
        self.dir_whitelist = [Path(directory) for directory in dir_whitelist]
        self.pattern_config = pattern_config

    def is_selected(self, relative_path: Path) -> bool:
        """Check the whitelist and the extension of a path relative to the mod root"""
        if not any(relative_path.is_relative_to(directory) for directory in self.dir_whitelist):
            return False
        extension, _ = get_extension_info(relative_path)
        return self.pattern_config.has(extension)

    def iter_paths(self) -> Iterator[Path]:
        """Yield selected files in sorted path order"""
        for path in sorted(self.input_dir.rglob("*")):
            if not path.is_file():
                continue
            if self.is_selected(path.relative_to(self.input_dir)):
                yield path

    def iter_assets(self) -> Iterator[AssetFile]:
        """Yield selected files with their content

        Raises:
            OSError: If a selected file cannot be read
            UnicodeDecodeError: If a selected file is not UTF-8
        """
        for path in self.iter_paths():
            relative_path = path.relative_to(self.input_dir)
            extension, is_patch = get_extension_info(path)
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to read {path}: {e}")
                raise
            yield AssetFile(
                path=path,
                relative_path=relative_path,
                extension=extension,
                is_patch=is_patch,
                text=text,
            )

    def load_all(self) -> list[AssetFile]:
        """Read every selected file"""
        assets = list(self.iter_assets())
        logger.info(f"Found {len(assets):,} asset files in {self.input_dir}")
        return assets
