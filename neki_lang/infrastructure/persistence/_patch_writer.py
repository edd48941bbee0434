# neki_lang/infrastructure/persistence/_patch_writer.py

"""JSON output of generated patches"""

# Standard library imports
from json import dumps
from logging import getLogger
from pathlib import Path

# Local imports
from neki_lang.core.domain.patch import PatchData
from neki_lang.infrastructure.persistence._asset_loader import AssetFile

logger = getLogger(__name__)

PATCH_SUFFIX = ".patch"


def output_path_for(asset: AssetFile, output_dir: str | Path) -> Path:
    """Get where the patch generated for an asset is written

    Patch inputs keep their relative path; other assets get `.patch` appended,
    so `items/sword.item` becomes `items/sword.item.patch`.
    """
    if asset.is_patch:
        return Path(output_dir) / asset.relative_path
    return Path(output_dir) / f"{asset.relative_path}{PATCH_SUFFIX}"


def render_patch(patch: PatchData) -> str:
    """Serialize a patch as pretty-printed JSON

    Raises:
        ValueError: If the patch holds an infinite or NaN number, which JSON cannot represent
    """
    return dumps(patch.to_json(), indent=2, ensure_ascii=False, allow_nan=False)


def write_patch(patch: PatchData, output_path: str | Path) -> Path:
    """Write a patch file, creating parent directories as needed

    Args:
        patch: Generated patch
        output_path: Destination file

    Returns:
        The path written

    Raises:
        ValueError: If the patch cannot be serialized; nothing is written
    """
    text = render_patch(patch)
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.debug(f"Wrote {patch.operation_count()} operations to {path}")
    return path
