# neki_lang/infrastructure/persistence/__init__.py

"""Persistence infrastructure for asset loading and patch writing.

This module provides the directory scan selecting asset files and the
writer producing the language template patches.
"""

# Local imports
from neki_lang.infrastructure.persistence._asset_loader import AssetFile
from neki_lang.infrastructure.persistence._asset_loader import AssetLoader
from neki_lang.infrastructure.persistence._asset_loader import get_extension_info
from neki_lang.infrastructure.persistence._patch_writer import output_path_for
from neki_lang.infrastructure.persistence._patch_writer import render_patch
from neki_lang.infrastructure.persistence._patch_writer import write_patch

__all__ = [
    "AssetFile",
    "AssetLoader",
    "get_extension_info",
    "output_path_for",
    "render_patch",
    "write_patch",
]
