# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from collections.abc import Callable
from logging import FileHandler
from logging import StreamHandler
from logging import getLogger
from pathlib import Path

# Third party imports
import pytest

# Local imports
from neki_lang.application.processing.patterns import PatternConfig


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - just reset logging"""
    root_logger = getLogger()
    original_level = root_logger.level

    yield

    # Drop the handlers installed by CLI runs, leaving pytest's own capture handlers
    for handler in root_logger.handlers[:]:
        if type(handler) in (FileHandler, StreamHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(original_level)


@pytest.fixture
def pattern_config() -> PatternConfig:
    """Small pattern configuration covering plain assets and patches"""
    return PatternConfig(
        {
            "item": ["^/shortdescription$", "^/description$"],
            "item.patch": ["^/shortdescription$", "^/description$"],
            "codex": ["^/title$", "^/contentPages$"],
            "config": [],
        }
    )


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Create files under a fresh mod root from a {relative path: text} mapping"""

    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "mod"
        for relative, text in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        root.mkdir(exist_ok=True)
        return root

    return _write


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """External configuration whitelisting items and codex"""
    directory = tmp_path / "config"
    directory.mkdir()
    (directory / "dirs_config.json").write_text('["items", "codex"]', encoding="utf-8")
    (directory / "regex_config.json").write_text(
        """{
            // plain assets
            "item": ["^/shortdescription$", "^/description$"],
            "codex": ["^/title$", "^/contentPages$"],
            // patches of them
            "item.patch": ["^/shortdescription$", "^/description$"]
        }""",
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def mod_dir(write_tree: Callable[[dict[str, str]], Path]) -> Path:
    """Small mod with assets, a patch and files that are not processed"""
    return write_tree(
        {
            "items/sword.item": """{
                // weapon
                "itemName": "sword",
                "shortdescription": "Sword",
                "description": 'A "sharp" blade',
                "price": 0x10
            }""",
            "items/rock.item": '{"itemName": "rock", "price": 1}',
            "items/shield.item.patch": """[
                {"op": "replace", "path": "/shortdescription", "value": "Shield"},
                {"op": "remove", "path": "/category"}
            ]""",
            "codex/lore.codex": '{"title": "Lore", "contentPages": ["Page one", "Page two"]}',
            "scripts/ignored.item": '{"shortdescription": "Hidden"}',
            "items/readme.txt": "not an asset",
        }
    )
