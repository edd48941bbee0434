# tests/unit/application/services/test_generation_service.py

"""Tests for the patch generation service"""

# Standard library imports
from json import loads
from logging import INFO
from unittest.mock import patch

# Third party imports
import pytest

# Local imports
from neki_lang.application.models.config_models import GenerationOptions
from neki_lang.application.services import PatchGenerationService
from neki_lang.core.domain.exceptions import ParseError
from neki_lang.infrastructure.config import ConfigLoader


def read_json(path):
    return loads(path.read_text(encoding="utf-8"))


class TestPatchGenerationService:
    """Test the read, generate and write phases"""

    def test_writes_non_empty_patches(self, mod_dir, config_dir, tmp_path):
        out = tmp_path / "out"
        service = PatchGenerationService(ConfigLoader(config_dir))
        service.run(GenerationOptions(input_dir=mod_dir, output_dir=out))

        written = sorted(p.relative_to(out).as_posix() for p in out.rglob("*") if p.is_file())
        assert written == [
            "codex/lore.codex.patch",
            "items/shield.item.patch",
            "items/sword.item.patch",
        ]
        assert read_json(out / "items" / "sword.item.patch") == [
            {"op": "replace", "path": "/shortdescription", "value": "(T) Sword"},
            {"op": "replace", "path": "/description", "value": '(T) A "sharp" blade'},
        ]
        assert read_json(out / "items" / "shield.item.patch") == [
            {"op": "replace", "path": "/shortdescription", "value": "(T) Shield"},
        ]
        assert read_json(out / "codex" / "lore.codex.patch") == [
            {"op": "replace", "path": "/title", "value": "(T) Lore"},
            {"op": "replace", "path": "/contentPages", "value": ["(T) Page one", "(T) Page two"]},
        ]

    def test_statistics(self, mod_dir, config_dir, tmp_path):
        service = PatchGenerationService(ConfigLoader(config_dir))
        stats = service.run(GenerationOptions(input_dir=mod_dir, output_dir=tmp_path / "out"))
        assert stats.files_read == 4
        assert stats.patches_written == 3
        assert stats.files_skipped == 1
        assert stats.operations == 5
        assert stats.total_seconds >= 0

    def test_test_operations(self, mod_dir, config_dir, tmp_path):
        out = tmp_path / "out"
        service = PatchGenerationService(ConfigLoader(config_dir))
        stats = service.run(
            GenerationOptions(input_dir=mod_dir, output_dir=out, test_operations=True)
        )
        assert read_json(out / "items" / "shield.item.patch") == [
            [
                {"op": "test", "path": "/shortdescription"},
                {"op": "replace", "path": "/shortdescription", "value": "(T) Shield"},
            ]
        ]
        assert stats.operations == 5

    def test_parse_error_writes_nothing(self, write_tree, config_dir, tmp_path):
        root = write_tree(
            {"items/good.item": '{"shortdescription": "Good"}', "items/zbad.item": "{,}"}
        )
        out = tmp_path / "out"
        service = PatchGenerationService(ConfigLoader(config_dir))
        with pytest.raises(ParseError, match="Expected key"):
            service.run(GenerationOptions(input_dir=root, output_dir=out))
        assert not out.exists()

    def test_parse_error_logged_with_path(self, write_tree, config_dir, tmp_path, caplog):
        caplog.set_level(INFO)
        root = write_tree({"items/bad.item": "[1,]"})
        service = PatchGenerationService(ConfigLoader(config_dir))
        with pytest.raises(ParseError):
            service.run(GenerationOptions(input_dir=root, output_dir=tmp_path / "out"))
        assert "Failed to parse" in caplog.text
        assert "bad.item" in caplog.text

    def test_phase_timings_logged(self, mod_dir, config_dir, tmp_path, caplog):
        caplog.set_level(INFO)
        service = PatchGenerationService(ConfigLoader(config_dir))
        service.run(GenerationOptions(input_dir=mod_dir, output_dir=tmp_path / "out"))
        assert "Files reading completed - time elapsed:" in caplog.text
        assert "Patches generation completed - time elapsed:" in caplog.text
        assert "Patches writing completed - time elapsed:" in caplog.text

    def test_unserializable_patch_skipped(self, write_tree, config_dir, tmp_path, caplog):
        caplog.set_level(INFO)
        root = write_tree(
            {
                "items/good.item": '{"description": "Good"}',
                "items/odd.item": '{"description": ["Sharp", -Infinity]}',
            }
        )
        out = tmp_path / "out"
        service = PatchGenerationService(ConfigLoader(config_dir))
        stats = service.run(GenerationOptions(input_dir=root, output_dir=out))

        assert (out / "items" / "good.item.patch").is_file()
        assert not (out / "items" / "odd.item.patch").exists()
        assert stats.patches_written == 1
        assert stats.files_skipped == 1
        assert stats.operations == 1
        assert "Failed to write" in caplog.text
        assert "odd.item.patch" in caplog.text

    def test_default_config_loader(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch(
            "neki_lang.application.services._generation_service.ConfigLoader"
        ) as mock_loader_class:
            service = PatchGenerationService()
        mock_loader_class.assert_called_once_with()
        assert service.config is mock_loader_class.return_value

    def test_built_in_config(self, write_tree, tmp_path):
        root = write_tree({"items/sword.item": '{"category": "sword", "price": 1}'})
        out = tmp_path / "out"
        service = PatchGenerationService(ConfigLoader(tmp_path / "no-config"))
        stats = service.run(GenerationOptions(input_dir=root, output_dir=out))
        assert stats.patches_written == 1
        assert read_json(out / "items" / "sword.item.patch") == [
            {"op": "replace", "path": "/category", "value": "(T) sword"}
        ]
