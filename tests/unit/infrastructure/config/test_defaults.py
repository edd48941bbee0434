# tests/unit/infrastructure/config/test_defaults.py

"""Tests for writing the built-in configuration files"""

# Third party imports
import pytest

# Local imports
from neki_lang.core.domain.exceptions import ConfigError
from neki_lang.infrastructure.config import ConfigLoader
from neki_lang.infrastructure.config import init_config_files
from neki_lang.infrastructure.config import read_default_config


class TestInitConfigFiles:
    """Test init_config_files"""

    def test_writes_both_files(self, tmp_path):
        written = init_config_files(tmp_path)
        assert written == [tmp_path / "dirs_config.json", tmp_path / "regex_config.json"]
        for path in written:
            assert path.read_text(encoding="utf-8") == read_default_config(path.name)

    def test_written_files_load_as_external(self, tmp_path):
        init_config_files(tmp_path)
        loader = ConfigLoader(tmp_path)
        assert loader.source_summary == "Using external configurations"

    def test_creates_target_directory(self, tmp_path):
        target = tmp_path / "nested" / "config"
        init_config_files(target)
        assert (target / "regex_config.json").is_file()

    def test_refuses_when_all_exist(self, tmp_path):
        init_config_files(tmp_path)
        (tmp_path / "dirs_config.json").write_text('["mine"]', encoding="utf-8")
        with pytest.raises(ConfigError, match="already exist.*--force"):
            init_config_files(tmp_path)
        assert (tmp_path / "dirs_config.json").read_text(encoding="utf-8") == '["mine"]'

    def test_writes_only_missing_file(self, tmp_path):
        (tmp_path / "dirs_config.json").write_text('["mine"]', encoding="utf-8")
        written = init_config_files(tmp_path)
        assert written == [tmp_path / "regex_config.json"]
        assert (tmp_path / "dirs_config.json").read_text(encoding="utf-8") == '["mine"]'

    def test_force_overwrites(self, tmp_path):
        (tmp_path / "dirs_config.json").write_text('["mine"]', encoding="utf-8")
        (tmp_path / "regex_config.json").write_text("{}", encoding="utf-8")
        written = init_config_files(tmp_path, force=True)
        assert len(written) == 2
        assert (tmp_path / "dirs_config.json").read_text(
            encoding="utf-8"
        ) == read_default_config("dirs_config.json")

    def test_accepts_string_path(self, tmp_path):
        init_config_files(str(tmp_path))
        assert (tmp_path / "dirs_config.json").is_file()
