# tests/unit/infrastructure/logging/test_setup.py

"""Tests for logging setup and the run summary"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import INFO
from logging import StreamHandler
from logging import WARNING
from logging import getLogger

# Local imports
from neki_lang.application.models.generation_stats import GenerationStats
from neki_lang.infrastructure.logging import log_run_summary
from neki_lang.infrastructure.logging import setup_logging


def installed_handlers(handler_type):
    return [h for h in getLogger().handlers if type(h) is handler_type]


class TestSetupLogging:
    """Test handler installation"""

    def test_console_formatter_includes_timestamp(self):
        assert setup_logging() is None
        (console,) = installed_handlers(StreamHandler)
        assert "%(asctime)s" in console.formatter._fmt
        assert "%(levelname)s" in console.formatter._fmt
        assert "%(message)s" in console.formatter._fmt
        assert getLogger().level == INFO

    def test_debug_level(self):
        setup_logging(log_level="DEBUG")
        assert getLogger().level == DEBUG
        assert installed_handlers(StreamHandler)[0].level == DEBUG

    def test_level_name_is_case_insensitive(self):
        setup_logging(log_level="warning")
        assert getLogger().level == WARNING
        assert installed_handlers(StreamHandler)[0].level == WARNING

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(log_level="LOUD")
        assert getLogger().level == INFO

    def test_silent_has_no_console(self):
        setup_logging(silent=True)
        assert installed_handlers(StreamHandler) == []

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        assert setup_logging(log_file=str(log_file), silent=True) == str(log_file)
        (file_handler,) = installed_handlers(FileHandler)
        assert file_handler.level == DEBUG
        assert "%(name)s" in file_handler.formatter._fmt

        getLogger("neki_lang.test").debug("debug record")
        file_handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging to file" in text
        assert "neki_lang.test - DEBUG - debug record" in text

    def test_file_gets_debug_while_console_stays_info(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "run.log"))
        assert getLogger().level == DEBUG
        assert installed_handlers(StreamHandler)[0].level == INFO

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        setup_logging()
        assert len(installed_handlers(StreamHandler)) == 1


class TestRunSummary:
    """Test the final summary block"""

    def test_summary_contents(self, caplog):
        caplog.set_level(INFO)
        stats = GenerationStats(
            files_read=1200,
            patches_written=3,
            files_skipped=1197,
            operations=42,
            reading_seconds=0.5,
            generation_seconds=0.25,
            writing_seconds=0.25,
        )
        log_run_summary(stats, "/tmp/out")
        assert "GENERATION COMPLETE" in caplog.text
        assert "Files read: 1,200" in caplog.text
        assert "Patch files written: 3" in caplog.text
        assert "Replace operations: 42" in caplog.text
        assert "Total time: 1.000s" in caplog.text
        assert "Output: /tmp/out" in caplog.text

    def test_total_seconds(self):
        stats = GenerationStats(reading_seconds=1.0, generation_seconds=2.0, writing_seconds=0.5)
        assert stats.total_seconds == 3.5
