"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from pattern_catalogue.config.schemas.logging_schema import LogFileConfig, LoggingConfig
from pattern_catalogue.infrastructure.logging.logger import (
    HANDLER_MARKER,
    get_logger,
    setup_logging,
)


def catalogue_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, HANDLER_MARKER, False)]


class TestSetupLogging:
    """Test root logger configuration."""

    def test_stderr_destination(self):
        setup_logging(LoggingConfig(level="DEBUG", destination="stderr"))

        assert logging.getLogger().level == logging.DEBUG
        handlers = catalogue_handlers()
        assert [type(h) for h in handlers] == [logging.StreamHandler]

    def test_file_destination(self, tmp_path):
        log_file = tmp_path / "logs" / "catalogue.log"
        config = LoggingConfig(
            level="INFO",
            destination="file",
            file=LogFileConfig(path=str(log_file), max_size_mb=1, backup_count=2),
        )

        setup_logging(config)
        get_logger("tests.logger").info("File logging works", answer=42)
        for handler in catalogue_handlers():
            handler.flush()

        content = log_file.read_text()
        assert "File logging works" in content
        assert "answer=42" in content

    def test_both_destinations(self, tmp_path):
        config = LoggingConfig(
            destination="both",
            file=LogFileConfig(path=str(tmp_path / "catalogue.log")),
        )
        setup_logging(config)
        assert {type(h) for h in catalogue_handlers()} == {logging.StreamHandler, RotatingFileHandler}

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(LoggingConfig(destination="stderr"))
        setup_logging(LoggingConfig(destination="stderr"))
        assert len(catalogue_handlers()) == 1

    def test_logs_never_reach_stdout(self, capsys):
        setup_logging(LoggingConfig(level="DEBUG", destination="stderr"))
        get_logger("tests.logger").warning("Something odd")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Something odd" in captured.err

    def test_level_filters_records(self, capsys):
        setup_logging(LoggingConfig(level="ERROR", destination="stderr"))
        get_logger("tests.logger").info("Too quiet")
        assert "Too quiet" not in capsys.readouterr().err
