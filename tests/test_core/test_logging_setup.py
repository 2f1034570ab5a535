"""Tests for logging setup."""

import json
import logging

import pytest

from typonaut.core.errors import SourceLoadError, TyponautError
from typonaut.core.logging import format_timestamp_ms, setup_logging
from typonaut.core.structlog_logger import get_struct_logger_with_context


class TestSetupLogging:
    """Test configuring logging handlers."""

    def test_level_from_name(self):
        """Test level names are accepted case-insensitively."""
        setup_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_name(self):
        """Test unknown level names fall back to WARNING."""
        setup_logging(level="chatty")

        assert logging.getLogger().level == logging.WARNING

    def test_single_console_handler(self):
        """Test repeated setup does not stack handlers."""
        setup_logging(level=logging.INFO)
        setup_logging(level=logging.INFO)

        assert len(logging.getLogger().handlers) == 1

    def test_http_loggers_quiet(self):
        """Test HTTP client loggers stay at WARNING in debug mode."""
        setup_logging(level=logging.DEBUG)

        assert logging.getLogger("urllib3").level == logging.WARNING
        assert logging.getLogger("requests").level == logging.WARNING

    def test_log_file_receives_json(self, tmp_path):
        """Test the log file gets one JSON object per record."""
        log_file = tmp_path / "logs" / "typonaut.log"
        setup_logging(level=logging.INFO, log_file=log_file)

        logging.getLogger("typonaut.test").info("Loaded %d layers", 3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert record["event"] == "Loaded 3 layers"
        assert record["level"] == "info"
        assert record["logger"] == "typonaut.test"

    def test_struct_logger_context(self, tmp_path):
        """Test bound context is written with structlog events."""
        log_file = tmp_path / "typonaut.log"
        setup_logging(level=logging.INFO, log_file=log_file)

        logger = get_struct_logger_with_context("typonaut.test", source="a.keymap")
        logger.info("keymap_loaded", layers=2)
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert record["event"] == "keymap_loaded"
        assert record["source"] == "a.keymap"
        assert record["layers"] == 2


def test_format_timestamp_ms():
    """Test microseconds are cut to milliseconds."""
    event = format_timestamp_ms(None, "info", {"timestamp_raw": "12:00:00.123456"})

    assert event == {"timestamp": "12:00:00.123"}


def test_error_hierarchy():
    """Test errors share a base class and keep their source."""
    error = SourceLoadError("File not found: a.keymap", source="a.keymap")

    assert isinstance(error, TyponautError)
    assert error.source == "a.keymap"
    with pytest.raises(TyponautError):
        raise error
