"""Tests for the logging setup module."""

import io
import logging

from src.utils.logger import get_logger, setup_logging, snippet


class TestSetupLogging:
    """Tests for the setup_logging function."""

    def test_setup_creates_handler(self) -> None:
        root = logging.getLogger()
        root.handlers.clear()

        setup_logging("DEBUG")
        assert len(root.handlers) >= 1
        assert root.level == logging.DEBUG

        root.handlers.clear()

    def test_setup_idempotent(self) -> None:
        root = logging.getLogger()
        root.handlers.clear()

        setup_logging("INFO")
        count = len(root.handlers)
        setup_logging("INFO")
        assert len(root.handlers) == count

        root.handlers.clear()

    def test_setup_invalid_level_defaults_to_info(self) -> None:
        root = logging.getLogger()
        root.handlers.clear()

        setup_logging("NONEXISTENT")
        assert root.level == logging.INFO

        root.handlers.clear()


class TestGetLogger:
    """Tests for the get_logger function."""

    def test_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert logger.name == "test.module"
        assert isinstance(logger, logging.Logger)


class TestSnippet:
    """Tests for log snippet truncation."""

    def test_short_text_unchanged(self) -> None:
        assert snippet("name: \"x\"") == "name: \"x\""

    def test_long_text_truncated(self) -> None:
        result = snippet("a" * 150)
        assert result == "a" * 100 + "..."

    def test_custom_length(self) -> None:
        assert snippet("abcdef", length=3) == "abc..."


class TestLogStream:
    """Tests for directing log records to a chosen stream."""

    def test_records_go_to_given_stream(self) -> None:
        root = logging.getLogger()
        saved = root.handlers[:]
        root.handlers.clear()
        stream = io.StringIO()
        try:
            setup_logging("INFO", stream=stream)
            get_logger("test.stream").info("hello stream")
            assert "test.stream - INFO - hello stream" in stream.getvalue()
        finally:
            root.handlers[:] = saved
