"""
Tests for logging_manager module.

Tests QuireLogger file output, the NullLogger null object and the
safe_logger helper used by library code.
"""
import pytest
from unittest.mock import MagicMock

from quire.core.logging_manager import (
    NullLogger,
    QuireLogger,
    safe_logger,
)


@pytest.fixture
def quire_logger(tmp_dir):
    """QuireLogger writing into a temporary directory."""
    logger = QuireLogger(tmp_dir / "logs", component_name="test_component")
    yield logger
    logger.close()


class TestQuireLogger:
    """Tests for QuireLogger class."""

    def test_creates_log_directory(self, tmp_dir):
        """Log directory is created on initialization."""
        logger = QuireLogger(tmp_dir / "nested" / "logs", component_name="mkdir_test")
        try:
            assert (tmp_dir / "nested" / "logs").is_dir()
        finally:
            logger.close()

    def test_operation_written_to_component_log(self, quire_logger, tmp_dir):
        """log_operation writes a structured line to <component>.log."""
        quire_logger.log_operation("build", {"documents": 3})
        quire_logger.close()

        content = (tmp_dir / "logs" / "test_component.log").read_text(encoding="utf-8")
        assert "OPERATION - build" in content
        assert '"documents": 3' in content

    def test_debug_message_without_details(self, quire_logger, tmp_dir):
        """log_debug without details writes the bare message."""
        quire_logger.log_debug("Read posts/a.md")
        quire_logger.close()

        content = (tmp_dir / "logs" / "test_component.log").read_text(encoding="utf-8")
        assert "DEBUG - Read posts/a.md" in content

    def test_error_written_to_errors_log(self, quire_logger, tmp_dir):
        """log_error writes type, message and context to errors.log."""
        quire_logger.log_error(ValueError("bad date"), {"file": "a.md"})
        quire_logger.close()

        content = (tmp_dir / "logs" / "errors.log").read_text(encoding="utf-8")
        assert "ValueError: bad date" in content
        assert "file=a.md" in content

    def test_log_cli_error_format(self, quire_logger):
        """log_cli_error returns a one-line message for the terminal."""
        message = quire_logger.log_cli_error(KeyError("x"))
        assert message.startswith("❌ KeyError")

    def test_log_cli_error_with_traceback(self, quire_logger):
        """Verbose mode appends a traceback."""
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            message = quire_logger.log_cli_error(e, show_traceback=True)
        assert "RuntimeError: boom" in message
        assert "Traceback" in message


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_null_logger_methods_are_no_ops(self):
        """Every logging method accepts its arguments and does nothing."""
        logger = NullLogger()
        logger.log_operation("test_op", {"key": "value"})
        logger.log_error(ValueError("test error"), {"context": "test"})
        logger.log_debug("debug message", {"key": "value"})
        logger.log_info("info message")
        logger.log_warning("warning message", {"key": "value"})

    def test_null_logger_log_cli_error_returns_formatted(self):
        """NullLogger.log_cli_error should return formatted error string."""
        result = NullLogger().log_cli_error(ValueError("test error"), {"context": "test"})
        assert "ValueError" in result
        assert "test error" in result


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_safe_logger_returns_logger_when_provided(self):
        """safe_logger should return the same logger when not None."""
        mock_logger = MagicMock(spec=QuireLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_safe_logger_returns_null_logger_when_none(self):
        """safe_logger should return NullLogger when logger is None."""
        assert isinstance(safe_logger(None), NullLogger)

    def test_safe_logger_null_logger_is_singleton(self):
        """safe_logger should return the same NullLogger instance."""
        assert safe_logger(None) is safe_logger(None)
