"""
Tests for logging configuration.

Tests the centralized logging setup including:
- Log level configuration
- Standard library logging interception
- Third-party logger configuration
- JSON vs console format
- Script logging helper
"""

import io
import json
import logging
from datetime import datetime, timezone
from types import SimpleNamespace


class TestInterceptHandler:
    """Tests for InterceptHandler class."""

    def test_intercept_handler_routes_to_loguru(self):
        """Test that InterceptHandler routes stdlib logs to Loguru."""
        from core.logger import InterceptHandler

        handler = InterceptHandler()
        assert isinstance(handler, logging.Handler)

    def test_intercept_handler_emit(self):
        """Test that emit method processes log records."""
        from core.logger import InterceptHandler

        handler = InterceptHandler()
        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="Test message",
            args=(),
            exc_info=None,
        )

        # Should not raise
        handler.emit(record)


class TestConfigureThirdPartyLoggers:
    """Tests for configure_third_party_loggers function."""

    def test_configures_httpx_logger(self):
        """Test that httpx logger is set to WARNING."""
        from core.logger import configure_third_party_loggers

        configure_third_party_loggers()

        httpx_logger = logging.getLogger("httpx")
        assert httpx_logger.level == logging.WARNING

    def test_configures_httpcore_logger(self):
        """Test that httpcore logger is set to WARNING."""
        from core.logger import configure_third_party_loggers

        configure_third_party_loggers()

        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_configures_pillow_logger(self):
        """Test that Pillow logger is set to WARNING."""
        from core.logger import configure_third_party_loggers

        configure_third_party_loggers()

        assert logging.getLogger("PIL").level == logging.WARNING


class TestConfigureScriptLogging:
    """Tests for configure_script_logging function."""

    def test_configure_script_logging_default_level(self):
        """Test script logging with default INFO level."""
        from core.logger import configure_script_logging, logger

        # Should not raise
        configure_script_logging()

    def test_configure_script_logging_debug_level(self):
        """Test script logging with DEBUG level."""
        from core.logger import configure_script_logging

        # Should not raise
        configure_script_logging(level="DEBUG")

    def test_configure_script_logging_invalid_level_defaults_to_info(self):
        """Test that invalid log level defaults to INFO."""
        from core.logger import configure_script_logging

        # Should not raise, should default to INFO
        configure_script_logging(level="INVALID")

    def test_configure_script_logging_json_format(self):
        """Test script logging with JSON format."""
        from core.logger import configure_script_logging

        # Should not raise
        configure_script_logging(json_format=True)


class TestInterceptStandardLogging:
    """Tests for intercept_standard_logging function."""

    def test_intercept_standard_logging(self):
        """Test that standard logging is intercepted."""
        from core.logger import intercept_standard_logging

        # Should not raise
        intercept_standard_logging()

        # Root logger should have InterceptHandler
        root_logger = logging.getLogger()
        handler_types = [type(h).__name__ for h in root_logger.handlers]
        assert "InterceptHandler" in handler_types


class TestSetupLogger:
    """Tests for setup_logger function."""

    def test_setup_logger_creates_handlers(self):
        """Test that setup_logger creates log handlers."""
        from core.logger import setup_logger, logger

        # Reset logger
        logger.remove()

        # Setup should create handlers
        setup_logger()

        # Should have at least one handler
        assert len(logger._core.handlers) >= 1

    def test_setup_logger_idempotent(self):
        """Test that setup_logger is idempotent (doesn't add duplicate handlers)."""
        from core.logger import setup_logger, logger

        # Call setup multiple times
        setup_logger()
        handlers_count_1 = len(logger._core.handlers)

        setup_logger()
        handlers_count_2 = len(logger._core.handlers)

        # Handler count should not increase
        assert handlers_count_2 == handlers_count_1


class TestFormatExceptionShort:
    """Tests for format_exception_short function."""

    def test_format_exception_with_context(self):
        """Test formatting exception with context."""
        from core.logger import format_exception_short

        try:
            raise ValueError("Test error")
        except ValueError as e:
            result = format_exception_short(e, "Test context")

            assert "Test context" in result
            assert "ValueError" in result
            assert "Test error" in result

    def test_format_exception_without_context(self):
        """Test formatting exception without context."""
        from core.logger import format_exception_short

        try:
            raise RuntimeError("Another error")
        except RuntimeError as e:
            result = format_exception_short(e)

            assert "RuntimeError" in result
            assert "Another error" in result


class TestLoggerExports:
    """Tests for module exports."""

    def test_all_exports_available(self):
        """Test that all expected exports are available."""
        from core import logger as logger_module

        expected_exports = [
            "logger",
            "format_exception_short",
            "configure_script_logging",
            "configure_third_party_loggers",
            "intercept_standard_logging",
            "serialize_log_record",
            "setup_logger",
            "InterceptHandler",
        ]

        for export in expected_exports:
            assert hasattr(logger_module, export), f"Missing export: {export}"


class TestSerializeLogRecord:
    """Tests for the JSON log line serializer."""

    def _record(self, **extra):
        return {
            "time": datetime(2023, 3, 21, 10, 5, 9, tzinfo=timezone.utc),
            "level": SimpleNamespace(name="WARNING"),
            "message": "Image request failed for /fixation/img",
            "module": "gateway",
            "function": "request_image",
            "line": 42,
            "exception": None,
            "extra": extra,
        }

    def test_serialize_flattens_extra_fields(self):
        """Bound extra fields end up at the top level of the JSON line."""
        from core.logger import serialize_log_record

        line = serialize_log_record(self._record(path="/fixation/img"))
        payload = json.loads(line.replace("{{", "{").replace("}}", "}"))

        assert payload["level"] == "WARNING"
        assert payload["function"] == "request_image"
        assert payload["path"] == "/fixation/img"

    def test_serialize_through_loguru_sink(self):
        """Angle brackets and unserializable extras still give one valid JSON line."""
        from core.logger import logger, serialize_log_record

        buffer = io.StringIO()
        handler_id = logger.add(buffer, format=serialize_log_record, colorize=False)
        try:
            logger.bind(target=object()).warning("Response from <fixation> is not an image")
        finally:
            logger.remove(handler_id)

        payload = json.loads(buffer.getvalue().strip().splitlines()[-1])

        assert payload["message"] == "Response from <fixation> is not an image"
        assert payload["level"] == "WARNING"
        assert payload["target"].startswith("<object object")
