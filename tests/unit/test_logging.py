"""Tests for logging configuration."""

import logging
from io import StringIO

import pytest

from playtime_calc.logging_config import (
    configure_logging,
    enable_debug,
    enable_quiet,
    get_logger,
)


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure_logging()


class TestLoggingConfiguration:
    """Test logging setup and configuration."""

    def test_simple_mode_output(self):
        """Test simple mode produces clean output without metadata."""
        stream = StringIO()
        configure_logging(simple_mode=True, stream=stream)
        # Use playtime_calc namespace so the configured handler applies
        logger = get_logger("playtime_calc.test.simple")
        logger.info("Test message")
        output = stream.getvalue()
        assert output == "Test message\n"

    def test_warnings_go_to_error_stream(self):
        out, err = StringIO(), StringIO()
        configure_logging(stream=out, error_stream=err)
        logger = get_logger("playtime_calc.test.split")
        logger.info("record")
        logger.warning("logs: No file parsed")
        logger.error("missing: No such file or directory")
        assert out.getvalue() == "record\n"
        assert err.getvalue() == (
            "WARNING: logs: No file parsed\n"
            "ERROR: missing: No such file or directory\n"
        )

    def test_critical_uses_fatal_prefix(self):
        out, err = StringIO(), StringIO()
        configure_logging(stream=out, error_stream=err)
        logger = get_logger("playtime_calc.test.fatal")
        logger.critical("Fail to get current working directory: No such file or directory")
        assert err.getvalue() == (
            "FATAL ERROR: Fail to get current working directory: No such file or directory\n"
        )
        assert out.getvalue() == ""

    def test_structured_mode_output(self):
        """Test structured mode includes metadata."""
        stream = StringIO()
        configure_logging(simple_mode=False, stream=stream)
        logger = get_logger("playtime_calc.test.structured")
        logger.info("Test message")
        output = stream.getvalue()
        assert "Test message" in output
        assert "INFO" in output

    def test_get_logger_returns_same_instance(self):
        logger1 = get_logger("playtime_calc.test.cache")
        logger2 = get_logger("playtime_calc.test.cache")
        assert logger1 is logger2

    def test_different_names_different_loggers(self):
        logger1 = get_logger("playtime_calc.test.one")
        logger2 = get_logger("playtime_calc.test.two")
        assert logger1 is not logger2


class TestLoggingLevels:
    """Test logging level configuration."""

    def test_set_level(self):
        out, err = StringIO(), StringIO()
        configure_logging(level=logging.WARNING, stream=out, error_stream=err)
        logger = get_logger("playtime_calc.test.level")

        logger.info("Should not appear")
        logger.warning("Should appear")

        assert "Should not appear" not in out.getvalue()
        assert "Should appear" in err.getvalue()

    def test_enable_debug(self):
        stream = StringIO()
        configure_logging(stream=stream)
        enable_debug()
        logger = get_logger("playtime_calc.test.debug")
        logger.debug("Debug message")
        assert "Debug message" in stream.getvalue()

    def test_enable_quiet(self):
        out, err = StringIO(), StringIO()
        configure_logging(stream=out, error_stream=err)
        enable_quiet()
        logger = get_logger("playtime_calc.test.quiet")
        logger.info("Info message")
        logger.warning("Warning message")
        assert "Info message" not in out.getvalue()
        assert "Warning message" in err.getvalue()


class TestCustomFormat:
    """Test custom format strings."""

    def test_custom_format_string(self):
        stream = StringIO()
        configure_logging(format_string="[CUSTOM] %(message)s", stream=stream)
        logger = get_logger("playtime_calc.test.custom")
        logger.info("Hello")
        output = stream.getvalue()
        assert "[CUSTOM]" in output
        assert "Hello" in output


class TestAutoConfiguration:
    """Test automatic configuration on first use."""

    def test_auto_configure_on_get_logger(self):
        logger = get_logger("playtime_calc.test.auto")
        assert logger is not None
