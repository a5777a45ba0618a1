"""
Logging configuration for the playtime calculator.

This module provides a centralized logging configuration used throughout
the playtime_calc package. By default, per-file records go to stdout in a
plain format that reads like print() output, while warnings and errors go
to stderr prefixed with their level name ("FATAL ERROR" for critical).

Usage:
    from playtime_calc.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("%s: %d", path, duration)

To enable structured logging with timestamps:
    from playtime_calc.logging_config import configure_logging
    import logging

    configure_logging(level=logging.DEBUG, simple_mode=False)
"""

import logging
import sys
from typing import Dict, Optional, TextIO

# Format strings
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(message)s"
DIAGNOSTIC_FORMAT = "%(label)s: %(message)s"

# Diagnostic prefixes that differ from the level name
LEVEL_LABELS = {logging.CRITICAL: "FATAL ERROR"}

PACKAGE_LOGGER = "playtime_calc"

# Module-level logger cache
_loggers: Dict[str, logging.Logger] = {}
_configured: bool = False


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below a threshold level."""

    def __init__(self, threshold: int) -> None:
        super().__init__()
        self.threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.threshold


class _LabelFilter(logging.Filter):
    """Attach the diagnostic prefix for a record as ``label``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.label = LEVEL_LABELS.get(record.levelno, record.levelname)
        return True


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
    error_stream: Optional[TextIO] = None,
    simple_mode: bool = True,
) -> None:
    """
    Configure the package logger for playtime calculation.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string for both handlers. If None,
            records below WARNING use SIMPLE_FORMAT and the rest use
            DIAGNOSTIC_FORMAT (or DEFAULT_FORMAT when simple_mode is False).
        stream: Output stream for records below WARNING (default: sys.stdout).
        error_stream: Output stream for WARNING and above (default: sys.stderr).
            Pass the same object as ``stream`` to collect everything in one place.
        simple_mode: If True, use formats without timestamps.
    """
    global _configured

    if format_string is not None:
        out_format = err_format = format_string
    elif simple_mode:
        out_format, err_format = SIMPLE_FORMAT, DIAGNOSTIC_FORMAT
    else:
        out_format = err_format = DEFAULT_FORMAT

    out_handler = logging.StreamHandler(stream or sys.stdout)
    out_handler.setFormatter(logging.Formatter(out_format))
    out_handler.addFilter(_BelowLevelFilter(logging.WARNING))

    err_handler = logging.StreamHandler(error_stream or sys.stderr)
    err_handler.setFormatter(logging.Formatter(err_format))
    err_handler.setLevel(logging.WARNING)
    err_handler.addFilter(_LabelFilter())

    # Configure playtime_calc namespace
    root_logger = logging.getLogger(PACKAGE_LOGGER)
    root_logger.handlers.clear()
    root_logger.addHandler(out_handler)
    root_logger.addHandler(err_handler)
    root_logger.setLevel(level)
    root_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__).

    Returns:
        Configured logger instance.

    Example:
        logger = get_logger(__name__)
        logger.info("%d files parsed", count)
    """
    global _configured

    # Auto-configure on first use if not already configured
    if not _configured:
        configure_logging()

    if name not in _loggers:
        logger = logging.getLogger(name)
        _loggers[name] = logger

    return _loggers[name]


def set_level(level: int) -> None:
    """
    Set the logging level for all playtime_calc loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    root_logger = logging.getLogger(PACKAGE_LOGGER)
    root_logger.setLevel(level)


def enable_debug() -> None:
    """Enable debug-level logging (also reports skipped files)."""
    set_level(logging.DEBUG)


def enable_quiet() -> None:
    """Set logging to WARNING level (suppress per-file records)."""
    set_level(logging.WARNING)
