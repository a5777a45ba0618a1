"""
Minecraft Playtime Calculator

A Python package that sums the playtime recorded in Minecraft client logs,
covering single log files, logs directories and whole .minecraft
installations including per-version logs.
"""

__version__ = "1.0.0"

from .aggregator import aggregate_directory, aggregate_installation
from .exceptions import FatalError, LogFormatError, LogReadError, PlaytimeCalcError
from .models import AggregateResult, FileOutcome, ParseStatus, PathResult, PathStatus
from .parser import open_log, parse_log_file, parse_log_outcome
from .patterns import (
    ARCHIVED_LOG_PATTERN,
    INSTALLATION_DIR_NAME,
    LATEST_LOG_NAME,
    TIMESTAMP_PATTERN,
    is_archived_log,
)
from .router import is_installation_root, resolve_path
from .scanner import iter_lines, iter_timestamps, scan_line
from .stats import SessionStats, format_duration

__all__ = [
    # Scanning and parsing
    "scan_line",
    "iter_lines",
    "iter_timestamps",
    "open_log",
    "parse_log_file",
    "parse_log_outcome",
    # Discovery and aggregation
    "is_archived_log",
    "aggregate_directory",
    "aggregate_installation",
    "is_installation_root",
    "resolve_path",
    # Result classes
    "ParseStatus",
    "FileOutcome",
    "AggregateResult",
    "PathStatus",
    "PathResult",
    "SessionStats",
    "format_duration",
    # Exceptions
    "PlaytimeCalcError",
    "LogReadError",
    "LogFormatError",
    "FatalError",
    # Patterns
    "TIMESTAMP_PATTERN",
    "ARCHIVED_LOG_PATTERN",
    "LATEST_LOG_NAME",
    "INSTALLATION_DIR_NAME",
]
