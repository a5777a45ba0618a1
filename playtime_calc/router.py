"""
Dispatch of user-supplied paths to the file, directory or installation scanner.
"""

import os
import stat

from .aggregator import aggregate_directory, aggregate_installation
from .exceptions import FatalError, LogFormatError, LogReadError
from .logging_config import get_logger
from .models import AggregateResult, FileOutcome, ParseStatus, PathResult, PathStatus
from .parser import parse_log_file
from .patterns import INSTALLATION_DIR_NAME

# Module logger
logger = get_logger(__name__)


def is_installation_root(path: str) -> bool:
    """Return True if the directory's resolved base name is ``.minecraft``.

    The path is resolved first so that ``.`` or a symlink pointing into an
    installation root is recognized.

    Raises:
        FatalError: If a relative path cannot be resolved because the
            working directory is gone.
    """
    try:
        resolved = os.path.realpath(path)
    except OSError as e:
        raise FatalError(f"Fail to get current working directory: {e.strerror}") from e
    return os.path.basename(resolved) == INSTALLATION_DIR_NAME


def _failure(path: str, status: PathStatus, reason: str) -> PathResult:
    message = f"{path}: {reason}"
    if status is PathStatus.NOTHING_PARSED:
        logger.warning("%s", message)
    else:
        logger.error("%s", message)
    return PathResult(path, status, message=message)


def _resolve_file(path: str) -> PathResult:
    try:
        duration = parse_log_file(path)
    except LogReadError as e:
        return _failure(path, PathStatus.SYSTEM_ERROR, e.strerror)
    except LogFormatError:
        return _failure(path, PathStatus.FORMAT_ERROR, "Not a minecraft log file")
    outcome = FileOutcome(path, ParseStatus.PARSED, duration=duration)
    return PathResult(path, PathStatus.OK, AggregateResult([outcome]))


def _resolve_directory(path: str) -> PathResult:
    if is_installation_root(path):
        scan = aggregate_installation
    else:
        scan = aggregate_directory
    try:
        result = scan(path)
    except LogReadError as e:
        return _failure(path, PathStatus.SYSTEM_ERROR, e.strerror)
    if result.file_count == 0:
        return _failure(path, PathStatus.NOTHING_PARSED, "No file parsed")
    return PathResult(path, PathStatus.OK, result)


def resolve_path(path: str) -> PathResult:
    """Classify a path and collect the sessions it holds.

    A regular file is parsed as a single log, a directory named
    ``.minecraft`` is scanned as an installation, and any other directory
    is scanned as a flat log directory. Failures are logged and returned
    as a non-OK PathResult rather than raised.

    Args:
        path: File or directory path.

    Returns:
        PathResult whose ``result`` only counts toward totals when ``ok``.

    Raises:
        FatalError: If the working directory needed to resolve the path is gone.
    """
    try:
        mode = os.stat(path).st_mode
    except OSError as e:
        return _failure(path, PathStatus.SYSTEM_ERROR, e.strerror or str(e))

    if stat.S_ISDIR(mode):
        return _resolve_directory(path)
    if stat.S_ISREG(mode):
        return _resolve_file(path)
    return _failure(path, PathStatus.NOT_FILE_OR_DIR, "Not a directory or a regular file")
