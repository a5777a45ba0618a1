"""
Log directory and installation scanning.

Both aggregators work on explicit path values and never change the process
working directory.
"""

import os
import stat

from .exceptions import LogReadError
from .logging_config import get_logger
from .models import AggregateResult
from .parser import parse_log_outcome
from .patterns import LATEST_LOG_NAME, LOGS_DIR_NAME, VERSIONS_DIR_NAME, is_archived_log

# Module logger
logger = get_logger(__name__)


def _list_directory(path: str) -> list:
    try:
        return sorted(os.listdir(path))
    except OSError as e:
        raise LogReadError.from_os_error(e, path) from e


def aggregate_directory(path: str) -> AggregateResult:
    """Sum the sessions recorded in a flat log directory.

    Every archived log (``dddd-dd-dd-d.log.gz``) is parsed, and ``latest.log``
    is always attempted whether or not it shows up in the listing. Files that
    cannot be read or carry no timestamp are recorded as skipped and do not
    stop the scan.

    Args:
        path: Directory to scan.

    Returns:
        AggregateResult with one outcome per attempted file.

    Raises:
        LogReadError: If the directory itself cannot be listed.
    """
    entries = _list_directory(path)
    result = AggregateResult()

    for name in entries:
        if is_archived_log(name):
            result.add(parse_log_outcome(os.path.join(path, name)))

    result.add(parse_log_outcome(os.path.join(path, LATEST_LOG_NAME)))

    logger.debug(
        "Scanned %s: %d of %d files parsed", path, result.file_count, len(result.outcomes)
    )
    return result


def _aggregate_optional_directory(path: str) -> AggregateResult:
    """Like aggregate_directory, but a missing or unreadable directory contributes nothing."""
    try:
        return aggregate_directory(path)
    except LogReadError as e:
        logger.debug("Skipping %s: %s", path, e.strerror)
        return AggregateResult()


def aggregate_installation(path: str) -> AggregateResult:
    """Sum the sessions recorded across a ``.minecraft`` installation.

    Scans ``<path>/logs`` and, when present, ``<path>/versions/<name>/logs``
    for every version directory. Missing log directories and a missing
    ``versions`` directory are not errors.

    Args:
        path: Installation root directory.

    Returns:
        Combined AggregateResult.

    Raises:
        LogReadError: If the installation root is missing or not a directory.
    """
    # logs/ and versions/ are reached by name; the root is never listed
    try:
        mode = os.stat(path).st_mode
    except OSError as e:
        raise LogReadError.from_os_error(e, path) from e
    if not stat.S_ISDIR(mode):
        raise LogReadError("Not a directory", file_path=path, strerror="Not a directory")

    result = _aggregate_optional_directory(os.path.join(path, LOGS_DIR_NAME))

    versions_dir = os.path.join(path, VERSIONS_DIR_NAME)
    try:
        versions = _list_directory(versions_dir)
    except LogReadError as e:
        logger.debug("No versions scanned in %s: %s", path, e.strerror)
        return result

    for name in versions:
        version_dir = os.path.join(versions_dir, name)
        if not os.path.isdir(version_dir):
            continue
        result = result + _aggregate_optional_directory(os.path.join(version_dir, LOGS_DIR_NAME))

    return result
