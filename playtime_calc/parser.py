"""
Session duration extraction from a single log file.
"""

import gzip
import zlib
from typing import BinaryIO

from .exceptions import LogFormatError, LogReadError
from .logging_config import get_logger
from .models import FileOutcome, ParseStatus
from .patterns import GZIP_MAGIC
from .scanner import iter_timestamps

# Module logger
logger = get_logger(__name__)

# Errors raised when a gzip stream is cut short or damaged mid-way
TRUNCATION_ERRORS = (EOFError, zlib.error, gzip.BadGzipFile)


def open_log(path: str) -> BinaryIO:
    """Open a log file for binary reading, decompressing gzip content.

    Compression is detected from the leading magic bytes, never from the
    file name, so a renamed archive or a plain ``.gz`` file both work.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(path, "rb") as raw:
        magic = raw.read(len(GZIP_MAGIC))
    if magic == GZIP_MAGIC:
        return gzip.open(path, "rb")
    return open(path, "rb")


def parse_log_file(path: str) -> int:
    """Compute the session duration recorded by one log file.

    The duration is the last timestamp minus the first; lines without a
    timestamp are skipped. A compressed stream that breaks off part way is
    read up to the break. A session spanning midnight yields a negative
    value, which is returned unchanged.

    Args:
        path: Path to a plain or gzip-compressed log file.

    Returns:
        Duration in seconds.

    Raises:
        LogReadError: If the file cannot be opened, or reading it fails
            for a reason other than damaged compressed data.
        LogFormatError: If no line carries a timestamp.
    """
    try:
        stream = open_log(path)
    except OSError as e:
        raise LogReadError.from_os_error(e, path) from e

    with stream:
        start = end = None
        try:
            for timestamp in iter_timestamps(stream):
                if start is None:
                    start = timestamp
                end = timestamp
        except TRUNCATION_ERRORS as e:
            # A cut-off archive still counts up to the break
            logger.debug("%s: compressed stream ended early: %s", path, e)
        except OSError as e:
            raise LogReadError.from_os_error(e, path) from e

    if start is None:
        raise LogFormatError("Not a minecraft log file", file_path=path)

    duration = end - start
    logger.info("%s: %d", path, duration)
    return duration


def parse_log_outcome(path: str) -> FileOutcome:
    """Parse a log file, folding failures into a FileOutcome."""
    try:
        duration = parse_log_file(path)
    except LogReadError as e:
        logger.debug("Skipping %s: %s", path, e.strerror)
        return FileOutcome(path, ParseStatus.SYSTEM_FAILURE, reason=e.strerror)
    except LogFormatError as e:
        logger.debug("Skipping %s: %s", path, e.args[0])
        return FileOutcome(path, ParseStatus.FORMAT_FAILURE, reason=e.args[0])
    return FileOutcome(path, ParseStatus.PARSED, duration=duration)
