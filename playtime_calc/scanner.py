"""
Streaming timestamp extraction from line-oriented log streams.

Logs are read as bytes so that undecodable content never stops a scan.
Both ``\\r`` and ``\\n`` end a line, and runs of terminators are absorbed, so
CRLF files and blank lines yield no empty lines.
"""

import re
from typing import BinaryIO, Iterator, Optional

from .patterns import TIMESTAMP_PATTERN, TIMESTAMP_WIDTH

CHUNK_SIZE = 64 * 1024

_TERMINATORS = re.compile(rb"[\r\n]+")


def scan_line(line: bytes) -> Optional[int]:
    """Extract the timestamp at the start of a log line.

    Args:
        line: One log line without its terminator.

    Returns:
        Seconds since midnight, ``(hour * 60 + minute) * 60 + second``,
        or None if the line does not start with ``[HH:MM:SS]``.
    """
    match = TIMESTAMP_PATTERN.match(line)
    if match is None:
        return None
    hour, minute, second = (int(field) for field in match.groups())
    return (hour * 60 + minute) * 60 + second


def iter_lines(
    stream: BinaryIO, chunk_size: int = CHUNK_SIZE, max_length: Optional[int] = None
) -> Iterator[bytes]:
    """Yield the non-empty lines of a binary stream.

    The stream is consumed in chunks and only the new chunk is split, so a
    line spanning many chunks is reassembled in linear time.

    Args:
        stream: Binary stream to read.
        chunk_size: Bytes requested per read.
        max_length: If given, keep only this many leading bytes of each
            line; the rest of the line is read past without being stored.
    """
    pieces = []
    stored = 0
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        for index, part in enumerate(_TERMINATORS.split(chunk)):
            # Every part after the first follows a terminator
            if index and pieces:
                yield b"".join(pieces)
                pieces = []
                stored = 0
            if not part:
                continue
            if max_length is not None:
                part = part[: max_length - stored]
                if not part:
                    continue
            pieces.append(part)
            stored += len(part)
    if pieces:
        yield b"".join(pieces)


def iter_timestamps(stream: BinaryIO) -> Iterator[int]:
    """Yield the timestamp of every line that carries one, in stream order."""
    for line in iter_lines(stream, max_length=TIMESTAMP_WIDTH):
        timestamp = scan_line(line)
        if timestamp is not None:
            yield timestamp
