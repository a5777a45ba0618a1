"""
Custom exceptions for playtime calculation.

This module defines a hierarchy of exceptions that separates failures to
reach a log (filesystem level) from logs that were read but contain no
recognizable timestamp.
"""

from typing import Optional


class PlaytimeCalcError(Exception):
    """Base exception for all playtime calculation errors."""

    pass


class LogReadError(PlaytimeCalcError):
    """Raised when a log file or directory cannot be opened, listed or read.

    Attributes:
        file_path: Path that failed.
        strerror: Operating system description of the failure, if known.
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        strerror: Optional[str] = None,
    ) -> None:
        self.file_path = file_path
        self.strerror = strerror
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.file_path:
            return f"{base} (file: {self.file_path})"
        return base

    @classmethod
    def from_os_error(cls, exc: BaseException, file_path: str) -> "LogReadError":
        """Build from an OSError (or a decompression error) raised for file_path."""
        strerror = getattr(exc, "strerror", None) or str(exc) or type(exc).__name__
        return cls(strerror, file_path=file_path, strerror=strerror)


class LogFormatError(PlaytimeCalcError):
    """Raised when a log file was read but no line carries a timestamp.

    Attributes:
        file_path: Path to the file that failed to parse.
    """

    def __init__(self, message: str, file_path: Optional[str] = None) -> None:
        self.file_path = file_path
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.file_path:
            return f"{base} (file: {self.file_path})"
        return base


class FatalError(PlaytimeCalcError):
    """Raised when the working directory cannot be determined."""

    pass
