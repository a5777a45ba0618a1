"""
Result data classes for playtime calculation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ParseStatus(Enum):
    """Outcome of parsing one log file."""

    PARSED = "parsed"
    SYSTEM_FAILURE = "system_failure"
    FORMAT_FAILURE = "format_failure"


@dataclass
class FileOutcome:
    """What happened to a single log file.

    Attributes:
        path: Path of the file.
        status: Parse status.
        duration: Session duration in seconds; only set when PARSED.
        reason: Failure description for skipped files.
    """

    path: str
    status: ParseStatus
    duration: Optional[int] = None
    reason: Optional[str] = None

    @property
    def parsed(self) -> bool:
        return self.status is ParseStatus.PARSED


@dataclass
class AggregateResult:
    """Per-file outcomes collected from a file, directory or installation.

    Counts and totals are derived from the outcomes, so a result with files
    present but none parsed reports ``file_count == 0``.
    """

    outcomes: List[FileOutcome] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.parsed)

    @property
    def total_duration(self) -> int:
        return sum(outcome.duration for outcome in self.outcomes if outcome.parsed)

    @property
    def durations(self) -> List[int]:
        return [outcome.duration for outcome in self.outcomes if outcome.parsed]

    @property
    def skipped(self) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.parsed]

    def add(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)

    def __add__(self, other: "AggregateResult") -> "AggregateResult":
        if not isinstance(other, AggregateResult):
            return NotImplemented
        return AggregateResult(self.outcomes + other.outcomes)


class PathStatus(Enum):
    """Classification of a resolved input path."""

    OK = "ok"
    SYSTEM_ERROR = "system_error"
    FORMAT_ERROR = "format_error"
    NOT_FILE_OR_DIR = "not_file_or_dir"
    NOTHING_PARSED = "nothing_parsed"


@dataclass
class PathResult:
    """Result of resolving one input path.

    Attributes:
        path: The input path as given.
        status: How the input resolved.
        result: Collected outcomes; only counted toward totals when OK.
        message: Diagnostic line for non-OK statuses.
    """

    path: str
    status: PathStatus
    result: AggregateResult = field(default_factory=AggregateResult)
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is PathStatus.OK
