"""
Summary statistics over parsed session durations.
"""

from typing import Any, Dict, Iterable, Optional, Tuple

import numpy as np

from .models import AggregateResult


def split_duration(seconds: int) -> Tuple[int, int, int]:
    """Split seconds into (hours, minutes, seconds), truncating toward zero.

    A negative total gives components that all carry the sign.
    """
    sign = -1 if seconds < 0 else 1
    minutes, secs = divmod(abs(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    return sign * hours, sign * minutes, sign * secs


def format_duration(seconds: int) -> str:
    """Render seconds as ``"<h>h <m>min <s>s"``."""
    hours, minutes, secs = split_duration(seconds)
    return f"{hours}h {minutes}min {secs}s"


class SessionStats:
    """Statistics over per-file session durations.

    Attributes:
        durations: Session durations in seconds, one per parsed file.
    """

    __slots__ = ("durations",)

    durations: np.ndarray

    def __init__(self, durations: Iterable[int]) -> None:
        self.durations = np.fromiter(durations, dtype=np.int64)

    @classmethod
    def from_result(cls, result: AggregateResult) -> "SessionStats":
        return cls(result.durations)

    def summary(self) -> Optional[Dict[str, Any]]:
        """Get computed statistics.

        Returns:
            Dictionary with count, total, mean, median, longest and shortest
            (seconds), or None if no session was parsed.
        """
        if self.durations.size == 0:
            return None
        return {
            "count": int(self.durations.size),
            "total": int(self.durations.sum()),
            "mean": float(self.durations.mean()),
            "median": float(np.median(self.durations)),
            "longest": int(self.durations.max()),
            "shortest": int(self.durations.min()),
        }

    def format_report(self) -> str:
        """Render the summary as indented report lines."""
        summary = self.summary()
        if summary is None:
            return "No sessions parsed"
        lines = [
            "Session statistics:",
            f"  Sessions: {summary['count']:,}",
            f"  Mean:     {format_duration(int(round(summary['mean'])))}",
            f"  Median:   {format_duration(int(round(summary['median'])))}",
            f"  Longest:  {format_duration(summary['longest'])}",
            f"  Shortest: {format_duration(summary['shortest'])}",
        ]
        return "\n".join(lines)
