#!/usr/bin/env python3
"""
Minecraft Playtime Calculator

Sums the playtime recorded in Minecraft client logs. Each argument may be
a single log file, a logs directory, or a .minecraft directory; the latter
also covers the per-version logs under versions/.

Usage:
    mc-playtime-calc [options] [<log file>] [<logs dir>] [<.minecraft dir>] ...
    mc-playtime-calc .
    mc-playtime-calc ./.minecraft --stats
    mc-playtime-calc ./version1/logs ./version2/logs --quiet
"""

import logging
import sys
from typing import List, Optional

from . import __version__
from .exceptions import FatalError
from .logging_config import enable_debug, enable_quiet, get_logger, set_level
from .models import AggregateResult
from .router import resolve_path
from .stats import SessionStats, format_duration

logger = get_logger(__name__)

USAGE = """A tool to calculate your playtime in minecraft by parsing logs
Usage:
    mc-playtime-calc [options] [<log file>] [<logs dir>] [<.minecraft dir>] ...
Options:
    -h, --help    Show this help and exit
    --version     Show the version and exit
    --quiet       Do not print a line for every parsed file
    --debug       Also report files that were skipped
    --stats       Print session statistics after the total
Example:
    mc-playtime-calc .
    mc-playtime-calc ./.minecraft
    mc-playtime-calc ./.minecraft/logs
    mc-playtime-calc ./.minecraft/logs/latest.log
    mc-playtime-calc ./version1/logs ./version2/logs
"""

OPTIONS = {"-h", "--help", "--version", "--quiet", "--debug", "--stats"}


def calculate(paths: List[str]) -> AggregateResult:
    """Resolve every path in turn and combine the ones that parsed."""
    total = AggregateResult()
    for path in paths:
        outcome = resolve_path(path)
        if outcome.ok:
            total = total + outcome.result
    return total


def print_summary(total: AggregateResult) -> None:
    seconds = total.total_duration
    print(f"{total.file_count} files parsed")
    print(f"total time: {seconds} = {format_duration(seconds)}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else list(argv)
    options = [arg for arg in args if arg.startswith("-") and arg != "-"]
    paths = [arg for arg in args if arg not in options]

    unknown = [opt for opt in options if opt not in OPTIONS]
    if unknown:
        print(f"Unknown option: {unknown[0]}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    if "-h" in options or "--help" in options:
        print(USAGE)
        return 0
    if "--version" in options:
        print(f"mc-playtime-calc {__version__}")
        return 0

    if "--debug" in options:
        enable_debug()
    elif "--quiet" in options:
        enable_quiet()
    else:
        set_level(logging.INFO)

    if not paths:
        print(USAGE)
        return 0

    try:
        total = calculate(paths)
    except FatalError as e:
        logger.critical("%s", e)
        return 1

    print_summary(total)

    if "--stats" in options:
        print(SessionStats.from_result(total).format_report())

    return 0


if __name__ == "__main__":
    sys.exit(main())
