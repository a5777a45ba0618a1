"""
Regex patterns and well-known names for Minecraft log discovery and parsing.
"""

import re

# =============================================================================
# PATTERNS FOR LOG LINE PARSING
# =============================================================================

# Line prefix: [21:06:38] [Render thread/INFO]: ...
# Byte pattern; [0-9] keeps the digit slots ASCII-only.
TIMESTAMP_PATTERN = re.compile(rb"\[([0-9]{2}):([0-9]{2}):([0-9]{2})\]")

# Bytes of a line the timestamp prefix occupies
TIMESTAMP_WIDTH = len(b"[00:00:00]")

# Archived log name: 2023-10-05-1.log.gz
ARCHIVED_LOG_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}-[0-9]\.log\.gz")

# gzip member header
GZIP_MAGIC = b"\x1f\x8b"

# =============================================================================
# WELL-KNOWN NAMES
# =============================================================================

LATEST_LOG_NAME = "latest.log"
LOGS_DIR_NAME = "logs"
VERSIONS_DIR_NAME = "versions"
INSTALLATION_DIR_NAME = ".minecraft"


def is_archived_log(name: str) -> bool:
    """Return True if ``name`` is an archived log file name (``dddd-dd-dd-d.log.gz``)."""
    return ARCHIVED_LOG_PATTERN.fullmatch(name) is not None
