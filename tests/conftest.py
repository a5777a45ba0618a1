"""
Pytest configuration and shared fixtures for playtime calculator tests.
"""

import gzip
import logging
import os
import sys
from io import StringIO

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playtime_calc.logging_config import configure_logging


# =============================================================================
# LOG CONTENT HELPERS
# =============================================================================

def session_lines(start, end, message="[Render thread/INFO]: Tick"):
    """Two log lines whose timestamps are ``start`` and ``end`` seconds after midnight."""
    lines = []
    for seconds in (start, end):
        hours, rest = divmod(seconds, 3600)
        minutes, secs = divmod(rest, 60)
        lines.append(f"[{hours:02d}:{minutes:02d}:{secs:02d}] {message}")
    return lines


def write_log(path, lines, compress=False, newline="\n"):
    """Write log lines to ``path``, gzip-compressed if requested."""
    data = (newline.join(lines) + newline).encode("utf-8")
    path.parent.mkdir(parents=True, exist_ok=True)
    if compress:
        with gzip.open(path, "wb") as f:
            f.write(data)
    else:
        path.write_bytes(data)
    return path


def write_session(path, duration, start=3600, compress=None):
    """Write a log spanning ``duration`` seconds; compress ``.gz`` names by default."""
    if compress is None:
        compress = path.name.endswith(".gz")
    return write_log(path, session_lines(start, start + duration), compress=compress)


# =============================================================================
# SAMPLE LOG DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_log_lines():
    """Sample Minecraft client log lines, with a few malformed ones in between."""
    return [
        "[21:06:38] [main/INFO]: Setting user: Player",
        "[21:06:40] [Render thread/INFO]: Backend library: LWJGL version 3.3.1",
        "\tat net.minecraft.client.main.Main.main(Main.java:215)",
        "",
        "[21:6:41] [Render thread/INFO]: malformed minute",
        "[21:07:15] [Render thread/INFO]: Connecting to server",
        "Stopping!",
        "[21:36:38] [Render thread/INFO]: Stopping!",
    ]


@pytest.fixture
def temp_log_file(tmp_path, sample_log_lines):
    """Plain latest.log whose session lasts 1800 seconds."""
    return write_log(tmp_path / "latest.log", sample_log_lines)


@pytest.fixture
def temp_log_directory(tmp_path):
    """Logs directory: archives of 100s and 200s, latest.log of 50s, one unrelated file."""
    log_dir = tmp_path / "logs"
    write_session(log_dir / "2023-10-05-1.log.gz", 100)
    write_session(log_dir / "2023-10-06-1.log.gz", 200)
    write_session(log_dir / "latest.log", 50)
    (log_dir / "notes.txt").write_text("[00:00:00] not a log\n[10:00:00] still not\n")
    return log_dir


@pytest.fixture
def temp_installation(tmp_path):
    """.minecraft root: logs (1 file, 10s) and two versions (1 file, 5s each)."""
    root = tmp_path / ".minecraft"
    write_session(root / "logs" / "latest.log", 10)
    write_session(root / "versions" / "1.20.1" / "logs" / "2023-10-05-1.log.gz", 5)
    write_session(root / "versions" / "1.19.4" / "logs" / "latest.log", 5)
    (root / "versions" / "version_manifest.json").write_text("{}")
    return root


# =============================================================================
# LOGGING FIXTURES
# =============================================================================

@pytest.fixture
def log_output():
    """Route package logging to in-memory streams: yields (stdout, stderr)."""
    out, err = StringIO(), StringIO()
    configure_logging(level=logging.INFO, stream=out, error_stream=err)
    yield out, err
    configure_logging()
