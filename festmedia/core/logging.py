"""
Logging utilities for FreakFest media.

Console output is plain print(). A manifest run installs TeeOutput over
sys.stdout so the same lines also land in a session log under
.festmedia/logs/.
"""

import re
import sys
from datetime import datetime
from pathlib import Path


# Already carries a "3:04:05 PM [source]" stamp from log()
_STAMPED_RE = re.compile(r"^\d{1,2}:\d{2}:\d{2} [AP]M \[[^\]]+\] ")

# Banner rules and blank lines stay on the console only
_NOISE_RE = re.compile(r"^\s*(?:[=\-]{10,})?\s*$")


def format_log_line(message: str, source: str = "media", now: datetime = None) -> str:
    """Format a console line as "3:04:05 PM [source] message"."""
    now = now or datetime.now()
    hour = now.hour % 12 or 12
    suffix = "AM" if now.hour < 12 else "PM"
    return f"{hour}:{now.minute:02d}:{now.second:02d} {suffix} [{source}] {message}"


class TeeOutput:
    """
    Mirror stdout into a session log file.

    Lines from log() are written as-is; anything else printed gets a
    timestamp so the log reads in one format.
    """

    def __init__(self, log_path: Path, version: str = None):
        self.terminal = sys.stdout
        self.log_path = log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        self.log_file = open(log_path, "a", encoding="utf-8")
        self._pending = ""

        version_str = f" v{version}" if version else ""
        self.log_file.write(f"--- Session started: {datetime.now().isoformat()}{version_str} ---\n")
        self.log_file.flush()

    def _record(self, line: str):
        line = line.rstrip()
        if _NOISE_RE.match(line):
            return
        if not _STAMPED_RE.match(line):
            line = format_log_line(line.strip(), "stdout")
        self.log_file.write(line + "\n")

    def write(self, message):
        self.terminal.write(message)
        self._pending += message
        *lines, self._pending = self._pending.split("\n")
        for line in lines:
            self._record(line)
        self.log_file.flush()

    def flush(self):
        self.terminal.flush()
        self.log_file.flush()

    def close(self):
        if self._pending:
            self._record(self._pending)
            self._pending = ""
        self.log_file.close()

    def log_only(self, message: str):
        """Write a message only to the log file, not to terminal."""
        self.log_file.write(format_log_line(message, "debug") + "\n")
        self.log_file.flush()


def log(message: str, source: str = "media"):
    """Print a tagged status line (also captured by TeeOutput when installed)."""
    print(format_log_line(message, source))


def debug_log(message: str):
    """Log a debug message to file only (not shown to user)."""
    if hasattr(sys.stdout, "log_only"):
        sys.stdout.log_only(message)
