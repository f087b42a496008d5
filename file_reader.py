"""
File-backed fact reader - keyed lines from /etc/os-release, /etc/hostname, ...

Lines are read in chunks bounded by MAX_LINE_LENGTH: an over-long line is cut
at the boundary and its tail comes back as the next "line", the same way a
fixed 256-byte fgets() buffer behaves.
"""

import logging
import os
from typing import Callable, Iterator, Optional, TextIO

from text_utils import extract_quoted, strip_newline

logger = logging.getLogger(__name__)

# Buffer size including the terminator, so at most 255 characters per read
MAX_LINE_LENGTH = 256

OS_RELEASE_PATHS = ("/etc/os-release", "/usr/lib/os-release")
HOSTNAME_PATH = "/etc/hostname"


def iter_bounded_lines(f: TextIO) -> Iterator[str]:
    """Yield lines from *f*, each at most MAX_LINE_LENGTH - 1 characters."""
    while True:
        chunk = f.readline(MAX_LINE_LENGTH - 1)
        if not chunk:
            return
        yield chunk


def read_keyed_line(
    path: str,
    key_prefix: str,
    extractor: Callable[[str], Optional[str]],
) -> Optional[str]:
    """Apply *extractor* to the first line of *path* starting with *key_prefix*.

    An empty prefix matches the first line. Returns None if the file cannot be
    read or no line matches; I/O errors never propagate past this call.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in iter_bounded_lines(f):
                if line.startswith(key_prefix):
                    return extractor(line)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read {path}: {e}")
    return None


# ── OS identity ────────────────────────────────────────────────────────────────

def _unquoted_value(line: str) -> Optional[str]:
    """Value of a bare ``KEY=value`` line (os-release allows unquoted values)."""
    value = strip_newline(line).partition("=")[2].strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return value or None


def probe_os_pretty_name(path: str = OS_RELEASE_PATHS[0]) -> Optional[str]:
    """PRETTY_NAME from an os-release file, quoted form only."""
    return read_keyed_line(path, "PRETTY_NAME=", extract_quoted)


def probe_os_pretty_name_unquoted(path: str = OS_RELEASE_PATHS[0]) -> Optional[str]:
    """PRETTY_NAME from an os-release file, tolerating ``PRETTY_NAME=Arch``."""
    return read_keyed_line(path, "PRETTY_NAME=", _unquoted_value)


# ── Hostname ───────────────────────────────────────────────────────────────────

def probe_hostname_file(path: str = HOSTNAME_PATH) -> Optional[str]:
    """First line of /etc/hostname, without its newline."""
    name = read_keyed_line(path, "", strip_newline)
    return name.strip() if name and name.strip() else None


def probe_hostname_native() -> Optional[str]:
    """Node name as reported by uname(2)."""
    try:
        return os.uname().nodename or None
    except OSError as e:
        logger.debug(f"uname() failed: {e}")
        return None


# ── /proc ─────────────────────────────────────────────────────────────────────

def read_parent_comm(ppid: Optional[int] = None) -> Optional[str]:
    """Command name of the parent process from /proc/<ppid>/comm."""
    if ppid is None:
        ppid = os.getppid()
    name = read_keyed_line(f"/proc/{ppid}/comm", "", strip_newline)
    return name or None
