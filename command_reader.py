"""
Subprocess fact reader - facts that only the canonical utilities report.

Commands run as argv lists (never through a shell), with stdin closed and a
bounded timeout so a hung utility cannot stall the whole run.
"""

import logging
import os
import subprocess
from typing import Callable, List, Optional

from file_reader import MAX_LINE_LENGTH
from text_utils import extract_leading_version, strip_newline

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 3.0


def read_command_line(
    command: List[str],
    post_process: Optional[Callable[[str], Optional[str]]] = None,
    merge_stderr: bool = False,
    timeout: float = DEFAULT_TIMEOUT,
) -> Optional[str]:
    """Run *command* and return the first line of its standard output.

    stderr is folded into stdout when *merge_stderr* is set (``2>&1``),
    otherwise discarded. The exit status is ignored. Returns None when the
    command cannot be spawned, times out or prints nothing.
    """
    try:
        result = subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.DEVNULL,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"{' '.join(command)} failed: {e}")
        return None

    line = strip_newline(result.stdout.split("\n", 1)[0][:MAX_LINE_LENGTH - 1])
    if not line:
        return None
    if post_process is not None:
        return post_process(line)
    return line


# ── Kernel ─────────────────────────────────────────────────────────────────────

def probe_kernel_native() -> Optional[str]:
    """Kernel name and release from uname(2), no subprocess."""
    try:
        uts = os.uname()
    except OSError as e:
        logger.debug(f"uname() failed: {e}")
        return None
    if not uts.sysname or not uts.release:
        return None
    return f"{uts.sysname} {uts.release}"


def probe_kernel_command(timeout: float = DEFAULT_TIMEOUT) -> Optional[str]:
    """Kernel name and release from two separate uname invocations."""
    sysname = read_command_line(["uname", "-s"], timeout=timeout)
    release = read_command_line(["uname", "-r"], timeout=timeout)
    if sysname is None or release is None:
        return None
    return f"{sysname} {release}"


# ── Uptime ─────────────────────────────────────────────────────────────────────

def _strip_up_prefix(line: str) -> Optional[str]:
    if not line.startswith("up "):
        # Localized or non-procps uptime; refuse to guess rather than mangle it
        logger.warning(f"Unrecognized 'uptime -p' output: {line!r}")
        return None
    return line[3:] or None


def probe_uptime_command(timeout: float = DEFAULT_TIMEOUT) -> Optional[str]:
    """Pretty uptime from ``uptime -p``, e.g. "2 hours, 5 minutes"."""
    return read_command_line(["uptime", "-p"], post_process=_strip_up_prefix, timeout=timeout)


# ── Shell ──────────────────────────────────────────────────────────────────────

def shell_with_version(shell_name: Optional[str], timeout: float = DEFAULT_TIMEOUT) -> Optional[str]:
    """Return "<shell> <version>" using the first line of ``<shell> --version``.

    When that line carries no digits the bare shell name is returned.
    """
    if not shell_name:
        return None
    line = read_command_line([shell_name, "--version"], merge_stderr=True, timeout=timeout)
    if line is None:
        return None
    version = extract_leading_version(line)
    if not version:
        return shell_name
    return f"{shell_name} {version}"
