"""
Runtime-info probe - how long the machine has been up.
"""

import logging
import time
from typing import Optional

logger = logging.getLogger(__name__)

PROC_UPTIME = "/proc/uptime"


def format_uptime(uptime_seconds: int) -> str:
    """Render seconds as "<d> days, <h> hours, <m> minutes".

    The day component is omitted entirely when it is zero, so a fresh boot
    reads "0 hours, 0 minutes".
    """
    seconds = int(uptime_seconds)
    if seconds < 0:
        raise ValueError(f"uptime cannot be negative: {uptime_seconds}")
    days = seconds // 86400
    hours = (seconds // 3600) % 24
    minutes = (seconds // 60) % 60
    if days > 0:
        return f"{days} days, {hours} hours, {minutes} minutes"
    return f"{hours} hours, {minutes} minutes"


def probe_uptime_proc(path: str = PROC_UPTIME) -> Optional[str]:
    """Uptime from the first field of /proc/uptime."""
    try:
        with open(path, "r") as f:
            seconds = int(float(f.read().split()[0]))
        return format_uptime(seconds)
    except (OSError, ValueError, IndexError) as e:
        logger.debug(f"Cannot read uptime from {path}: {e}")
        return None


def probe_uptime_boottime() -> Optional[str]:
    """Uptime from the CLOCK_BOOTTIME monotonic clock."""
    clock = getattr(time, "CLOCK_BOOTTIME", None)
    if clock is None:
        return None
    try:
        return format_uptime(int(time.clock_gettime(clock)))
    except (OSError, ValueError) as e:
        logger.debug(f"clock_gettime(CLOCK_BOOTTIME) failed: {e}")
        return None
