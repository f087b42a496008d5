"""
Environment probe - facts read straight from the process environment.
"""

import os
from typing import Optional

from text_utils import capitalize_first


def read_env(primary_key: str, fallback_key: Optional[str] = None) -> Optional[str]:
    """Return the first non-empty value among *primary_key* and *fallback_key*."""
    value = os.environ.get(primary_key, "")
    if value:
        return value
    if fallback_key:
        return os.environ.get(fallback_key, "") or None
    return None


def probe_session_type() -> Optional[str]:
    """Session type from XDG_SESSION_TYPE, e.g. "wayland" -> "Wayland"."""
    session = read_env("XDG_SESSION_TYPE")
    if session is None:
        return None
    return capitalize_first(session)


def probe_desktop() -> Optional[str]:
    """Desktop environment from XDG_CURRENT_DESKTOP, else DESKTOP_SESSION."""
    return read_env("XDG_CURRENT_DESKTOP", "DESKTOP_SESSION")


def probe_shell_env() -> Optional[str]:
    """Basename of the login shell named by $SHELL."""
    shell = read_env("SHELL")
    if shell is None:
        return None
    return shell.rstrip("/").split("/")[-1] or None
