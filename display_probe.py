"""
Display-server probe - session type and window manager / compositor.

Session type comes from XDG_SESSION_TYPE when the session manager set it,
otherwise from whichever display server accepts a connection. The window
manager is read over the X11 protocol (EWMH _NET_WM_NAME) or, on Wayland,
guessed from the desktop environment since the protocol has no equivalent.
"""

import logging
import os
import socket
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from Xlib import X, Xatom
from Xlib import display as xdisplay
from Xlib import error as xerror

from env_probe import probe_session_type
from facts import Source, run_chain
from text_utils import strip_newline

logger = logging.getLogger(__name__)

# Everything python-xlib raises for an unusable or vanished display
_X11_ERRORS = (xerror.DisplayError, xerror.ConnectionClosedError, xerror.XError, OSError)

WAYLAND_CONNECT_TIMEOUT = 1.0


# ── X11 ────────────────────────────────────────────────────────────────────────

@contextmanager
def x11_display(name: Optional[str] = None) -> Iterator[xdisplay.Display]:
    """Open an X display and always close it, whatever happens inside."""
    d = xdisplay.Display(name)
    try:
        yield d
    finally:
        d.close()


def x11_available() -> bool:
    """True if an X server accepts a connection on $DISPLAY."""
    try:
        with x11_display():
            return True
    except _X11_ERRORS as e:
        logger.debug(f"No X11 display: {e}")
        return False


def _utf8_name(d: xdisplay.Display, window) -> Optional[str]:
    prop = window.get_full_property(
        d.intern_atom("_NET_WM_NAME"), d.intern_atom("UTF8_STRING")
    )
    if prop is None or not prop.value:
        return None
    value = prop.value
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    return strip_newline(value) or None


def _wm_check_window(d: xdisplay.Display, root):
    """The child window an EWMH window manager names itself on, if any."""
    prop = root.get_full_property(d.intern_atom("_NET_SUPPORTING_WM_CHECK"), Xatom.WINDOW)
    if prop is None or not len(prop.value):
        return None
    window_id = prop.value[0]
    if window_id == X.NONE:
        return None
    return d.create_resource_object("window", window_id)


def x11_wm_name() -> Optional[str]:
    """Window manager name from _NET_WM_NAME on the root window.

    Most EWMH window managers only name their supporting check window, so
    that is consulted when the root window carries no name.
    """
    try:
        with x11_display() as d:
            root = d.screen().root
            name = _utf8_name(d, root)
            if name is None:
                check = _wm_check_window(d, root)
                if check is not None:
                    name = _utf8_name(d, check)
            return name
    except _X11_ERRORS as e:
        logger.debug(f"X11 window manager query failed: {e}")
        return None


# ── Wayland ────────────────────────────────────────────────────────────────────

def wayland_socket_path() -> Optional[str]:
    """Socket path a Wayland client would connect to (libwayland rules)."""
    name = os.environ.get("WAYLAND_DISPLAY") or "wayland-0"
    if os.path.isabs(name):
        return name
    runtime_dir = os.environ.get("XDG_RUNTIME_DIR")
    if not runtime_dir:
        return None
    return os.path.join(runtime_dir, name)


def wayland_available() -> bool:
    """True if a Wayland compositor accepts a connection on its socket."""
    path = wayland_socket_path()
    if path is None:
        return False
    try:
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.settimeout(WAYLAND_CONNECT_TIMEOUT)
            sock.connect(path)
        return True
    except OSError as e:
        logger.debug(f"No Wayland compositor at {path}: {e}")
        return False


def wayland_compositor() -> str:
    """Best guess at the compositor from desktop markers."""
    desktop = os.environ.get("XDG_CURRENT_DESKTOP", "")
    session = os.environ.get("DESKTOP_SESSION", "").lower()
    if "GNOME" in desktop:
        return "Mutter (Wayland)"
    if "KDE" in desktop and ("plasma" in session or "kde" in session):
        return "KWin (Wayland)"
    return "Wayland Compositor"


# ── Session + window manager ───────────────────────────────────────────────────

def detect_session_type() -> str:
    """XDG_SESSION_TYPE, else "X11" / "Wayland" by connection, else "Unknown"."""
    result = run_chain((
        (Source.ENV, probe_session_type),
        (Source.PROTOCOL, lambda: "X11" if x11_available() else None),
        (Source.PROTOCOL, lambda: "Wayland" if wayland_available() else None),
    ))
    return result.value if result else "Unknown"


def detect_window_manager(session_type: str) -> str:
    kind = session_type.lower()
    if kind == "wayland":
        return wayland_compositor()
    if kind == "x11":
        return x11_wm_name() or "Unknown WM"
    return "Unknown"


def detect_session_and_wm() -> Tuple[str, str]:
    """Return (session_type, window_manager)."""
    session_type = detect_session_type()
    return session_type, detect_window_manager(session_type)
