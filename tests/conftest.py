"""
Shared test fixtures and configuration.
"""

import pytest

SESSION_VARS = (
    "XDG_SESSION_TYPE",
    "XDG_CURRENT_DESKTOP",
    "DESKTOP_SESSION",
    "DISPLAY",
    "WAYLAND_DISPLAY",
    "XDG_RUNTIME_DIR",
    "SHELL",
    "XFETCH_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without any session or shell variables."""
    for var in SESSION_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def no_display(monkeypatch):
    """Make both display servers look unreachable."""
    import display_probe

    monkeypatch.setattr(display_probe, "x11_available", lambda: False)
    monkeypatch.setattr(display_probe, "wayland_available", lambda: False)
