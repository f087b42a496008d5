"""
Tests for environment-variable probes.
"""

from env_probe import probe_desktop, probe_session_type, probe_shell_env, read_env


class TestReadEnv:
    def test_primary(self, monkeypatch):
        monkeypatch.setenv("XDG_CURRENT_DESKTOP", "GNOME")
        monkeypatch.setenv("DESKTOP_SESSION", "ubuntu")
        assert read_env("XDG_CURRENT_DESKTOP", "DESKTOP_SESSION") == "GNOME"

    def test_fallback(self, monkeypatch):
        monkeypatch.setenv("DESKTOP_SESSION", "plasma")
        assert read_env("XDG_CURRENT_DESKTOP", "DESKTOP_SESSION") == "plasma"

    def test_empty_primary_uses_fallback(self, monkeypatch):
        monkeypatch.setenv("XDG_CURRENT_DESKTOP", "")
        monkeypatch.setenv("DESKTOP_SESSION", "xfce")
        assert read_env("XDG_CURRENT_DESKTOP", "DESKTOP_SESSION") == "xfce"

    def test_absent(self):
        assert read_env("XDG_CURRENT_DESKTOP", "DESKTOP_SESSION") is None
        assert read_env("XDG_CURRENT_DESKTOP") is None


class TestProbes:
    def test_session_type_capitalized(self, monkeypatch):
        monkeypatch.setenv("XDG_SESSION_TYPE", "wayland")
        assert probe_session_type() == "Wayland"

    def test_session_type_absent(self):
        assert probe_session_type() is None

    def test_desktop(self, monkeypatch):
        monkeypatch.setenv("XDG_CURRENT_DESKTOP", "ubuntu:GNOME")
        assert probe_desktop() == "ubuntu:GNOME"

    def test_shell_env_basename(self, monkeypatch):
        monkeypatch.setenv("SHELL", "/usr/bin/zsh")
        assert probe_shell_env() == "zsh"

    def test_repeatable(self, monkeypatch):
        monkeypatch.setenv("XDG_SESSION_TYPE", "x11")
        assert probe_session_type() == probe_session_type() == "X11"
