from __future__ import annotations

from pathlib import Path

import pytest

from persistence.paths import ensure_dir, resolve_app_data_dir


def test_override_wins(tmp_path: Path):
    got = resolve_app_data_dir("com.example.app", override=str(tmp_path / "custom"), environ={}, platform="linux")
    assert got == tmp_path / "custom"


def test_linux_uses_xdg_data_home():
    got = resolve_app_data_dir("com.example.app", environ={"XDG_DATA_HOME": "/xdg"}, platform="linux")
    assert got == Path("/xdg") / "com.example.app"


def test_linux_ignores_relative_xdg_data_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    got = resolve_app_data_dir("com.example.app", environ={"XDG_DATA_HOME": "relative"}, platform="linux")
    assert got == tmp_path / ".local" / "share" / "com.example.app"


def test_macos_application_support(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    got = resolve_app_data_dir("com.example.app", environ={}, platform="darwin")
    assert got == tmp_path / "Library" / "Application Support" / "com.example.app"


def test_windows_appdata():
    got = resolve_app_data_dir("com.example.app", environ={"APPDATA": "/roaming"}, platform="win32")
    assert got == Path("/roaming") / "com.example.app"


def test_windows_without_appdata_is_unavailable():
    assert resolve_app_data_dir("com.example.app", environ={}, platform="win32") is None


def test_no_home_is_unavailable(monkeypatch: pytest.MonkeyPatch):
    def _no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(_no_home))
    assert resolve_app_data_dir("com.example.app", environ={}, platform="linux") is None


def test_resolution_has_no_side_effects(tmp_path: Path):
    got = resolve_app_data_dir("com.example.app", environ={"XDG_DATA_HOME": str(tmp_path)}, platform="linux")
    assert got == tmp_path / "com.example.app"
    assert not got.exists()


def test_ensure_dir_creates_parents(tmp_path: Path):
    target = tmp_path / "a" / "b"
    assert ensure_dir(target) == target
    assert target.is_dir()
    ensure_dir(target)
