from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping


def resolve_app_data_dir(
    app_identifier: str,
    *,
    override: str | None = None,
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> Path | None:
    """
    Per-user, per-application data directory.

    Windows -> %APPDATA%\\<app_identifier>
    macOS   -> ~/Library/Application Support/<app_identifier>
    other   -> $XDG_DATA_HOME/<app_identifier> (default ~/.local/share)

    Only reads configuration; never creates anything. Returns None when no
    base directory can be determined.
    """
    if override:
        return Path(override).expanduser()

    env = os.environ if environ is None else environ
    plat = sys.platform if platform is None else platform

    if plat == "win32":
        appdata = env.get("APPDATA", "").strip()
        return Path(appdata) / app_identifier if appdata else None

    try:
        home = Path.home()
    except RuntimeError:
        home = None

    if plat == "darwin":
        return home / "Library" / "Application Support" / app_identifier if home else None

    xdg = env.get("XDG_DATA_HOME", "").strip()
    # XDG base directory rules: relative paths must be ignored
    if xdg and os.path.isabs(xdg):
        return Path(xdg) / app_identifier
    return home / ".local" / "share" / app_identifier if home else None


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path
