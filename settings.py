from __future__ import annotations

import os
from dataclasses import dataclass

from pydantic import BaseModel

DEFAULT_PLEX_SERVER_URL = "http://localhost:32400"
DEFAULT_APP_URL = "http://localhost:3000"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_str(name: str, default: str) -> str:
    # Empty counts as unset.
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw


def _env_present(name: str) -> bool:
    return bool(os.getenv(name, "").strip())


@dataclass(frozen=True)
class Settings:
    # Application data directory
    app_identifier: str
    app_data_dir: str

    # Logging
    log_level: str
    log_file_path: str
    debug_log_requests: bool


def get_settings() -> Settings:
    return Settings(
        app_identifier=_env_str("APP_IDENTIFIER", "com.plexify.app"),
        # Empty means "use the platform default".
        app_data_dir=os.getenv("APP_DATA_DIR", "").strip(),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        log_file_path=os.getenv("LOG_FILE_PATH", "").strip(),
        debug_log_requests=_env_bool("DEBUG_LOG_REQUESTS", False),
    )


class AppConfig(BaseModel):
    """Derived configuration handed to the frontend."""

    plex_server_url: str
    app_url: str
    openrouter_available: bool
    lastfm_available: bool


def get_env_var(name: str) -> str:
    """Value of a process environment variable, or "" when unset."""
    return os.getenv(name, "")


def get_app_config() -> AppConfig:
    return AppConfig(
        plex_server_url=_env_str("PLEX_SERVER_URL", DEFAULT_PLEX_SERVER_URL),
        app_url=_env_str("APP_URL", DEFAULT_APP_URL),
        openrouter_available=_env_present("OPENROUTER_API_KEY"),
        lastfm_available=_env_present("LASTFM_API_KEY"),
    )
