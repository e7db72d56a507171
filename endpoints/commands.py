from __future__ import annotations

from pathlib import Path

from pydantic import JsonValue

from persistence import paths
from persistence.disk_store import DiskKeyedDocumentStore
from persistence.locks import GLOBAL_PATH_LOCKS
from persistence.repositories import AsyncDiskKeyedDocumentStore
from settings import AppConfig, get_app_config as _get_app_config, get_env_var as _get_env_var, get_settings


def app_data_dir() -> Path | None:
    # Re-read settings each call so the directory follows the environment.
    settings = get_settings()
    return paths.resolve_app_data_dir(settings.app_identifier, override=settings.app_data_dir or None)


DOCUMENT_STORE = AsyncDiskKeyedDocumentStore(DiskKeyedDocumentStore(app_data_dir), locks=GLOBAL_PATH_LOCKS)


async def save_secure_data(key: str, value: JsonValue) -> None:
    await DOCUMENT_STORE.save(key, value)


async def load_secure_data(key: str) -> JsonValue:
    return await DOCUMENT_STORE.load(key)


async def remove_secure_data(key: str) -> None:
    await DOCUMENT_STORE.remove(key)


def get_env_var(name: str) -> str:
    return _get_env_var(name)


def get_app_config() -> AppConfig:
    return _get_app_config()
