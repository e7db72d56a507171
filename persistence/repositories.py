from __future__ import annotations

import asyncio
from typing import Any, Callable, TypeVar

from pydantic import JsonValue

from .disk_store import DiskKeyedDocumentStore
from .interfaces import AsyncKeyedDocumentStore
from .locks import PathLockRegistry

T = TypeVar("T")


class AsyncDiskKeyedDocumentStore(AsyncKeyedDocumentStore):
    """
    Async wrapper around the disk-backed document store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.

    When `locks` is given, calls touching the same backing file are
    serialized through it (inside the worker thread).
    """

    def __init__(self, store: DiskKeyedDocumentStore, *, locks: PathLockRegistry | None = None) -> None:
        self._store = store
        self._locks = locks

    @property
    def store(self) -> DiskKeyedDocumentStore:
        return self._store

    def _call(self, fn: Callable[..., T], key: str, *args: Any) -> T:
        if self._locks is None:
            return fn(key, *args)
        with self._locks.lock_for(self._store.path_for(key)):
            return fn(key, *args)

    async def save(self, key: str, value: JsonValue) -> None:
        await asyncio.to_thread(self._call, self._store.save, key, value)

    async def load(self, key: str) -> JsonValue:
        return await asyncio.to_thread(self._call, self._store.load, key)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._call, self._store.remove, key)
