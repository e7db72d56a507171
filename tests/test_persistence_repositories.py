from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from persistence.disk_store import DiskKeyedDocumentStore
from persistence.errors import DirectoryUnavailableError, ParseError
from persistence.locks import PathLockRegistry
from persistence.repositories import AsyncDiskKeyedDocumentStore


def test_async_store_roundtrip(store):
    async def _run():
        repo = AsyncDiskKeyedDocumentStore(store, locks=PathLockRegistry())

        assert await repo.load("settings") is None
        await repo.save("settings", {"theme": "dark", "volume": 7})
        assert await repo.load("settings") == {"theme": "dark", "volume": 7}
        await repo.remove("settings")
        await repo.remove("settings")
        assert await repo.load("settings") is None

    asyncio.run(_run())


def test_async_store_without_locks(store):
    async def _run():
        repo = AsyncDiskKeyedDocumentStore(store)
        await repo.save("k", [1, 2, 3])
        return await repo.load("k")

    assert asyncio.run(_run()) == [1, 2, 3]


def test_async_store_propagates_errors(store, data_dir: Path):
    (data_dir / "broken.json").write_text("nope", encoding="utf-8")

    async def _run():
        repo = AsyncDiskKeyedDocumentStore(store, locks=PathLockRegistry())
        await repo.load("broken")

    with pytest.raises(ParseError):
        asyncio.run(_run())


def test_async_store_directory_unavailable_with_locks():
    async def _run():
        repo = AsyncDiskKeyedDocumentStore(DiskKeyedDocumentStore(lambda: None), locks=PathLockRegistry())
        await repo.save("k", 1)

    with pytest.raises(DirectoryUnavailableError):
        asyncio.run(_run())


def test_concurrent_saves_last_writer_wins(store):
    async def _run():
        repo = AsyncDiskKeyedDocumentStore(store, locks=PathLockRegistry())
        await asyncio.gather(*(repo.save("counter", {"n": i}) for i in range(20)))
        return await repo.load("counter")

    doc = asyncio.run(_run())
    assert isinstance(doc, dict)
    assert doc["n"] in range(20)


def test_path_lock_registry_is_stable_per_path(tmp_path: Path):
    locks = PathLockRegistry()
    a = locks.lock_for(tmp_path / "a.json")
    assert locks.lock_for(tmp_path / "a.json") is a
    assert locks.lock_for(tmp_path / "x" / ".." / "a.json") is a
    assert locks.lock_for(tmp_path / "b.json") is not a
