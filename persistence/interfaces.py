from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pydantic import JsonValue


class KeyedDocumentStore(Protocol):
    """
    Minimal DB-friendly interface: one JSON document persisted per key.
    """

    def path_for(self, key: str) -> Path:
        """Return the backing file for `key`."""
        ...

    def save(self, key: str, value: JsonValue) -> None:
        """Persist `value` under `key`, replacing any previous document."""
        ...

    def load(self, key: str) -> JsonValue:
        """Load the document for `key` (None if it was never saved)."""
        ...

    def remove(self, key: str) -> None:
        """Delete the document for `key`; a missing document is not an error."""
        ...


class AsyncKeyedDocumentStore(Protocol):
    async def save(self, key: str, value: JsonValue) -> None: ...
    async def load(self, key: str) -> JsonValue: ...
    async def remove(self, key: str) -> None: ...
