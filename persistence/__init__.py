from __future__ import annotations

from .disk_store import DataDirResolver, DiskKeyedDocumentStore
from .errors import (
    DeleteError,
    DirectoryUnavailableError,
    ParseError,
    ReadError,
    SerializationError,
    StorageError,
    WriteError,
)
from .interfaces import AsyncKeyedDocumentStore, KeyedDocumentStore
from .repositories import AsyncDiskKeyedDocumentStore

__all__ = [
    "DataDirResolver",
    "KeyedDocumentStore",
    "DiskKeyedDocumentStore",
    "AsyncKeyedDocumentStore",
    "AsyncDiskKeyedDocumentStore",
    "StorageError",
    "DirectoryUnavailableError",
    "SerializationError",
    "WriteError",
    "ReadError",
    "ParseError",
    "DeleteError",
]
