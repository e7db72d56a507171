from __future__ import annotations

from typing import Any, ClassVar


class StorageError(Exception):
    """
    Base class for keyed document store failures.

    `kind` is stable across releases; callers switch on it instead of on the
    message text.
    """

    kind: ClassVar[str] = "storage_error"

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.kind, "message": self.message, "key": self.key}


class DirectoryUnavailableError(StorageError):
    kind = "directory_unavailable"


class SerializationError(StorageError):
    kind = "serialization_error"


class WriteError(StorageError):
    kind = "write_error"


class ReadError(StorageError):
    kind = "read_error"


class ParseError(StorageError):
    kind = "parse_error"


class DeleteError(StorageError):
    kind = "delete_error"
