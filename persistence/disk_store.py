from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Callable, Union

from pydantic import JsonValue

from json_store import InvalidJsonConstant, atomic_write_text, dumps_json, read_json

from .errors import (
    DeleteError,
    DirectoryUnavailableError,
    ParseError,
    ReadError,
    SerializationError,
    WriteError,
)
from .interfaces import KeyedDocumentStore

logger = logging.getLogger(__name__)

DataDirResolver = Callable[[], Union[Path, None]]


class DiskKeyedDocumentStore(KeyedDocumentStore):
    """
    Stores one JSON document per key at `<data_dir>/<key>.json`.

    - Missing documents load as None.
    - Writes are atomic (temp file + replace).
    - Keys are used verbatim; callers must pick filesystem-safe keys.
    - The data directory is resolved on every call and never created here.
    - No locking: concurrent saves to one key are last-writer-wins.
    """

    def __init__(self, data_dir: Path | str | DataDirResolver):
        if isinstance(data_dir, (str, os.PathLike)):
            fixed = Path(data_dir)
            self._resolve: DataDirResolver = lambda: fixed
        else:
            self._resolve = data_dir

    def data_dir(self, key: str | None = None) -> Path:
        try:
            resolved = self._resolve()
        except (OSError, RuntimeError, KeyError) as e:
            raise DirectoryUnavailableError(f"Failed to get app data directory: {e}", key=key) from e
        if resolved is None:
            raise DirectoryUnavailableError("Failed to get app data directory", key=key)
        return Path(resolved)

    def path_for(self, key: str) -> Path:
        return self.data_dir(key) / f"{key}.json"

    def save(self, key: str, value: JsonValue) -> None:
        path = self.path_for(key)
        try:
            text = dumps_json(value)
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"Failed to serialize data: {e}", key=key) from e
        try:
            atomic_write_text(path, text)
        except (OSError, ValueError) as e:
            # ValueError: the key is not representable as a file name (e.g. NUL)
            logger.warning("DOC SAVE: failed to write %s: %r", path, e)
            raise WriteError(f"Failed to write file: {e}", key=key) from e
        logger.debug("DOC SAVE: key=%s bytes=%d", key, len(text))

    def load(self, key: str) -> JsonValue:
        path = self.path_for(key)
        try:
            doc = read_json(path)
        except (json.JSONDecodeError, InvalidJsonConstant) as e:
            logger.warning("DOC LOAD: %s is not valid JSON: %s", path, e)
            raise ParseError(f"Failed to parse JSON: {e}", key=key) from e
        except (OSError, ValueError) as e:
            logger.warning("DOC LOAD: failed to read %s: %r", path, e)
            raise ReadError(f"Failed to read file: {e}", key=key) from e
        logger.debug("DOC LOAD: key=%s", key)
        return doc

    def remove(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink()
        except (FileNotFoundError, NotADirectoryError):
            return
        except (OSError, ValueError) as e:
            logger.warning("DOC REMOVE: failed to remove %s: %r", path, e)
            raise DeleteError(f"Failed to remove file: {e}", key=key) from e
        logger.debug("DOC REMOVE: key=%s", key)
