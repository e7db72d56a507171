from __future__ import annotations

import os
import threading
from pathlib import Path


class PathLockRegistry:
    """
    Provides a stable lock per normalized file path to avoid global contention.

    The document store itself never locks; hosts use this to serialize their
    own calls against one backing file. Locks are kept for the life of the
    registry (one per distinct path seen); `threading.Lock` does not support
    weak references, so callers with unbounded key sets should use a
    registry per working set rather than the global one.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, path: Path) -> threading.Lock:
        # abspath only: keys may name files that cannot be resolved yet
        key = os.path.normcase(os.path.abspath(path))
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock


GLOBAL_PATH_LOCKS = PathLockRegistry()
