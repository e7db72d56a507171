from __future__ import annotations

import contextlib
import json
import uuid
from pathlib import Path
from typing import Any


def dumps_json(payload: Any, *, indent: int = 2, sort_keys: bool = False) -> str:
    """
    Serialize `payload` as pretty-printed JSON text.

    Key order follows the input mapping unless `sort_keys` is set. NaN and
    Infinity are rejected since they are not JSON.
    """
    return json.dumps(payload, indent=indent, sort_keys=sort_keys, ensure_ascii=False, allow_nan=False) + "\n"


class InvalidJsonConstant(ValueError):
    """NaN / Infinity / -Infinity found where only JSON is allowed."""


def _reject_constant(name: str) -> Any:
    raise InvalidJsonConstant(f"{name} is not valid JSON")


def read_json(path: Path) -> Any | None:
    """
    Read JSON from disk.

    Returns None for missing files (or a missing parent directory). Read
    failures propagate as OSError or ValueError (invalid UTF-8, unusable
    path), malformed content as json.JSONDecodeError or InvalidJsonConstant.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError):
        return None
    return json.loads(raw, parse_constant=_reject_constant)


def atomic_write_text(path: Path, text: str) -> None:
    """
    Atomically write text to disk by writing to a temp file then replacing.

    The temp file is removed again if anything fails before the replace.
    """
    tmp_path = path.with_name(f"{path.name}.{uuid.uuid4().hex}.tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(text)
        tmp_path.replace(path)
    except BaseException:
        with contextlib.suppress(OSError, ValueError):
            tmp_path.unlink(missing_ok=True)
        raise
