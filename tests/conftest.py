from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    p = tmp_path / "appdata"
    p.mkdir()
    return p


@pytest.fixture
def store(data_dir: Path):
    from persistence.disk_store import DiskKeyedDocumentStore

    return DiskKeyedDocumentStore(data_dir)


@pytest.fixture
def sandbox_app_data(monkeypatch: pytest.MonkeyPatch, data_dir: Path) -> Path:
    """
    Point the application data directory at a temp dir so tests never touch the real one.
    """
    monkeypatch.setenv("APP_DATA_DIR", str(data_dir))
    monkeypatch.delenv("DEBUG_LOG_REQUESTS", raising=False)
    return data_dir
