import os
import pytest
import sys
import tempfile
import uuid
from typing import Generator
from sqlmodel import Session, create_engine

# 1. Path setup: make the project root importable
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_DIR = os.path.dirname(CURRENT_DIR)
if PROJECT_DIR not in sys.path:
    sys.path.insert(0, PROJECT_DIR)

# Keep test runs from writing into the user data dir
_TEST_DATA_DIR = tempfile.mkdtemp(prefix="musicat_test_")
os.environ.setdefault("MUSICAT_LOG_DIR", os.path.join(_TEST_DATA_DIR, "logs"))
os.environ.setdefault("DB_PATH", os.path.join(_TEST_DATA_DIR, "musicat.duckdb"))

import infra.database.connection as db_connection
from infra.database.schema import init_raw_db
from config import settings

@pytest.fixture(name="engine", scope="function")
def engine_fixture():
    """
    A fresh file-backed DuckDB per test, swapped into the connection module
    so app code using db_connection.engine sees it.
    """
    test_db_path = os.path.join(tempfile.gettempdir(), f"musicat_test_{uuid.uuid4()}.duckdb")
    engine = create_engine(f"duckdb:///{test_db_path}")

    original = (db_connection.engine, db_connection.DB_PATH, db_connection.DATABASE_URL)
    db_connection.engine = engine
    db_connection.DB_PATH = test_db_path
    db_connection.DATABASE_URL = f"duckdb:///{test_db_path}"

    init_raw_db(engine)

    yield engine

    engine.dispose()
    db_connection.engine, db_connection.DB_PATH, db_connection.DATABASE_URL = original
    if os.path.exists(test_db_path):
        try:
            os.remove(test_db_path)
        except OSError:
            pass

@pytest.fixture(name="session", scope="function")
def session_fixture(engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session

@pytest.fixture(name="music_dir")
def music_dir_fixture(tmp_path, monkeypatch):
    """An empty music root that the app scans on startup."""
    root = tmp_path / "music"
    root.mkdir()
    monkeypatch.setattr(settings, "MUS_DIR", str(root))
    return root

@pytest.fixture(name="client")
def client_fixture(session: Session, music_dir) -> Generator:
    """FastAPI TestClient running the real lifespan against the test DB."""
    from fastapi.testclient import TestClient
    from main import app
    from infra.database.connection import get_session

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()

@pytest.fixture
def fake_tags(mocker):
    """Patch TinyTag so no real audio files are needed."""
    def _build(**overrides):
        tag = mocker.Mock()
        values = {
            "title": "Title",
            "artist": "Tag Artist",
            "album": "Tag Album",
            "year": "2004",
            "genre": "Rock",
            "composer": None,
            "track": "3/12",
            "duration": 181.2,
        }
        values.update(overrides)
        for key, value in values.items():
            setattr(tag, key, value)
        return tag
    return _build

@pytest.fixture
def make_tree():
    """Create placeholder files under root for each relative path."""
    def _make(root, relative_paths):
        for rel in relative_paths:
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"not really audio")
        return root
    return _make
