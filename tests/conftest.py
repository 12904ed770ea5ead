from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Keep the package importable when running tests from a plain checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blogapi.core import config as core_config  # noqa: E402
from blogapi.db import create_tables  # noqa: E402
from blogapi.db import session as db_session  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and build the schema."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("CREATE_TABLES_ON_STARTUP", "0")
    _clear_caches()

    create_tables.drop_all()
    create_tables.create_all()

    yield db_file

    create_tables.drop_all()
    db_session.get_engine().dispose()
    _clear_caches()


@pytest.fixture()
def client(temp_db):
    from fastapi.testclient import TestClient

    from blogapi.app import create_app

    return TestClient(create_app())
