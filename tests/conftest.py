from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the hockeyapp package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hockeyapp.core import config as core_config  # noqa: E402
from hockeyapp.db import session as db_session  # noqa: E402
from hockeyapp.repositories.kv_storage import JSONFileStorage  # noqa: E402


def _reset_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def json_storage(tmp_path, monkeypatch):
    """JSON backend writing to a temporary document."""
    data_file = tmp_path / "data.json"
    monkeypatch.setenv("HOCKEY_STORAGE_BACKEND", "json")
    monkeypatch.setenv("HOCKEY_DATA_FILE", str(data_file))
    _reset_caches()
    yield JSONFileStorage(data_file)
    _reset_caches()


@pytest.fixture()
def sql_storage(tmp_path, monkeypatch):
    """SQL backend on a temporary SQLite file; engine disposed on teardown."""
    from hockeyapp.repositories.sql_storage import SQLStorage

    db_file = tmp_path / "test.db"
    monkeypatch.setenv("HOCKEY_STORAGE_BACKEND", "sql")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _reset_caches()
    store = SQLStorage()
    yield store
    db_session.get_engine().dispose()
    _reset_caches()


@pytest.fixture(params=["json", "sql"])
def storage(request):
    """Runs the test once per storage backend."""
    return request.getfixturevalue(f"{request.param}_storage")
