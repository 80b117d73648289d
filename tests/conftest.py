"""Shared fixtures: a throwaway SQLite database per test."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from moto_dash_api.app.core.config import Settings
from moto_dash_api.app.main import create_app
from moto_dash_api.app.services.resources import build_services
from moto_dash_api.app.services.store import SQLiteStore


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds=1):
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "moto-dash.db")


@pytest.fixture
def store(db_path):
    sqlite_store = SQLiteStore(db_path)
    sqlite_store.initialise()
    return sqlite_store


@pytest.fixture
def services(store):
    return build_services(store)


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def settings(db_path):
    return Settings(database_path=db_path, log_level="WARNING")


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def bike_payload():
    return {"name": "Africa Twin", "manufacturer": "Honda", "year": 2021, "mileage": 12400}
