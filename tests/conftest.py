# tests/conftest.py

from __future__ import annotations

import mongomock
import pytest
from fastapi.testclient import TestClient

from tareas_api.config import Settings, get_settings
from tareas_api.db.mongo import ensure_indexes
from tareas_api.main import create_app


@pytest.fixture(autouse=True)
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """
    Deterministic settings for every test: fixed signing key, cheap bcrypt,
    no SMTP. get_settings() is cached, so the cache is reset around each test.
    """
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("SMTP_HOST", "")
    monkeypatch.setenv("MONGODB_DB", "tareas_test")
    monkeypatch.setenv("API_PREFIX", "")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture()
def mongo_client() -> mongomock.MongoClient:
    return mongomock.MongoClient()


@pytest.fixture()
def db(mongo_client, settings):
    database = mongo_client[settings.mongodb_db]
    ensure_indexes(database)
    return database


@pytest.fixture()
def client(mongo_client):
    """HTTP client over an app wired to the in-memory store (lifespan runs)."""
    app = create_app(mongo_client=mongo_client)
    with TestClient(app) as c:
        yield c
