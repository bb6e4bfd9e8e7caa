"""
Shared pytest fixtures for the wellness API test suite.

Provides:
  - ``database``: a fresh file-backed SQLite ``Database`` with tables
    created and the catalog seeded.
  - ``db_session``: a session on that database, closed after the test.
  - ``client``: a ``TestClient`` running the full app (lifespan included)
    against its own temporary SQLite file.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from database import Database
from main import create_app


@pytest.fixture
def database(tmp_path) -> Generator[Database, None, None]:
    db = Database(f"sqlite:///{tmp_path / 'service.db'}")
    db.init()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database) -> Generator[Session, None, None]:
    session = database.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def frontend_dir(tmp_path):
    root = tmp_path / "frontend"
    root.mkdir()
    (root / "index.html").write_text("<!DOCTYPE html><title>Wellness Planner</title>")
    (root / "app.js").write_text("console.log('ok');")
    return root


@pytest.fixture
def client(tmp_path, frontend_dir) -> Generator[TestClient, None, None]:
    app = create_app(f"sqlite:///{tmp_path / 'api.db'}", frontend_dir=str(frontend_dir))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered(client) -> dict:
    """A user registered through the API; returns the public user dict plus the password."""
    resp = client.post(
        "/api/register",
        json={"name": "Ada", "email": "Ada@Example.com", "password": "s3cret-pass"},
    )
    assert resp.status_code == 200
    return {**resp.json()["user"], "password": "s3cret-pass"}
