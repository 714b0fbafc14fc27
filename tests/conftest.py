from typing import Generator

import pytest
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.db import Database
from taskboard.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def settings() -> Settings:
    # bcrypt's minimum cost keeps the suite fast; the default of 10 is covered separately
    return Settings(database_url="sqlite://", jwt_secret=TEST_SECRET, bcrypt_rounds=4)


@pytest.fixture
def database(settings) -> Generator[Database, None, None]:
    """A fresh in-memory database with the schema created."""
    db = Database(settings)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def client(settings, database) -> Generator[TestClient, None, None]:
    app = create_app(settings, database=database)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user(client) -> dict:
    body = {"name": "Ann", "email": "a@x.com", "password": "pw12345"}
    resp = client.post("/api/auth/signup", json=body)
    assert resp.status_code == 201
    return body


@pytest.fixture
def project(client) -> int:
    resp = client.post("/api/projects", json={"project_name": "Website", "description": "Relaunch"})
    assert resp.status_code == 201
    return resp.json()["projectId"]
