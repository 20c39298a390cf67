"""
Shared fixtures: an in-memory MongoDB and a client wired to it
"""
import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.database import get_database
from app.main import app


@pytest.fixture
def db():
    return AsyncMongoMockClient()["gametracker_test"]


@pytest.fixture
def client(db):
    # No context manager: the lifespan hook would dial a real server
    app.dependency_overrides[get_database] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_game(client):
    def _create(**fields):
        payload = {"title": "Hollow Knight", **fields}
        response = client.post("/api/games", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_review(client):
    def _create(game_id, **fields):
        payload = {"game": game_id, "rating": 4, "comment": "Great game", **fields}
        response = client.post("/api/reviews", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create
