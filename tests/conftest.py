import pytest
from fastapi.testclient import TestClient

from app.config.database import movie_store
from app.main import app


@pytest.fixture
def client():
    # Entering the client runs startup, which reseeds the store from the fixture
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def empty_client(client):
    movie_store.load([])
    return client


@pytest.fixture
def inception():
    return {
        "title": "Inception",
        "year": 2010,
        "director": "Nolan",
        "duration": 148,
        "genre": ["Sci-Fi"],
        "poster": "https://x/p.jpg",
        "rate": 8.8,
    }
