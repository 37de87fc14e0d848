import uuid

import pytest
from fastapi.testclient import TestClient

from app.database import get_movies_collection
from app.main import app
from tests.fake_collection import FakeCollection

MOVIE_ID = str(uuid.uuid4())


def make_movie(seats=5, bookings=None, movie_id=MOVIE_ID):
    return {
        "_id": movie_id,
        "title": "Interstellar",
        "genre": "Sci-Fi",
        "shows": {
            "2024-05-01": [
                {"id": "s0", "time": "18:00", "seats": 10, "bookings": []},
                {"id": "s1", "time": "21:00", "seats": seats, "bookings": bookings or []},
            ],
            "2024-05-02": [
                {"id": "s2", "time": "18:00", "seats": 40, "bookings": []},
            ],
        },
    }


def booking_payload(**overrides):
    payload = {
        "movieId": MOVIE_ID,
        "showId": "s1",
        "seats": "3",
        "name": "Alice",
        "email": "alice@example.com",
        "phoneNumber": "555-0100",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def movie_collection():
    return FakeCollection([make_movie()])


@pytest.fixture
def client(movie_collection):
    app.dependency_overrides[get_movies_collection] = lambda: movie_collection
    yield TestClient(app)
    app.dependency_overrides.clear()
