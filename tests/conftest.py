"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing the app
os.environ.setdefault("TABLE_NAME", "Movies")
os.environ.setdefault("CAST_TABLE_NAME", "MovieCast")
os.environ.setdefault("REGION", "eu-west-1")

from movie_records.main import app
from movie_records.services.store import MovieStore

SAMPLE_MOVIE = {
    "id": 42,
    "title": "The Hitchhiker's Guide to the Galaxy",
    "overview": "Mere seconds before the Earth is to be demolished...",
    "release_date": "2005-04-20",
    "genre_ids": [12, 35, 878],
    "vote_average": 6.8,
    "vote_count": 4512,
    "original_language": "en",
    "popularity": 23.1,
}

SAMPLE_CAST = [
    {"movieId": 42, "actorName": "Martin Freeman", "roleName": "Arthur Dent"},
    {"movieId": 42, "actorName": "Mos Def", "roleName": "Ford Prefect"},
]


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sample_movie() -> dict[str, Any]:
    """A stored movie record."""
    return dict(SAMPLE_MOVIE)


@pytest.fixture
def sample_cast() -> list[dict[str, Any]]:
    """Stored cast records for the sample movie."""
    return [dict(c) for c in SAMPLE_CAST]


@pytest.fixture
def mock_store(sample_movie: dict[str, Any], sample_cast: list[dict[str, Any]]) -> MagicMock:
    """Create a mock store with a configured cast table."""
    store = MagicMock(spec=MovieStore)
    store.cast_enabled = True
    store.get_movie.return_value = sample_movie
    store.query_cast.return_value = sample_cast
    store.delete_movie.return_value = None
    return store
