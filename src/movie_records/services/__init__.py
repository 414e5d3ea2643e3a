"""Business logic and the DynamoDB store."""

from movie_records.services.errors import (
    CastTableNotConfiguredError,
    InvalidMovieIdError,
    MovieNotFoundError,
    MovieServiceError,
    StoreError,
)
from movie_records.services.movies import delete_movie, fetch_movie, parse_movie_id
from movie_records.services.store import (
    DocumentClientConfig,
    MovieStore,
    create_movie_store,
    get_movie_store,
)

__all__ = [
    "MovieServiceError",
    "InvalidMovieIdError",
    "MovieNotFoundError",
    "StoreError",
    "CastTableNotConfiguredError",
    "DocumentClientConfig",
    "MovieStore",
    "create_movie_store",
    "get_movie_store",
    "fetch_movie",
    "delete_movie",
    "parse_movie_id",
]
