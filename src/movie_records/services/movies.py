"""Fetch and delete operations on movie records."""

import logging
import re

from movie_records.schemas.movie import ErrorResponse, MessageResponse, MovieResponse
from movie_records.services.errors import (
    InvalidMovieIdError,
    MovieNotFoundError,
    MovieServiceError,
)
from movie_records.services.store import MovieStore

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch movie"
DELETE_FAILED_MESSAGE = "Failed to delete movie"

MOVIE_ID_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$", re.ASCII)


def parse_movie_id(raw: str | int | None) -> int:
    """Parse a movie ID taken from a request path.

    Zero is rejected along with missing and non-integer values.

    Raises:
        InvalidMovieIdError: If the value is not a non-zero integer.
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidMovieIdError()
    if isinstance(raw, int):
        movie_id = raw
    elif isinstance(raw, str) and MOVIE_ID_PATTERN.match(raw):
        movie_id = int(raw)
    else:
        raise InvalidMovieIdError()
    if not movie_id:
        raise InvalidMovieIdError()
    return movie_id


def fetch_movie(
    store: MovieStore,
    raw_movie_id: str | None,
    cast: str | None = None,
) -> MovieResponse:
    """Fetch a movie record, joining its cast when ``cast`` is ``"true"``.

    The cast query only runs after the movie lookup succeeded. If the cast
    is requested but no cast table is configured, ``cast`` is left null.

    Raises:
        InvalidMovieIdError: If the ID is missing or invalid.
        MovieNotFoundError: If no record exists for the ID.
        StoreError: If a DynamoDB call fails.
    """
    movie_id = parse_movie_id(raw_movie_id)

    movie = store.get_movie(movie_id)
    if not movie:
        raise MovieNotFoundError(movie_id)

    cast_records = None
    if cast == "true":
        if store.cast_enabled:
            cast_records = store.query_cast(movie_id)
        else:
            logger.warning("Cast requested for movie %s but no cast table is configured", movie_id)

    return MovieResponse(
        id=movie.get("id"),
        title=movie.get("title"),
        overview=movie.get("overview"),
        release_date=movie.get("release_date"),
        genre_ids=movie.get("genre_ids"),
        vote_average=movie.get("vote_average"),
        vote_count=movie.get("vote_count"),
        cast=cast_records,
    )


def delete_movie(store: MovieStore, raw_movie_id: str | None) -> MessageResponse:
    """Delete a movie record.

    No existence check is made, so a missing record also reports success.

    Raises:
        InvalidMovieIdError: If the ID is missing or invalid.
        StoreError: If the DynamoDB call fails.
    """
    movie_id = parse_movie_id(raw_movie_id)
    store.delete_movie(movie_id)
    return MessageResponse(message=f"Movie with ID {movie_id} deleted successfully.")


def error_response(
    exc: Exception,
    failure_message: str,
    expose_details: bool = True,
) -> tuple[int, ErrorResponse]:
    """Map an exception to a status code and error body.

    Client errors (400, 404) keep their own message. Anything else becomes
    a 500 with ``failure_message``, plus the original message when
    ``expose_details`` is set.
    """
    if isinstance(exc, MovieServiceError) and exc.status_code < 500:
        return exc.status_code, ErrorResponse(message=exc.message)

    return 500, ErrorResponse(
        message=failure_message,
        error=str(exc) if expose_details else None,
    )
