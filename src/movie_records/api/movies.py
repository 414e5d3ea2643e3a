"""Movie API endpoints."""

import logging

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse

from movie_records.config import Settings, get_settings
from movie_records.schemas.movie import ErrorResponse, MessageResponse, MovieResponse
from movie_records.services.errors import InvalidMovieIdError, MovieNotFoundError
from movie_records.services.movies import (
    DELETE_FAILED_MESSAGE,
    FETCH_FAILED_MESSAGE,
    delete_movie,
    error_response,
    fetch_movie,
)
from movie_records.services.store import MovieStore, get_movie_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid movie ID"},
    500: {"model": ErrorResponse, "description": "DynamoDB failure"},
}


def _failure_response(exc: Exception, failure_message: str, settings: Settings) -> JSONResponse:
    """Log a backend failure and build the 500 response."""
    logger.exception("%s: %s", failure_message, exc)
    status_code, body = error_response(exc, failure_message, settings.expose_error_details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.get(
    "/{movieId}",
    response_model=MovieResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse, "description": "Not found"}},
)
def get_movie(
    movie_id: str = Path(alias="movieId", description="Movie ID"),
    cast: str | None = Query(None, description='Set to "true" to include cast records'),
    store: MovieStore = Depends(get_movie_store),
    settings: Settings = Depends(get_settings),
) -> MovieResponse | JSONResponse:
    """Get a movie record by ID.

    The cast is joined in only when ``cast=true`` and a cast table is
    configured; otherwise ``cast`` is null.
    """
    try:
        return fetch_movie(store, movie_id, cast)
    except (InvalidMovieIdError, MovieNotFoundError):
        # Handled globally
        raise
    except Exception as exc:
        return _failure_response(exc, FETCH_FAILED_MESSAGE, settings)


@router.delete("/{movieId}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def remove_movie(
    movie_id: str = Path(alias="movieId", description="Movie ID"),
    store: MovieStore = Depends(get_movie_store),
    settings: Settings = Depends(get_settings),
) -> MessageResponse | JSONResponse:
    """Delete a movie record by ID.

    Succeeds whether or not a record existed. Cast records are left as is.
    """
    try:
        return delete_movie(store, movie_id)
    except InvalidMovieIdError:
        raise
    except Exception as exc:
        return _failure_response(exc, DELETE_FAILED_MESSAGE, settings)
