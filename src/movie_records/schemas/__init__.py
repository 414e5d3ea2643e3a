"""Pydantic schemas for request/response validation."""

from movie_records.schemas.movie import ErrorResponse, MessageResponse, MovieResponse

__all__ = [
    "MovieResponse",
    "MessageResponse",
    "ErrorResponse",
]
