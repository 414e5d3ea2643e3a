"""Pydantic schemas for movie API responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MovieResponse(BaseModel):
    """A movie record, optionally joined with its cast."""

    model_config = ConfigDict(extra="ignore")

    # Stored values are returned as is, without coercion
    id: Any = Field(default=None, description="Movie ID")
    title: Any = Field(default=None, description="Movie title")
    overview: Any = Field(default=None, description="Movie overview/synopsis")
    release_date: Any = Field(default=None, description="Release date")
    genre_ids: Any = Field(default=None, description="Genre IDs")
    vote_average: Any = Field(default=None, description="Average vote score")
    vote_count: Any = Field(default=None, description="Number of votes")
    cast: list[dict[str, Any]] | None = Field(
        default=None,
        description="Cast records, or null when not requested or not configured",
    )


class MessageResponse(BaseModel):
    """A plain confirmation message."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned for failed requests."""

    message: str
    error: str | None = Field(default=None, description="Underlying error message")
