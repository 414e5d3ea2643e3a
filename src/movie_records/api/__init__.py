"""HTTP API routes."""

from movie_records.api.router import api_router

__all__ = ["api_router"]
