"""Lambda handler: GET /movies/{movieId}?cast=true."""

from typing import Any

from movie_records.lambdas.common import (
    failure_response,
    json_response,
    log_event,
    path_parameter,
    query_parameter,
)
from movie_records.services.movies import FETCH_FAILED_MESSAGE, fetch_movie
from movie_records.services.store import get_movie_store


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:  # noqa: ARG001
    """Fetch a movie record, with its cast when ``cast=true``."""
    try:
        log_event(event)
        movie = fetch_movie(
            get_movie_store(),
            path_parameter(event, "movieId"),
            query_parameter(event, "cast"),
        )
        return json_response(200, movie)
    except Exception as exc:
        return failure_response(exc, FETCH_FAILED_MESSAGE)
