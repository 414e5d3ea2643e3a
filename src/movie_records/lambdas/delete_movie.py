"""Lambda handler: DELETE /movies/{movieId}."""

from typing import Any

from movie_records.lambdas.common import (
    failure_response,
    json_response,
    log_event,
    path_parameter,
)
from movie_records.services.movies import DELETE_FAILED_MESSAGE, delete_movie
from movie_records.services.store import get_movie_store


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:  # noqa: ARG001
    """Delete a movie record. Missing records also report success."""
    try:
        log_event(event)
        result = delete_movie(get_movie_store(), path_parameter(event, "movieId"))
        return json_response(200, result)
    except Exception as exc:
        return failure_response(exc, DELETE_FAILED_MESSAGE)
