"""Helpers shared by the API Gateway Lambda handlers."""

import json
import logging
from typing import Any

from pydantic import BaseModel

from movie_records.config import get_settings
from movie_records.log_config import configure_logging
from movie_records.services.movies import error_response

JSON_HEADERS = {"content-type": "application/json"}

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)

for warning in settings.validate_runtime_config():
    logger.warning("Configuration warning: %s", warning)


def path_parameter(event: dict[str, Any] | None, name: str) -> str | None:
    """Read a path parameter from an API Gateway proxy event."""
    return ((event or {}).get("pathParameters") or {}).get(name)


def query_parameter(event: dict[str, Any] | None, name: str) -> str | None:
    """Read a query string parameter from an API Gateway proxy event."""
    return ((event or {}).get("queryStringParameters") or {}).get(name)


def log_event(event: dict[str, Any] | None) -> None:
    """Log the raw inbound event."""
    logger.info("[EVENT] %s", json.dumps(event, default=str))


def json_response(status_code: int, body: BaseModel, exclude_none: bool = False) -> dict[str, Any]:
    """Build an API Gateway proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": body.model_dump_json(exclude_none=exclude_none),
    }


def failure_response(exc: Exception, failure_message: str) -> dict[str, Any]:
    """Build the response for an exception raised while handling a request.

    Backend failures are logged with their traceback; client errors are not.
    """
    status_code, body = error_response(exc, failure_message, settings.expose_error_details)
    if status_code >= 500:
        logger.exception("%s: %s", failure_message, exc)
    return json_response(status_code, body, exclude_none=True)
