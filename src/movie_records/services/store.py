"""DynamoDB document store for movie and cast records."""

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import Any

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel

from movie_records.config import Settings, get_settings
from movie_records.services.errors import CastTableNotConfiguredError, StoreError

logger = logging.getLogger(__name__)

MOVIE_KEY = "id"
CAST_PARTITION_KEY = "movieId"


@dataclass(frozen=True)
class DocumentClientConfig:
    """Translation options applied to values sent to and read from DynamoDB."""

    # Marshalling (writes and keys)
    convert_empty_values: bool = True
    remove_none_values: bool = True
    convert_models_to_map: bool = True
    # Unmarshalling (reads)
    wrap_numbers: bool = False


DEFAULT_CONFIG = DocumentClientConfig()


def marshal(value: Any, config: DocumentClientConfig = DEFAULT_CONFIG) -> Any:
    """Convert a Python value into something the boto3 serializer accepts.

    Floats become Decimals. None-valued mapping entries are dropped when
    ``remove_none_values`` is set. Empty strings and lists are kept as is,
    empty sets (rejected by DynamoDB) become empty lists when
    ``convert_empty_values`` is set. Pydantic models and dataclasses are
    flattened to plain dicts when ``convert_models_to_map`` is set.
    """
    if config.convert_models_to_map:
        if isinstance(value, BaseModel):
            value = value.model_dump()
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            value = dataclasses.asdict(value)

    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, Mapping):
        return {
            k: marshal(v, config)
            for k, v in value.items()
            if not (config.remove_none_values and v is None)
        }
    if isinstance(value, (set, frozenset)):
        if not value and config.convert_empty_values:
            return []
        return {marshal(v, config) for v in value}
    if isinstance(value, (list, tuple)):
        return [marshal(v, config) for v in value]
    return value


def _to_number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def unmarshal(value: Any, config: DocumentClientConfig = DEFAULT_CONFIG) -> Any:
    """Convert a value read through boto3 into native Python types."""
    if isinstance(value, Decimal):
        return value if config.wrap_numbers else _to_number(value)
    if isinstance(value, Mapping):
        return {k: unmarshal(v, config) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return {unmarshal(v, config) for v in value}
    if isinstance(value, list):
        return [unmarshal(v, config) for v in value]
    return value


def _store_error(exc: Exception) -> StoreError:
    """Wrap a botocore exception, keeping the original message."""
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        return StoreError(error.get("Message") or str(exc), code=error.get("Code"))
    return StoreError(str(exc))


class MovieStore:
    """Access to the movies table and the optional cast table.

    Wraps a boto3 DynamoDB service resource. Values are marshalled and
    unmarshalled according to the given ``DocumentClientConfig``.
    """

    def __init__(
        self,
        resource: Any,
        table_name: str,
        cast_table_name: str | None = None,
        config: DocumentClientConfig = DEFAULT_CONFIG,
    ) -> None:
        """Initialize the store.

        Args:
            resource: A boto3 DynamoDB service resource.
            table_name: Name of the movies table.
            cast_table_name: Name of the cast table, if any.
            config: Marshalling options.
        """
        self.config = config
        self.table_name = table_name
        self.cast_table_name = cast_table_name
        self._movies = resource.Table(table_name)
        self._cast = resource.Table(cast_table_name) if cast_table_name else None

    @property
    def cast_enabled(self) -> bool:
        """Whether a cast table is configured."""
        return self._cast is not None

    def _key(self, movie_id: int) -> dict[str, Any]:
        return marshal({MOVIE_KEY: movie_id}, self.config)

    def get_movie(self, movie_id: int) -> dict[str, Any] | None:
        """Fetch a movie record by ID.

        Returns:
            The record, or None if no record exists for the key.

        Raises:
            StoreError: If the DynamoDB call fails.
        """
        try:
            response = self._movies.get_item(Key=self._key(movie_id))
        except (ClientError, BotoCoreError) as e:
            raise _store_error(e) from e

        item = response.get("Item")
        if item is None:
            return None
        return unmarshal(item, self.config)

    def delete_movie(self, movie_id: int) -> None:
        """Delete a movie record by ID.

        The delete is unconditional, so deleting a missing key succeeds.

        Raises:
            StoreError: If the DynamoDB call fails.
        """
        try:
            self._movies.delete_item(Key=self._key(movie_id))
        except (ClientError, BotoCoreError) as e:
            raise _store_error(e) from e

    def query_cast(self, movie_id: int) -> list[dict[str, Any]]:
        """Return all cast records for a movie, in table order.

        Raises:
            CastTableNotConfiguredError: If no cast table is configured.
            StoreError: If the DynamoDB call fails.
        """
        if self._cast is None:
            raise CastTableNotConfiguredError()

        try:
            response = self._cast.query(
                KeyConditionExpression=Key(CAST_PARTITION_KEY).eq(marshal(movie_id, self.config))
            )
        except (ClientError, BotoCoreError) as e:
            raise _store_error(e) from e

        return [unmarshal(item, self.config) for item in response.get("Items") or []]


def create_movie_store(
    settings: Settings,
    config: DocumentClientConfig = DEFAULT_CONFIG,
) -> MovieStore:
    """Build a store backed by a new boto3 DynamoDB resource."""
    resource = boto3.resource(
        "dynamodb",
        region_name=settings.region,
        endpoint_url=settings.dynamodb_endpoint_url,
    )
    logger.info(
        "DynamoDB store created: table=%s cast_table=%s region=%s",
        settings.table_name,
        settings.cast_table_name or "-",
        settings.region or "default",
    )
    return MovieStore(
        resource,
        table_name=settings.table_name,
        cast_table_name=settings.cast_table_name,
        config=config,
    )


@lru_cache
def get_movie_store() -> MovieStore:
    """Get the process-wide store instance.

    Built on first use and reused for the life of the process.
    Can be used as a FastAPI dependency.
    """
    return create_movie_store(get_settings())
