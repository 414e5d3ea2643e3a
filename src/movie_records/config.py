"""Application configuration using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Movie Records API"
    debug: bool = False
    log_level: str = "INFO"

    # DynamoDB
    region: str | None = None
    table_name: str  # Required, no default
    cast_table_name: str | None = None
    dynamodb_endpoint_url: str | None = None

    # Error responses
    expose_error_details: bool = True

    @field_validator("table_name")
    @classmethod
    def validate_table_name(cls, v: str) -> str:
        """Validate that the movies table name is set."""
        if not v or not v.strip():
            raise ValueError("TABLE_NAME is required")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the log level is a known logging level name."""
        level = v.strip().upper()
        known = logging.getLevelNamesMapping()
        if level not in known:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(known)}")
        return level

    @field_validator("cast_table_name", "region", "dynamodb_endpoint_url")
    @classmethod
    def empty_to_none(cls, v: str | None) -> str | None:
        """Treat empty environment values as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        # Cast join is optional
        if not self.cast_table_name:
            warnings.append("CAST_TABLE_NAME is not set - cast lookups are disabled")

        if not self.region:
            warnings.append("REGION is not set - falling back to the default AWS region")

        if self.expose_error_details:
            warnings.append(
                "EXPOSE_ERROR_DETAILS is enabled - backend error messages are returned to callers"
            )

        # Warn about debug mode in production
        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
