"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_EXPO_PUSH_URL = "https://exp.host/--/api/v2/push/send"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./chapterhub.db",
        description="SQLAlchemy URL of the record store",
        min_length=1,
    )
    store_timeout_seconds: float = Field(
        default=10.0,
        description="Upper bound, in seconds, for a single record store call",
        gt=0,
    )
    feed_page_size: int = Field(
        default=20,
        description="Default number of items returned by the feed",
        ge=1,
    )
    feed_cache_keyed: bool = Field(
        default=False,
        description=(
            "Serve cached feed items only when channels, kind and page size match the "
            "cached request"
        ),
    )
    dispatch_enabled: bool = Field(
        default=True,
        description="Run the periodic notification dispatcher inside the API process",
    )
    dispatch_interval_seconds: float = Field(
        default=60.0,
        description="Seconds between two notification dispatcher sweeps",
        gt=0,
    )
    dispatch_batch_size: int = Field(
        default=100,
        description="Maximum number of due notifications handled by one sweep",
        ge=1,
    )
    expo_push_url: str = Field(
        default=DEFAULT_EXPO_PUSH_URL,
        description="Endpoint of the Expo push notification service",
        min_length=1,
    )
    expo_access_token: str | None = Field(
        default=None,
        description="Optional access token sent to the Expo push service",
    )
    push_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout, in seconds, for a single push delivery request",
        gt=0,
    )
    log_level: str = Field(default="INFO", description="Root logging level")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
