"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "GREETING_"
ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
    )

    app_name: str = Field(
        default="demo",
        description="Name of the application, used as the API title and in logs",
        min_length=1,
    )
    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to",
        min_length=1,
    )
    port: int = Field(
        default=8080,
        description="TCP port the HTTP server listens on",
        gt=0,
        le=65535,
    )
    log_level: str = Field(
        default="info",
        description="Minimum level for application and server logs",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().lower()
            if value not in LOG_LEVELS:
                raise ValueError(
                    "GREETING_LOG_LEVEL must be one of: " + ", ".join(LOG_LEVELS)
                )
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["ENV_PREFIX", "LOG_LEVELS", "Settings", "get_settings", "reset_settings_cache"]
