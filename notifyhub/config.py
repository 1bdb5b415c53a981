"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./notifications.db",
        description="Database connection URL used by SQLAlchemy",
        min_length=1,
    )
    api_key: str | None = Field(
        default=None,
        description="Static key expected in the X-API-Key header; disabled when empty",
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to stamp and render notification timestamps",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the HTTP API",
    )
    host: str = Field(default="0.0.0.0", description="Interface the server binds to")
    port: int = Field(default=3003, description="Port the server listens on", gt=0)
    log_level: str = Field(default="INFO", description="Root logging level")
    default_page_size: int = Field(
        default=50,
        description="Number of notifications returned when no limit is given",
        gt=0,
    )

    @field_validator("api_key")
    @classmethod
    def _blank_api_key_disables_check(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
