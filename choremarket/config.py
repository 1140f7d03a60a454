"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

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
        default="sqlite:///./choremarket.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="Asia/Kolkata",
        description="IANA timezone used for timestamps and quiet hours",
    )
    notification_webhook_url: str | None = Field(
        default=None,
        description="Webhook receiving external notifications; delivery is disabled when unset",
    )
    notification_provider: str = Field(
        default="webhook",
        description="Provider name recorded on every delivery ledger row",
        min_length=1,
    )
    notification_max_attempts: int = Field(
        default=3,
        description="Number of delivery attempts before giving up",
        gt=0,
    )
    notification_backoff_ms: int = Field(
        default=250,
        description="Base delay in milliseconds for the exponential retry backoff",
        ge=0,
    )
    notification_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to each webhook request",
        gt=0,
    )
    notification_workers: int = Field(
        default=4,
        description="Size of the background pool delivering external notifications",
        gt=0,
    )
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma separated list of origins allowed by the CORS middleware",
    )

    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @field_validator("app_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        value = value.strip()
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"APP_TIMEZONE {value!r} is not a known IANA timezone") from exc
        return value

    @field_validator("notification_webhook_url")
    @classmethod
    def _blank_webhook_is_unset(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        if not value.startswith(("http://", "https://")):
            raise ValueError("NOTIFICATION_WEBHOOK_URL must be an http(s) URL")
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
