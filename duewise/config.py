"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    database_timeout_seconds: float = Field(
        default=10.0,
        description="Upper bound for acquiring a database connection or lock",
        gt=0,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60 * 24,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone (or UTC+HH:MM offset) that defines the users' calendar day",
    )
    vapid_public_key: str | None = Field(
        default=None,
        description="Application server key handed to browsers when they subscribe",
    )
    vapid_private_key: str | None = Field(
        default=None,
        description="Private key used by pywebpush to sign the VAPID header",
    )
    vapid_subject: str | None = Field(
        default=None,
        description="Contact URI (mailto: or https:) included in the VAPID claims",
    )
    push_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to every request made to a push service",
        gt=0,
    )
    push_max_workers: int = Field(
        default=4,
        description="Maximum number of parallel deliveries for a single reminder",
        ge=1,
    )
    due_day_rounding: Literal["ceil", "round"] = Field(
        default="ceil",
        description="Rounding rule applied when converting a due date into whole days",
    )
    dedupe_daily_reminders: bool = Field(
        default=False,
        description="Skip bills that already received a reminder on the same calendar day",
    )
    prune_expired_subscriptions: bool = Field(
        default=True,
        description="Delete push subscriptions the push service reports as gone",
    )
    sweep_lock_ttl_seconds: int = Field(
        default=300,
        description="Seconds after which a held due-reminder sweep lock is considered stale",
        gt=0,
    )
    scheduler_token: str | None = Field(
        default=None,
        description="Shared secret expected in the X-Scheduler-Token header of sweep requests",
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    @model_validator(mode="after")
    def _validate_vapid_pair(self) -> "Settings":
        if bool(self.vapid_private_key) ^ bool(self.vapid_subject):
            raise ValueError(
                "VAPID_PRIVATE_KEY and VAPID_SUBJECT must both be provided to enable push"
            )
        if self.vapid_subject and not self.vapid_subject.startswith(
            ("mailto:", "https:")
        ):
            raise ValueError("VAPID_SUBJECT must be a mailto: or https: URL")
        return self

    @property
    def push_configured(self) -> bool:
        """Return ``True`` when the credentials required to sign pushes exist."""

        return bool(self.vapid_private_key and self.vapid_subject)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
