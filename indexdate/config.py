"""Configuration management using pydantic-settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Output pattern used when a caller passes no output format.
    # strftime ("%d.%m.%Y") or PHP date() style ("d.m.Y").
    default_date_format: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="INDEXDATE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("default_date_format")
    @classmethod
    def blank_means_unset(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


settings = Settings()
