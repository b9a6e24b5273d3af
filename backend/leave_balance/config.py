from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from ``LEAVE_BALANCE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LEAVE_BALANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Leave Balance"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: str = "%(asctime)s %(name)s %(levelname)s %(message)s"
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:8000"]
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE"]
    # Weekday indices with 0 = Sunday; Friday/Saturday unless a company overrides it.
    default_weekend_days: list[int] = [5, 6]

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("default_weekend_days")
    @classmethod
    def _validate_weekend_days(cls, value: list[int]) -> list[int]:
        invalid = sorted(d for d in value if not 0 <= d <= 6)
        if invalid:
            msg = f"default_weekend_days must be weekday indices 0-6, got {invalid}"
            raise ValueError(msg)
        return sorted(set(value))


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
