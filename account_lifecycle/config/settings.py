"""
Library settings - pydantic-settings configuration.

This module defines the process-wide knobs a hosting application sets,
loaded from ACCOUNT_* environment variables (or a .env file) with
validation and defaults. Assignments are validated too, so a live
Settings object never holds an invalid value.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from account_lifecycle.domain.ports import AccountStatus


class Settings(BaseSettings):
    """Library settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )

    # Token settings
    token_expiration_hours: float | None = Field(default=1.0, allow_inf_nan=False)  # None or <= 0: never expire
    token_bytes: int = Field(default=64, ge=16)  # Random bytes per token (>= 128 bits)

    # Account settings
    default_status: AccountStatus = AccountStatus.ACTIVATION  # Status of newly created accounts

    # Security settings
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)  # bcrypt work factor

    @field_validator("token_expiration_hours")
    @classmethod
    def normalize_unlimited(cls, value: float | None) -> float | None:
        """Store any non-positive expiration length as None (never expires)."""
        if value is None or value <= 0:
            return None
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
