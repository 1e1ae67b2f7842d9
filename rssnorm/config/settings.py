"""
Application Settings.

Centralized configuration using Pydantic Settings with environment variable loading.
Every value has a default, so the normalizer runs without any environment setup.

Production Mode:
    When app_env="production", additional validations apply:
    - log_json must be True
    - log_level cannot be DEBUG
"""

import hashlib
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Normalizer settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RSSNORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=True,
        description="Render log events as JSON (False for human-readable console output)",
    )

    # -------------------------------------------------------------------------
    # Normalization
    # -------------------------------------------------------------------------
    hash_algorithm: str = Field(
        default="sha256",
        description="hashlib algorithm used for entry identity hashes",
    )
    assume_utc: bool = Field(
        default=True,
        description="Interpret dates without a timezone as UTC (False: local time)",
    )

    @field_validator("hash_algorithm")
    @classmethod
    def validate_hash_algorithm(cls, value: str) -> str:
        """Reject algorithms hashlib cannot build."""
        value = value.lower()
        if value not in hashlib.algorithms_available or value.startswith("shake_"):
            raise ValueError(f"Unsupported hash algorithm: {value}")
        return value

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production logging is machine-readable and quiet."""
        if self.app_env == "production":
            errors = []

            if not self.log_json:
                errors.append("log_json must be True in production")

            if self.log_level == "DEBUG":
                errors.append("log_level cannot be DEBUG in production")

            if errors:
                raise ValueError(
                    f"Production configuration errors: {'; '.join(errors)}"
                )

        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()
