"""
Application configuration using Pydantic Settings.

This module provides typed and validated settings for the application,
with support for environment variables and .env files.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Structured logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    json_format: bool = Field(default=False, description="Render logs as JSON lines")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Minimum log level"
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v


class TaxSettings(BaseSettings):
    """
    Initial tax configuration offered to a new calculation.

    These mirror what the tax widget shows before the user touches it.
    """

    model_config = SettingsConfigDict(env_prefix="TAX_")

    default_mode: Literal["before_tax", "after_tax"] = Field(
        default="before_tax", description="Whether subtotals are tax-exclusive by default"
    )
    default_vat_rate: Literal["11", "12"] = Field(
        default="11", description="PPN percentage selected by default"
    )
    default_withholding_scheme: Literal["pph22", "pph23", "custom"] = Field(
        default="pph23", description="PPh regime selected by default"
    )
    default_custom_rate: str = Field(
        default="0", description="Initial text of the custom PPh rate input"
    )


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates all configuration sections and provides environment-specific
    settings loading.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")
    secret_key: SecretStr = Field(
        default=SecretStr("django-insecure-change-me-in-production"),
        description="Django secret key",
    )
    allowed_hosts: list[str] = Field(
        default_factory=lambda: ["localhost", "127.0.0.1"],
        description="Allowed hosts",
    )

    # Sub-settings
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    tax: TaxSettings = Field(default_factory=TaxSettings)

    @field_validator("allowed_hosts", mode="before")
    @classmethod
    def parse_allowed_hosts(cls, v: str | list[str]) -> list[str]:
        """Parse allowed hosts from comma-separated string or list."""
        if isinstance(v, str):
            return [h.strip() for h in v.split(",") if h.strip()]
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses LRU cache to ensure settings are only loaded once.

    Returns:
        Configured Settings instance.
    """
    return Settings()
