"""
Configuration Management for the Domain Model

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Only operational knobs live here (environment, logging,
the hours used to annualise hourly pay). Currency rate tables and age gates
are domain constants and are NOT configurable.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """structlog output configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        extra="ignore"
    )

    level: str = Field(
        default="INFO",
        description="Minimum log level (DEBUG, INFO, WARNING, ERROR)"
    )
    json_output: bool = Field(
        default=True,
        description="Render JSON lines instead of console output"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return v.upper()


class HouseholdSettings(BaseSettings):
    """Household income computation settings."""

    model_config = SettingsConfigDict(
        env_prefix="HOUSEHOLD_",
        extra="ignore"
    )

    annual_hours: int = Field(
        default=2000,
        ge=1,
        description="Working hours per year used to annualise hourly pay"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    debug_mode: bool = Field(
        default=False,
        description="Force DEBUG level and console log output"
    )


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def app(self) -> AppSettings:
        return AppSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()

    @property
    def household(self) -> HouseholdSettings:
        return HouseholdSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
