"""Configuration package."""

from domain_model.config.settings import (
    AppSettings,
    HouseholdSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "HouseholdSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
