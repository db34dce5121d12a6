"""Configuration package."""

from household.config.settings import (
    HouseholdSettings,
    LoggingSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "HouseholdSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
