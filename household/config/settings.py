"""
Configuration Management for the Household Domain Model

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All tunable thresholds live here.
The defaults are the domain rules themselves; environment variables
only exist so that a test or a demo can move a threshold explicitly.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HouseholdSettings(BaseSettings):
    """Domain thresholds for jobs, marriage and children."""

    model_config = SettingsConfigDict(
        env_prefix="HOUSEHOLD_",
        extra="ignore"
    )

    default_hours_worked: int = Field(
        default=2000,
        ge=0,
        description="Hours per year used when income is calculated without an explicit figure"
    )
    min_working_age: int = Field(
        default=16,
        ge=0,
        description="Youngest age at which a person may hold a job"
    )
    min_marriage_age: int = Field(
        default=18,
        ge=0,
        description="Youngest age at which a person may have a spouse"
    )
    min_parent_age: int = Field(
        default=21,
        ge=0,
        description="A family can have a child only if some member is older than this"
    )
    salary_rounding_step: int = Field(
        default=1000,
        ge=1,
        description="Salary figures produced from hourly rates are rounded up to this step"
    )


class LoggingSettings(BaseSettings):
    """Structured logging output configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        extra="ignore"
    )

    level: str = Field(
        default="INFO",
        description="Minimum log level"
    )
    json_output: bool = Field(
        default=True,
        description="Render log lines as JSON (False = human-readable console output)"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Only allow standard logging level names."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return v.upper()


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

    # Note: sub-settings are loaded on access so that environment
    # changes made after startup (e.g. in tests) are picked up.

    @property
    def household(self) -> HouseholdSettings:
        return HouseholdSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with an
    additional "<name>_error" entry for every group that failed.
    """
    results = {}

    settings = get_settings()

    for name in ("household", "logging"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
