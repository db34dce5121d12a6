"""
Tests for configuration loading.
"""

import pytest

from household.config import get_settings, validate_all_settings


class TestSettings:
    """Tests for pydantic-settings configuration."""

    def test_household_defaults(self):
        """Test the default domain thresholds."""
        household = get_settings().household
        assert household.default_hours_worked == 2000
        assert household.min_working_age == 16
        assert household.min_marriage_age == 18
        assert household.min_parent_age == 21
        assert household.salary_rounding_step == 1000

    def test_environment_override(self, monkeypatch):
        """Test thresholds can be set from the environment."""
        monkeypatch.setenv("HOUSEHOLD_MIN_PARENT_AGE", "30")
        assert get_settings().household.min_parent_age == 30

    def test_log_level_normalized(self, monkeypatch):
        """Test log level names are upper-cased."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_settings().logging.level == "DEBUG"

    def test_settings_are_cached(self):
        """Test get_settings returns one instance until cleared."""
        assert get_settings() is get_settings()

    def test_validate_all_settings(self):
        """Test all groups load with defaults."""
        results = validate_all_settings()
        assert results["household"] is True
        assert results["logging"] is True

    def test_validate_all_settings_reports_errors(self, monkeypatch):
        """Test a bad value is reported instead of raised."""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("HOUSEHOLD_SALARY_ROUNDING_STEP", "0")

        results = validate_all_settings()

        assert results["logging"] is False
        assert "LOUD" in results["logging_error"]
        assert results["household"] is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
