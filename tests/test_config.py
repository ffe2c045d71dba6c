"""
Tests for configuration and logging setup
"""

import json
import logging

import pytest
from pydantic import ValidationError

from domain_model.audit import configure_logging
from domain_model.config import (
    AppSettings,
    HouseholdSettings,
    LoggingSettings,
    get_settings,
)
from domain_model.models.job import Job
from domain_model.models.person import Person


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    yield
    configure_logging(LoggingSettings(level="INFO"), AppSettings(debug_mode=False))


def log_rejected_job(caplog) -> str:
    """Trigger a job rejection and return the rendered log message."""
    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="domain_model"):
        Person("Matt", "Neward", 15).job = Job.hourly("Burger-Flipper", 13.0)
    messages = [
        record.getMessage()
        for record in caplog.records
        if "job_assignment_rejected" in record.getMessage()
    ]
    assert len(messages) == 1
    return messages[0]


class TestSettings:
    """Tests for pydantic-settings models."""

    def test_defaults(self, monkeypatch):
        """Defaults apply when nothing is configured."""
        for name in ("HOUSEHOLD_ANNUAL_HOURS", "LOG_LEVEL", "LOG_JSON_OUTPUT"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.household.annual_hours == 2000
        assert settings.logging.level == "INFO"
        assert settings.logging.json_output is True

    def test_app_defaults(self, monkeypatch):
        """Debug mode is off by default."""
        monkeypatch.delenv("DEBUG_MODE", raising=False)
        assert AppSettings().debug_mode is False

    def test_environment_override(self, monkeypatch):
        """Prefixed environment variables override defaults."""
        monkeypatch.setenv("HOUSEHOLD_ANNUAL_HOURS", "1800")
        monkeypatch.setenv("LOG_JSON_OUTPUT", "false")
        monkeypatch.setenv("DEBUG_MODE", "true")
        assert HouseholdSettings().annual_hours == 1800
        assert LoggingSettings().json_output is False
        assert AppSettings().debug_mode is True

    def test_log_level_normalised(self):
        """Log levels are upper-cased."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_log_level(self):
        """Unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="verbose")

    def test_annual_hours_must_be_positive(self):
        """Zero hours per year is rejected."""
        with pytest.raises(ValidationError):
            HouseholdSettings(annual_hours=0)

    def test_settings_cached(self):
        """get_settings returns the same object until the cache is cleared."""
        assert get_settings() is get_settings()


class TestLoggingSetup:
    """Tests for configure_logging."""

    def test_configure_sets_package_level(self, restore_logging):
        """The package logger follows the configured level."""
        configure_logging(LoggingSettings(level="WARNING"), AppSettings(debug_mode=False))
        assert logging.getLogger("domain_model").level == logging.WARNING

    def test_json_output(self, caplog, restore_logging):
        """JSON output renders each event as a JSON object."""
        configure_logging(LoggingSettings(json_output=True), AppSettings(debug_mode=False))
        event = json.loads(log_rejected_job(caplog))
        assert event["event"] == "job_assignment_rejected"
        assert event["min_age"] == 16

    def test_reconfigure_changes_renderer(self, caplog, restore_logging):
        """Loggers that already logged pick up a new renderer."""
        configure_logging(LoggingSettings(json_output=True), AppSettings(debug_mode=False))
        assert log_rejected_job(caplog).startswith("{")

        configure_logging(LoggingSettings(json_output=False), AppSettings(debug_mode=False))
        message = log_rejected_job(caplog)
        assert not message.startswith("{")
        with pytest.raises(ValueError):
            json.loads(message)

    def test_debug_mode_forces_debug_console(self, caplog, restore_logging):
        """Debug mode overrides level and JSON output."""
        configure_logging(
            LoggingSettings(level="ERROR", json_output=True),
            AppSettings(debug_mode=True),
        )
        assert logging.getLogger("domain_model").level == logging.DEBUG
        with pytest.raises(ValueError):
            json.loads(log_rejected_job(caplog))

    def test_configure_installs_no_root_handler(self):
        """Configuring the package leaves root logger handlers to the application."""
        root = logging.getLogger()
        before = list(root.handlers)
        configure_logging(LoggingSettings(), AppSettings(debug_mode=False))
        assert root.handlers == before


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
