"""
Tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from match_analytics.core import config
from match_analytics.core.config import Settings, get_global_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear analytics environment variables."""
    for name in (
        "ANALYTICS_LOG_LEVEL",
        "ANALYTICS_DDRAGON_CDN_BASE",
        "ANALYTICS_MATCH_WINDOW_SIZE",
        "ANALYTICS_MATCH_WINDOW_STEP",
        "ANALYTICS_CHAMPION_TABLE_LIMIT",
        "ANALYTICS_DISPLAY_TIMEZONE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.ddragon_cdn_base == "https://ddragon.leagueoflegends.com/cdn"
        assert settings.match_window_size == 25
        assert settings.match_window_step == 10
        assert settings.champion_table_limit == 10
        assert settings.display_tz is None

    def test_env_override(self, monkeypatch):
        """Test prefixed environment variables are read."""
        monkeypatch.setenv("ANALYTICS_LOG_LEVEL", "debug")
        monkeypatch.setenv("ANALYTICS_MATCH_WINDOW_SIZE", "50")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.match_window_size == 50

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_display_timezone(self):
        """Test a known zone is accepted."""
        settings = Settings(_env_file=None, display_timezone="UTC")

        assert settings.display_tz is not None
        assert settings.display_tz.key == "UTC"

    def test_invalid_display_timezone(self):
        """Test unknown zones are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, display_timezone="Not/AZone")

    def test_window_step_must_be_positive(self):
        """Test a zero step is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, match_window_step=0)


def test_global_settings_cached(monkeypatch):
    """Test the global instance is created once"""
    monkeypatch.setattr(config, "settings", None)

    first = get_global_settings()

    assert get_global_settings() is first
