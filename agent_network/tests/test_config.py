"""Tests for environment settings."""

import pytest

from agent_network.config import DEFAULT_MODEL, load_settings
from agent_network.errors import ConfigurationError


class TestLoadSettings:
    """Test load_settings against the environment."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("AGENT_NETWORK_MODEL", "AGENT_NETWORK_LOG_LEVEL", "WEATHER_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        settings = load_settings()
        assert settings.model == DEFAULT_MODEL
        assert settings.log_level == "WARNING"
        assert settings.weather_timeout == 10.0

    def test_timeout_from_environment(self, monkeypatch):
        """Numeric strings are coerced to float."""
        monkeypatch.setenv("WEATHER_TIMEOUT", "2.5")
        assert load_settings().weather_timeout == 2.5

    def test_malformed_timeout(self, monkeypatch):
        """A non-numeric timeout is a configuration error."""
        monkeypatch.setenv("WEATHER_TIMEOUT", "fast")
        with pytest.raises(ConfigurationError, match="weather_timeout"):
            load_settings()

    def test_non_positive_timeout(self, monkeypatch):
        monkeypatch.setenv("WEATHER_TIMEOUT", "0")
        with pytest.raises(ConfigurationError):
            load_settings()
