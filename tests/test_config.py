"""Tests for settings loading."""

from src.config import Settings, get_settings


class TestSettings:
    """Test Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is configured."""
        monkeypatch.delenv("API_BASE_URL", raising=False)
        monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.api_base_url == ""
        assert settings.request_timeout == 120.0
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        """Test values read from the environment."""
        monkeypatch.setenv("API_BASE_URL", "https://ramen.example.com")
        monkeypatch.setenv("REQUEST_TIMEOUT", "30")

        settings = Settings(_env_file=None)

        assert settings.api_base_url == "https://ramen.example.com"
        assert settings.request_timeout == 30.0

    def test_get_settings_is_cached(self):
        """Test that settings are loaded once."""
        assert get_settings() is get_settings()
