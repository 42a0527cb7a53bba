"""
Tests for configuration loading and validation.
"""

import pytest
from pydantic import ValidationError

from services.name_case.settings import Settings, get_settings, settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove settings overrides coming from the environment."""
    for name in (
        "LOG_LEVEL",
        "LOG_FORMAT",
        "SERVICE_NAME",
        "ENVIRONMENT",
        "MAX_LENGTH",
        "INPUT_ENCODING",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettingsDefaults:
    """Test default configuration values."""

    def test_defaults(self):
        """Test that defaults are applied without configuration."""
        config = Settings(_env_file=None)

        assert config.log_level == "INFO"
        assert config.log_format == "json"
        assert config.service_name == "namecase"
        assert config.environment == "development"
        assert config.max_length is None
        assert config.input_encoding == "utf-8"


class TestSettingsValidation:
    """Test pydantic validation of settings."""

    def test_values_are_normalized(self):
        """Test that case-insensitive values are normalized."""
        config = Settings(
            _env_file=None,
            log_level="debug",
            log_format="TEXT",
            environment="Staging",
            input_encoding="latin1",
        )

        assert config.log_level == "DEBUG"
        assert config.log_format == "text"
        assert config.environment == "staging"
        assert config.input_encoding == "iso8859-1"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"log_level": "VERBOSE"},
            {"log_format": "xml"},
            {"environment": "invalid_env"},
            {"max_length": 0},
            {"max_length": -5},
            {"input_encoding": "not-a-codec"},
        ],
    )
    def test_invalid_values(self, overrides):
        """Test that invalid values raise ValidationError."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)


class TestSettingsEnvironment:
    """Test loading settings from environment variables."""

    def test_env_overrides(self, monkeypatch):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("MAX_LENGTH", "25")
        monkeypatch.setenv("log_level", "warning")

        config = Settings(_env_file=None)

        assert config.max_length == 25
        assert config.log_level == "WARNING"

    def test_settings_are_cached(self):
        """Test that settings are loaded once per process."""
        assert settings() is get_settings()
        assert get_settings() is get_settings()
