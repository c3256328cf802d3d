"""
Unit tests for settings and logging setup.

Settings come from the environment, so each test patches the variables
it cares about and clears the settings cache.
"""

import logging

import pytest
from pydantic import ValidationError

from parrot.config import Settings, configure_logging, get_settings
from parrot.config.settings import DEFAULT_LOG_FORMAT


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PARROT_LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_format == DEFAULT_LOG_FORMAT

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("PARROT_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.log_level_value == logging.DEBUG

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("PARROT_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError, match="log_level"):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for applying settings to the logging module."""

    def test_sets_package_logger_level(self):
        package_logger = logging.getLogger("parrot")
        original = package_logger.level
        try:
            configure_logging(Settings(_env_file=None, log_level="WARNING"))

            assert package_logger.level == logging.WARNING
        finally:
            package_logger.setLevel(original)

    def test_uses_cached_settings_by_default(self, monkeypatch):
        monkeypatch.setenv("PARROT_LOG_LEVEL", "ERROR")
        package_logger = logging.getLogger("parrot")
        original = package_logger.level
        try:
            configure_logging()

            assert package_logger.level == logging.ERROR
        finally:
            package_logger.setLevel(original)
