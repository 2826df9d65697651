"""
Tests for environment configuration.
"""

import pytest
from pydantic import ValidationError

from clientkit.config import ToolkitConfig, get_config


class TestToolkitConfig:
    """Test ToolkitConfig defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CLIENTKIT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("CLIENTKIT_LOG_OPTION_VALUES", raising=False)
        config = ToolkitConfig()

        assert config.log_level == "INFO"
        assert config.log_option_values is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CLIENTKIT_LOG_LEVEL", "warning")
        monkeypatch.setenv("CLIENTKIT_LOG_OPTION_VALUES", "false")
        config = ToolkitConfig()

        assert config.log_level == "WARNING"
        assert config.log_option_values is False

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="log_level must be one of"):
            ToolkitConfig(log_level="verbose")

    def test_get_config_is_cached(self):
        assert get_config() is get_config()
