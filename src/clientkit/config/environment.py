"""
Toolkit configuration read from the environment with Pydantic Settings.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ToolkitConfig(BaseSettings):
    """Process-wide toolkit options (CLIENTKIT_* variables)."""

    model_config = SettingsConfigDict(env_prefix="CLIENTKIT_", case_sensitive=False, extra="ignore")

    log_level: str = Field("INFO", description="Level used by setup_logging")
    log_option_values: bool = Field(
        True, description="Include raw option values in settings debug logs"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return v


@lru_cache
def get_config() -> ToolkitConfig:
    """Get cached configuration instance."""
    return ToolkitConfig()
