"""Environment configuration for the toolkit."""

from .environment import ToolkitConfig, get_config

__all__ = ["ToolkitConfig", "get_config"]
