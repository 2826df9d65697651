"""
Global pytest configuration and fixtures for test isolation.
"""

import logging
from unittest.mock import MagicMock

import pytest

from clientkit.config import get_config
from clientkit.observability.logging import StructuredFormatter


@pytest.fixture(autouse=True)
def reset_config_cache():
    """Drop the cached environment config around every test."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def sink():
    """Log sink recording debug calls."""
    return MagicMock()


@pytest.fixture
def root_logger():
    """Root logger cleaned of structured handlers after the test."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, StructuredFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
