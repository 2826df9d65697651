"""Structured logging utilities."""

from .logging import StructuredFormatter, StructuredLogger, get_logger, setup_logging

__all__ = ["StructuredFormatter", "StructuredLogger", "get_logger", "setup_logging"]
