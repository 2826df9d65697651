"""
Structured logging for clientkit with operation and field support.
"""

import logging
import sys
from datetime import UTC, datetime

# Attributes owned by LogRecord itself; never treated as structured fields
RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "getMessage",
        "exc_info",
        "exc_text",
        "stack_info",
        "message",
    }
)

# Global logger cache
_loggers: dict[str, "StructuredLogger"] = {}


class StructuredFormatter(logging.Formatter):
    """Formatter rendering records as key=value lines."""

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        mod = parts[-1] if parts else record.name
        op = getattr(record, "op", None) or record.funcName or "-"

        timestamp = datetime.fromtimestamp(record.created, UTC).isoformat()
        msg = record.getMessage()

        extra_fields = ""
        for key, value in record.__dict__.items():
            if key not in RESERVED_ATTRS and key != "op":
                extra_fields += f" {key}={value}"

        return f't={timestamp} level={record.levelname} mod={mod} op={op} msg="{msg}"{extra_fields}'


class StructuredLogger:
    """Logger accepting structured fields as keyword arguments."""

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)

    def _log(self, level: int, msg: str, **kwargs):
        extra = {k: v for k, v in kwargs.items() if k not in RESERVED_ATTRS}
        self.logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def critical(self, msg: str, **kwargs):
        self._log(logging.CRITICAL, msg, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for the given module."""
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]


def setup_logging(level: str | None = None) -> None:
    """Install the structured formatter on the root logger."""
    if level is None:
        from ..config import get_config

        level = get_config().log_level

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))
