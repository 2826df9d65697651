"""Declarative, validated settings containers."""

from .base import LogSink, Settings
from .schema import (
    RESERVED_NAMES,
    UNSET,
    OptionSpec,
    SettingsSchema,
    Validator,
    memoized,
    option,
    validate,
)

__all__ = [
    "Settings",
    "LogSink",
    "SettingsSchema",
    "OptionSpec",
    "Validator",
    "option",
    "memoized",
    "validate",
    "RESERVED_NAMES",
    "UNSET",
]
