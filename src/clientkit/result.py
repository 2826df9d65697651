"""
Explicit success/failure values for callers that avoid exception flow.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import ClientKitError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a resolution or a settings build."""

    value: T | None = None
    error: ClientKitError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: ClientKitError) -> "Result[T]":
        return cls(error=error)
