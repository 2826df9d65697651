"""
Container for settings assigned to some operation or scope.

Subclasses declare typed options, memoized attributes and validators:

    class FetchSettings(Settings, scope="users.fetch"):
        token = option(str)
        timeout = option(float, default=30.0)

        @memoized
        def headers(self):
            return {"Authorization": f"Bearer {self.token}"}

        @validate("token")
        def token_present(self):
            return self.token != ""

    settings = FetchSettings.build(logger, {"token": "foo"})

Building coerces every option and then runs the validators of all ancestor
classes (base-most first). Any failure is reported as a single
SettingsValidationError and no instance is returned.
"""

import logging
from collections.abc import Mapping
from dataclasses import replace
from datetime import UTC, date, datetime, time
from email.utils import format_datetime as format_rfc2822
from types import MappingProxyType
from typing import Any, ClassVar, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..config import get_config
from ..exceptions import SettingsValidationError
from ..result import Result
from .schema import Option, SettingsSchema, Validator, check_name, check_reader_name, memoized

S = TypeVar("S", bound="Settings")

_DATETIME_ADAPTER = TypeAdapter(datetime)


class LogSink(Protocol):
    """Anything accepting structured debug messages, e.g. StructuredLogger."""

    def debug(self, msg: str, **kwargs: Any) -> Any: ...


class Settings:
    """Base class of declarative, validated settings."""

    __schema__: ClassVar[SettingsSchema] = SettingsSchema()
    __scope__: ClassVar[str | None] = None

    logger: LogSink | None

    def __init_subclass__(cls, scope: str | None = None, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if scope is not None:
            cls.__scope__ = scope
        label = cls.__scope__ or cls.__qualname__

        options = []
        memoized_names = []
        validators = []
        for name, value in list(cls.__dict__.items()):
            if isinstance(value, Option):
                check_name(name)
                spec = value.to_spec()
                options.append(spec)
                if spec.reader_name != name:
                    delattr(cls, name)
                    if spec.reader_name is not None:
                        check_reader_name(spec.reader_name)
                        setattr(cls, spec.reader_name, value)
            elif isinstance(value, memoized):
                check_name(name)
                memoized_names.append(name)
            elif isinstance(value, Validator):
                validators.append(replace(value, owner=label))
                delattr(cls, name)

        cls.__schema__ = cls.__schema__.extend(options, memoized_names, validators)

    def __init__(
        self,
        logger: LogSink | None = None,
        options: Mapping[Any, Any] | None = None,
        /,
        **kwargs: Any,
    ):
        object.__setattr__(self, "logger", logger)
        object.__setattr__(self, "_values", {})

        try:
            if options is not None and not isinstance(options, Mapping):
                raise TypeError(f"options must be a mapping, got {type(options).__name__}")
            raw = {str(k): v for k, v in {**(options or {}), **kwargs}.items()}
            if self.logger is not None:
                self._debug(f"initializing with options {self._describe(raw)}...")
            self._assign(raw)
            self._debug("initialized")
            for validator in type(self).__schema__.validators:
                validator(self)
        except Exception as e:
            raise SettingsValidationError(str(e)) from e

    @classmethod
    def build(
        cls: type[S], logger: LogSink | None = None, options: Mapping[Any, Any] | None = None, **kwargs: Any
    ) -> S:
        """Build validated settings from raw options."""
        return cls(logger, options, **kwargs)

    @classmethod
    def try_build(
        cls: type[S], logger: LogSink | None = None, options: Mapping[Any, Any] | None = None, **kwargs: Any
    ) -> Result[S]:
        """Build settings, returning a validation failure as a value."""
        try:
            return Result.ok(cls(logger, options, **kwargs))
        except SettingsValidationError as e:
            return Result.fail(e)

    def _assign(self, raw: dict[str, Any]) -> None:
        for spec in type(self).__schema__.options:
            if spec.key in raw:
                try:
                    value = spec.coerce(raw[spec.key])
                except (ValidationError, TypeError, ValueError) as e:
                    raise ValueError(f"option '{spec.key}' is invalid: {e}") from e
            elif spec.has_default:
                value = spec.produce_default()
            elif spec.required:
                raise ValueError(f"option '{spec.key}' is required")
            else:
                continue
            self._values[spec.target] = value

    def _debug(self, msg: str) -> None:
        if self.logger is not None:
            fields = {"op": "settings.init", "settings": type(self).__qualname__}
            if isinstance(self.logger, logging.Logger | logging.LoggerAdapter):
                self.logger.debug(msg, extra=fields)
            else:
                self.logger.debug(msg, **fields)

    @staticmethod
    def _describe(raw: dict[str, Any]) -> Any:
        return raw if get_config().log_option_values else sorted(raw)

    def options(self) -> Mapping[str, Any]:
        """Read-only snapshot of the resolved options in declaration order."""
        return MappingProxyType(dict(self._values))

    def format_datetime(self, value: date | datetime | str | None) -> str | None:
        """
        Format a datetime following RFC 7231/RFC 2822.

        Strings are parsed first; naive values are taken as UTC.
        """
        if value is None:
            return None

        if isinstance(value, str):
            try:
                value = _DATETIME_ADAPTER.validate_python(value)
            except ValidationError as e:
                raise ValueError(f"Cannot convert {value!r} to datetime") from e
        elif isinstance(value, date) and not isinstance(value, datetime):
            value = datetime.combine(value, time())

        if not isinstance(value, datetime):
            raise ValueError(f"Cannot convert {value!r} to datetime")
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return format_rfc2822(value)

    def __setattr__(self, name: str, value: Any) -> None:
        if name != "logger":
            raise AttributeError(f"{type(self).__name__} is immutable, cannot set '{name}'")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, cannot delete '{name}'")

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        head = f"{type(self).__name__}:{id(self):#x}"
        return f"<{head} {params}>" if params else f"<{head}>"

    __str__ = __repr__
