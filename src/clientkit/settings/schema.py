"""
Declarations used in the body of settings classes.

Options, memoized attributes and validators declared on a class are collected
into an immutable SettingsSchema when the class is created. A derived class
extends the schema of its parent instead of mutating it.
"""

import copy
import re
from collections.abc import Callable
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Literal, get_origin

from pydantic import TypeAdapter

from ..exceptions import NameReservedError

NAME_PATTERN = re.compile(r"^[a-z]([a-z0-9_]*[a-z0-9])?$")

# Public surface of the base Settings class; never shadowed by declarations
RESERVED_NAMES = frozenset({"build", "try_build", "options", "logger", "format_datetime"})

# Private members of the base Settings class; never used as reader names
INTERNAL_NAMES = frozenset({"_values", "_assign", "_debug", "_describe"})

ReaderVisibility = Literal["public", "protected", "private", False]


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def check_name(name: str) -> None:
    """Fail if a name cannot be declared on a settings class."""
    if not NAME_PATTERN.match(name):
        raise NameReservedError(name, "must be a lower-case identifier")
    if name in RESERVED_NAMES:
        raise NameReservedError(name)


def check_reader_name(name: str) -> None:
    """Fail if a private reader would shadow a member of the base class."""
    if name in INTERNAL_NAMES:
        raise NameReservedError(name)


def _is_type_expression(coercer: Any) -> bool:
    return isinstance(coercer, type) or get_origin(coercer) is not None


@dataclass(frozen=True)
class OptionSpec:
    """Finalized definition of one option."""

    target: str
    key: str
    coercer: Any = None
    required: bool = True
    default: Any = UNSET
    reader: ReaderVisibility = "public"

    @property
    def has_default(self) -> bool:
        return self.default is not UNSET

    @property
    def reader_name(self) -> str | None:
        """Attribute the option is readable through, if any."""
        if self.reader is False:
            return None
        return self.target if self.reader == "public" else f"_{self.target}"

    @cached_property
    def _adapter(self) -> TypeAdapter:
        return TypeAdapter(self.coercer)

    def coerce(self, value: Any) -> Any:
        if self.coercer is None:
            return value
        if _is_type_expression(self.coercer):
            return self._adapter.validate_python(value)
        return self.coercer(value)

    def produce_default(self) -> Any:
        value = self.default() if callable(self.default) else copy.copy(self.default)
        return value if value is None else self.coerce(value)


class Option:
    """Class-body declaration of an option, also serving as its reader."""

    def __init__(
        self,
        coercer: Any = None,
        *,
        required: bool = True,
        default: Any = UNSET,
        key: str | None = None,
        reader: ReaderVisibility = "public",
    ):
        if reader not in ("public", "protected", "private", False):
            raise ValueError(f"Unknown reader visibility: {reader!r}")
        self.coercer = coercer
        self.required = required
        self.default = default
        self.key = key
        self.reader = reader
        self.target: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.target = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._values.get(self.target)

    def to_spec(self) -> OptionSpec:
        assert self.target is not None
        return OptionSpec(
            target=self.target,
            key=self.key or self.target,
            coercer=self.coercer,
            required=self.required,
            default=self.default,
            reader=self.reader,
        )


def option(
    coercer: Any = None,
    *,
    required: bool = True,
    default: Any = UNSET,
    key: str | None = None,
    reader: ReaderVisibility = "public",
) -> Any:
    """
    Declare an option of a settings class.

    Args:
        coercer: Type (coerced with pydantic) or callable converting the raw value
        required: Whether building fails when the option is missing
        default: Constant or zero-argument callable used when the option is missing
        key: Input key to read the value from (defaults to the attribute name)
        reader: "public", "protected"/"private" (reader prefixed with "_") or False
    """
    return Option(coercer, required=required, default=default, key=key, reader=reader)


class memoized:
    """Attribute computed on first read and cached on the instance."""

    def __init__(self, func: Callable[[Any], Any]):
        self.func = func
        self.name = func.__name__
        self.__doc__ = func.__doc__

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        cache = instance.__dict__
        if self.name not in cache:
            cache[self.name] = self.func(instance)
        return cache[self.name]


@dataclass(frozen=True)
class Validator:
    """Check bound to one option of the class that declared it."""

    option: str
    name: str
    check: Callable[[Any], Any]
    owner: str = ""

    def __call__(self, settings: Any) -> None:
        if self.check(settings) is False:
            raise ValueError(f"{self.owner}: validation '{self.name}' of '{self.option}' failed")


def validate(option_name: str) -> Callable[[Callable[[Any], Any]], Validator]:
    """Declare a validator for an option; it fails by raising or returning False."""

    def decorator(func: Callable[[Any], Any]) -> Validator:
        return Validator(option=option_name, name=func.__name__, check=func)

    return decorator


@dataclass(frozen=True)
class SettingsSchema:
    """Options, memoized names and effective validators of a settings class."""

    options: tuple[OptionSpec, ...] = ()
    memoized: tuple[str, ...] = ()
    validators: tuple[Validator, ...] = ()

    def extend(
        self,
        options: list[OptionSpec],
        memoized: list[str],
        validators: list[Validator],
    ) -> "SettingsSchema":
        """Schema of a derived class: parent declarations first, then its own."""
        merged = {spec.target: spec for spec in self.options}
        for spec in options:
            merged[spec.target] = spec
        return SettingsSchema(
            options=tuple(merged.values()),
            memoized=tuple(dict.fromkeys((*self.memoized, *memoized))),
            validators=(*self.validators, *validators),
        )

    def option(self, target: str) -> OptionSpec | None:
        for spec in self.options:
            if spec.target == target:
                return spec
        return None
