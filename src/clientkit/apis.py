"""
Collection of remote APIs and resolution of addresses against their base URLs.

A single API is the common case:

    apis = APIs.with_base_url("127.0.0.1/v1")
    apis.resolve("/users/1/sms")  # => "127.0.0.1/v1/users/1/sms"

Several APIs can be combined; the first one that accepts an address wins:

    apis = APIs(
        APIBinding(base_url="https://sms.example.com/v2", prefixes=("/sms",)),
        {"base_url": "https://api.example.com/v1"},
    )
"""

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import AddressResolutionError
from .observability.logging import get_logger
from .result import Result

logger = get_logger(__name__)


class APIBinding(BaseModel):
    """Base URL of one remote API and the addresses it serves."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., description="Base URL all relative addresses are bound to")
    prefixes: tuple[str, ...] = Field(
        default=(), description="Path prefixes served by this API (empty: any path)"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("base_url must not be blank")
        return v

    @field_validator("prefixes")
    @classmethod
    def normalize_prefixes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple("/" + p.strip("/") for p in v)

    def resolve(self, address: str) -> str | None:
        """Bind an address to this API, or return None if it is not served here."""
        parts = urlsplit(address)
        if parts.scheme and parts.netloc:
            return address if self._continues_base(address) else None

        parts = urlsplit("/" + address.lstrip("/"))
        path = parts.path
        if self.prefixes and not any(self._matches(path, p) for p in self.prefixes):
            return None

        path = path.lstrip("/")
        url = f"{self.base_url}/{path}" if path else self.base_url
        if parts.query:
            url += f"?{parts.query}"
        if parts.fragment:
            url += f"#{parts.fragment}"
        return url

    def _continues_base(self, address: str) -> bool:
        if not address.startswith(self.base_url):
            return False
        rest = address[len(self.base_url) :]
        return rest == "" or rest[0] in "/?#"

    @staticmethod
    def _matches(path: str, prefix: str) -> bool:
        if prefix == "/":
            return True
        return path == prefix or path.startswith(prefix + "/")


class APIs:
    """Ordered collection of API bindings."""

    def __init__(self, *apis: APIBinding | Mapping[str, Any]):
        self._apis: tuple[APIBinding, ...] = tuple(
            api if isinstance(api, APIBinding) else APIBinding.model_validate(api)
            for api in apis
        )

    @classmethod
    def with_base_url(cls, base_url: str) -> "APIs":
        """Build a collection of a single API."""
        return cls(APIBinding(base_url=base_url))

    def __iter__(self) -> Iterator[APIBinding]:
        return iter(self._apis)

    def __len__(self) -> int:
        return len(self._apis)

    def __repr__(self) -> str:
        urls = ", ".join(api.base_url for api in self._apis)
        return f"APIs({urls})"

    def resolve(self, address: str) -> str:
        """
        Convert an address into the full url of the first API serving it.

        Raises:
            AddressResolutionError: if no API resolves the address
        """
        for api in self._apis:
            url = api.resolve(address)
            if url is not None:
                logger.debug(f"Resolved '{address}' to '{url}'", op="resolve")
                return url

        logger.debug(f"No API resolves '{address}'", op="resolve", apis=len(self._apis))
        raise AddressResolutionError(address)

    def try_resolve(self, address: str) -> Result[str]:
        """Resolve an address, returning failure as a value."""
        try:
            return Result.ok(self.resolve(address))
        except AddressResolutionError as e:
            return Result.fail(e)
