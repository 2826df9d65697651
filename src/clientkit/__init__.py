"""
clientkit - building blocks for remote API clients.

Two independent components:
- APIs: resolves relative addresses against one of several API base URLs
- Settings: declarative, typed and validated option containers

Quick Start:
    >>> from clientkit import APIs, Settings, option, validate
    >>>
    >>> apis = APIs.with_base_url("https://api.example.com/v1")
    >>> apis.resolve("/users/1")
    'https://api.example.com/v1/users/1'
    >>>
    >>> class FetchSettings(Settings, scope="users.fetch"):
    ...     token = option(str)
    ...
    ...     @validate("token")
    ...     def token_present(self):
    ...         return self.token != ""
    >>>
    >>> FetchSettings.build(None, {"token": "secret"}).options()["token"]
    'secret'

Configuration:
    - CLIENTKIT_LOG_LEVEL=DEBUG (level used by setup_logging)
    - CLIENTKIT_LOG_OPTION_VALUES=false (hide option values in settings logs)
"""

__version__ = "0.1.0"

from .apis import APIBinding, APIs
from .exceptions import (
    AddressResolutionError,
    ClientKitError,
    NameReservedError,
    SettingsValidationError,
)
from .result import Result
from .settings import Settings, memoized, option, validate

__all__ = [
    "APIs",
    "APIBinding",
    "Settings",
    "option",
    "memoized",
    "validate",
    "Result",
    "ClientKitError",
    "AddressResolutionError",
    "NameReservedError",
    "SettingsValidationError",
]
