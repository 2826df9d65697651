"""
Exception hierarchy for the clientkit toolkit.
"""


class ClientKitError(Exception):
    """Base exception for all toolkit errors."""


class AddressResolutionError(ClientKitError, LookupError):
    """Raised when no API binding resolves an address."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Address '{address}' is not resolved by any API")


class NameReservedError(ClientKitError):
    """Raised when a declared option or attribute name cannot be used."""

    def __init__(self, name: str, reason: str = "is reserved"):
        self.name = name
        super().__init__(f"Name '{name}' {reason}")


class SettingsValidationError(ClientKitError, ValueError):
    """Raised when settings cannot be built from the given options."""
