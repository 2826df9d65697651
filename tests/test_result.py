"""
Tests for Result values.
"""

import pytest

from clientkit.exceptions import AddressResolutionError
from clientkit.result import Result


class TestResult:
    """Test Result construction and unwrapping."""

    def test_ok(self):
        result = Result.ok("https://api.example.com/users")
        assert result.success
        assert result.error is None
        assert result.unwrap() == "https://api.example.com/users"

    def test_fail(self):
        error = AddressResolutionError("/users")
        result = Result.fail(error)

        assert not result.success
        assert result.value is None
        with pytest.raises(AddressResolutionError) as exc_info:
            result.unwrap()
        assert exc_info.value is error

    def test_frozen(self):
        result = Result.ok(1)
        with pytest.raises(AttributeError):
            result.value = 2
