"""Tests for core error types.

Tests the error hierarchy and rich context functionality.
"""

from __future__ import annotations

import pytest

from trendkit.core.errors import (
    ERROR_REGISTRY,
    EContract,
    EEmptyInput,
    EInsufficientData,
    ENoNumericColumns,
    TrendKitError,
    get_error_class,
)


class TestTrendKitError:
    """Test base error class."""

    def test_basic_error(self):
        """Basic error creation."""
        err = TrendKitError("Something went wrong")
        assert err.message == "Something went wrong"
        assert err.error_code == "E_UNKNOWN"
        assert err.context == {}

    def test_error_with_context(self):
        """Error with context."""
        err = TrendKitError("Test error", context={"column": "sales", "n": 2})
        assert err.context == {"column": "sales", "n": 2}
        assert "column" in str(err)

    def test_error_with_fix_hint(self):
        """Error with fix hint."""
        err = TrendKitError("Test error", fix_hint="Try again")
        assert err.fix_hint == "Try again"
        assert "Try again" in str(err)

    def test_error_str_format(self):
        """Error string formatting."""
        err = TrendKitError("Test message", context={"key": "value"}, fix_hint="Do this")
        err_str = str(err)
        assert "[E_UNKNOWN]" in err_str
        assert "Test message" in err_str
        assert "key" in err_str
        assert "Do this" in err_str


class TestErrorSubclasses:
    """Test specific error kinds."""

    @pytest.mark.parametrize(
        ("cls", "code"),
        [
            (EEmptyInput, "E_EMPTY_INPUT"),
            (ENoNumericColumns, "E_NO_NUMERIC"),
            (EInsufficientData, "E_INSUFFICIENT_DATA"),
            (EContract, "E_CONTRACT"),
        ],
    )
    def test_error_codes(self, cls, code):
        """Each error class carries its code and a default hint."""
        err = cls("boom")
        assert err.error_code == code
        assert err.fix_hint
        assert isinstance(err, TrendKitError)

    def test_custom_fix_hint(self):
        """Can override fix hint."""
        err = EInsufficientData("Too short", fix_hint="Custom hint")
        assert err.fix_hint == "Custom hint"

    def test_default_hint_not_shared_after_override(self):
        """Overriding a hint does not leak into other instances."""
        EContract("a", fix_hint="Other")
        assert "headers" in EContract("b").fix_hint

    def test_catchable_as_base(self):
        """Subclasses can be caught as TrendKitError."""
        with pytest.raises(TrendKitError):
            raise EEmptyInput("empty")


class TestErrorRegistry:
    """Test error code lookup."""

    def test_registry_contains_all_codes(self):
        assert set(ERROR_REGISTRY) == {
            "E_EMPTY_INPUT",
            "E_NO_NUMERIC",
            "E_INSUFFICIENT_DATA",
            "E_CONTRACT",
        }

    def test_get_error_class(self):
        assert get_error_class("E_EMPTY_INPUT") is EEmptyInput

    def test_unknown_code_falls_back_to_base(self):
        assert get_error_class("E_NOPE") is TrendKitError
