"""Core error types with rich context.

A small set of error classes, each identified by an ``error_code`` and
carrying optional context and a fix hint for the caller.
"""

from __future__ import annotations

from typing import Any


class TrendKitError(Exception):
    """Base exception with rich context.

    All errors in trendkit use this class with specific error_code
    values instead of creating many subclasses.
    """

    error_code: str = "E_UNKNOWN"
    fix_hint: str = ""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        fix_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if fix_hint:
            self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f"(context: {self.context})")
        if self.fix_hint:
            parts.append(f"[hint: {self.fix_hint}]")
        return " ".join(parts)


class EEmptyInput(TrendKitError):
    """Input text has no non-empty lines."""

    error_code = "E_EMPTY_INPUT"
    fix_hint = "Provide delimited text with a header line and at least one row"


class ENoNumericColumns(TrendKitError):
    """Dataset has no numeric column usable as a metric."""

    error_code = "E_NO_NUMERIC"
    fix_hint = "Add a column of numeric values (flag columns of 0/1 do not count)"


class EInsufficientData(TrendKitError):
    """Series is too short to forecast."""

    error_code = "E_INSUFFICIENT_DATA"
    fix_hint = "Supply more rows or lower ForecastConfig.min_samples (floor is 3)"


class EContract(TrendKitError):
    """API called with arguments that break its contract."""

    error_code = "E_CONTRACT"
    fix_hint = "Check column names against Dataset.headers"


ERROR_REGISTRY: dict[str, type[TrendKitError]] = {
    "E_EMPTY_INPUT": EEmptyInput,
    "E_NO_NUMERIC": ENoNumericColumns,
    "E_INSUFFICIENT_DATA": EInsufficientData,
    "E_CONTRACT": EContract,
}


def get_error_class(error_code: str) -> type[TrendKitError]:
    """Get error class by code."""
    return ERROR_REGISTRY.get(error_code, TrendKitError)
