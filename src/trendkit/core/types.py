"""Cell value types shared across trendkit.

Every parsed field is either a ``Number`` or a ``Text``. ``parse_cell`` is
the one place that decides which, and it never raises.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

# Whole-field decimal literal: sign, digits with optional fraction, exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Number:
    """Numeric cell."""

    value: float

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True)
class Text:
    """Text cell; the empty string stands for a missing field."""

    value: str = ""

    def __str__(self) -> str:
        return self.value


CellValue = Number | Text


def parse_cell(raw: str | None) -> CellValue:
    """Parse one raw field into a tagged cell value.

    The field is trimmed first. It becomes a ``Number`` only when the whole
    trimmed field is a finite decimal literal; partial matches such as
    ``"12abc"`` and tokens such as ``"nan"`` stay ``Text``.
    """
    if raw is None:
        return Text("")
    field = raw.strip()
    if _NUMBER_RE.fullmatch(field) is None:
        return Text(field)
    value = float(field)
    if not math.isfinite(value):
        # Literals like 1e999 overflow to inf
        return Text(field)
    return Number(value)


def as_number(cell: CellValue) -> float | None:
    """Return the float inside a numeric cell, or None for text."""
    return cell.value if isinstance(cell, Number) else None


__all__ = [
    "CellValue",
    "Number",
    "Text",
    "as_number",
    "parse_cell",
]
