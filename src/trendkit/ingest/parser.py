"""Delimited text ingestion.

Turns raw text into a typed ``Dataset``: detects the delimiter from the
header line, normalizes header names and parses every field with
``parse_cell``.
"""

from __future__ import annotations

import logging
import re

from trendkit.core.dataset import Dataset
from trendkit.core.errors import EEmptyInput
from trendkit.core.types import parse_cell

logger = logging.getLogger(__name__)

# Tried in this order; the first one that splits the header wins.
DELIMITER_CANDIDATES: tuple[str, ...] = (",", ";", "\t", "|")

PLACEHOLDER_HEADER = "field"

_INVALID_HEADER_CHARS = re.compile(r"[^a-z0-9_]")


def split_lines(text: str) -> list[str]:
    """Split text into trimmed, non-empty lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def detect_delimiter(header_line: str) -> str | None:
    """Return the first candidate delimiter that splits the line.

    Returns None when no candidate yields more than one field.
    """
    for candidate in DELIMITER_CANDIDATES:
        if len(header_line.split(candidate)) > 1:
            return candidate
    return None


def normalize_header(name: str) -> str:
    """Lowercase a header and replace anything outside [a-z0-9_] with '_'."""
    normalized = _INVALID_HEADER_CHARS.sub("_", name.strip().lower())
    return normalized or PLACEHOLDER_HEADER


def _dedupe(headers: list[str]) -> list[str]:
    seen: dict[str, int] = {}
    taken = set(headers)
    result = []
    for header in headers:
        if header not in seen:
            seen[header] = 1
            result.append(header)
            continue
        n = seen[header]
        candidate = header
        while candidate in taken:
            n += 1
            candidate = f"{header}_{n}"
        seen[header] = n
        taken.add(candidate)
        result.append(candidate)
    return result


def synthesize_headers(n_fields: int) -> list[str]:
    """Header names for text without a recognised delimiter."""
    return [f"Column_{i}" for i in range(1, n_fields + 1)]


def parse(text: str) -> Dataset:
    """Parse delimited text into a Dataset.

    Args:
        text: Full raw text, already decoded

    Returns:
        Dataset with normalized unique headers and typed cells

    Raises:
        EEmptyInput: If the text has no non-empty lines
    """
    lines = split_lines(text)
    if not lines:
        raise EEmptyInput("Input contains no non-empty lines")

    delimiter = detect_delimiter(lines[0])

    if delimiter is None:
        # Whitespace fallback: no header row, first line is data
        headers = synthesize_headers(len(lines[0].split()))
        body = [line.split() for line in lines]
        logger.debug("No delimiter found; using whitespace with %d columns", len(headers))
    else:
        headers = _dedupe([normalize_header(h) for h in lines[0].split(delimiter)])
        body = [line.split(delimiter) for line in lines[1:]]
        logger.debug("Detected delimiter %r with %d columns", delimiter, len(headers))

    dataset = Dataset.from_cells(
        headers,
        ([parse_cell(field) for field in fields] for fields in body),
        delimiter=delimiter,
    )
    logger.info("Loaded %d rows", dataset.n_rows)
    return dataset
