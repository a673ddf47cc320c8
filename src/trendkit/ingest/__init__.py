"""Ingestion of raw delimited text into typed datasets."""

from trendkit.ingest.parser import (
    DELIMITER_CANDIDATES,
    detect_delimiter,
    normalize_header,
    parse,
    split_lines,
)

__all__ = [
    "DELIMITER_CANDIDATES",
    "detect_delimiter",
    "normalize_header",
    "parse",
    "split_lines",
]
