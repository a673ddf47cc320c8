"""Column profiling: numeric, time, metric and flag detection."""

from trendkit.profiling.classify import (
    METRIC_KEYWORDS,
    TIME_KEYWORDS,
    Classification,
    ColumnProfile,
    classify,
    is_flag_column,
)

__all__ = [
    "METRIC_KEYWORDS",
    "TIME_KEYWORDS",
    "Classification",
    "ColumnProfile",
    "classify",
    "is_flag_column",
]
