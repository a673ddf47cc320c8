"""Column classification.

Labels each column of a dataset as numeric, time, metric or flag, and picks
the dataset-level time and metric columns from header names.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from trendkit.core.dataset import Dataset
from trendkit.core.errors import ENoNumericColumns

logger = logging.getLogger(__name__)

# Name fragments, matched case-insensitively
TIME_KEYWORDS: tuple[str, ...] = ("date", "month", "year", "time")
METRIC_KEYWORDS: tuple[str, ...] = ("revenue", "sales", "amount", "price", "value")


def _matches(name: str, keywords: Iterable[str]) -> bool:
    lowered = name.lower()
    return any(k in lowered for k in keywords)


def is_time_name(name: str) -> bool:
    return _matches(name, TIME_KEYWORDS)


def is_metric_name(name: str) -> bool:
    return _matches(name, METRIC_KEYWORDS)


def is_flag_column(values: Iterable[float]) -> bool:
    """Return True for binary indicator columns.

    A column is a flag when it has at most two distinct numeric values and
    zero is one of them.
    """
    distinct = set(values)
    return len(distinct) <= 2 and 0 in distinct


@dataclass(frozen=True)
class ColumnProfile:
    """Classification of a single column."""

    name: str
    is_numeric: bool
    is_time: bool
    is_metric: bool
    is_flag: bool
    numeric_count: int


@dataclass(frozen=True)
class Classification:
    """Column profiles plus the dataset-level selections.

    Attributes:
        profiles: One profile per header, in header order
        numeric_columns: Headers with at least one numeric cell
        time_column: First header whose name looks temporal
        metric_column: Numeric non-flag column chosen for KPIs and forecast
        flag_columns: Numeric columns holding binary indicators
    """

    profiles: tuple[ColumnProfile, ...]
    numeric_columns: tuple[str, ...]
    time_column: str | None
    metric_column: str | None
    flag_columns: tuple[str, ...]

    def profile(self, name: str) -> ColumnProfile | None:
        for p in self.profiles:
            if p.name == name:
                return p
        return None

    @property
    def candidate_metrics(self) -> tuple[str, ...]:
        """Numeric columns eligible for KPIs and forecasting."""
        return tuple(c for c in self.numeric_columns if c not in self.flag_columns)

    def require_metric(self) -> str:
        """Return the metric column or raise ENoNumericColumns."""
        if self.metric_column is None:
            raise ENoNumericColumns(
                "No numeric metric available",
                context={"numeric_columns": list(self.numeric_columns)},
            )
        return self.metric_column


def classify(dataset: Dataset) -> Classification:
    """Classify the columns of a dataset.

    Args:
        dataset: Parsed dataset

    Returns:
        Classification with profiles and time/metric selections. The metric
        column is None when no numeric non-flag column exists.
    """
    profiles = []
    for header in dataset.headers:
        values = dataset.series(header)
        is_numeric = len(values) > 0
        profiles.append(
            ColumnProfile(
                name=header,
                is_numeric=is_numeric,
                is_time=is_time_name(header),
                is_metric=is_metric_name(header),
                is_flag=is_numeric and is_flag_column(values),
                numeric_count=len(values),
            )
        )

    numeric_columns = tuple(p.name for p in profiles if p.is_numeric)
    flag_columns = tuple(p.name for p in profiles if p.is_flag)
    time_column = next((p.name for p in profiles if p.is_time), None)

    candidates = [p for p in profiles if p.is_numeric and not p.is_flag]
    metric = next((p for p in candidates if p.is_metric), None)
    if metric is None and candidates:
        metric = candidates[0]
    metric_column = metric.name if metric is not None else None

    logger.info("Detected numeric columns: %s", ", ".join(numeric_columns) or "none")
    if metric_column is None:
        logger.info("No numeric metric column detected")

    return Classification(
        profiles=tuple(profiles),
        numeric_columns=numeric_columns,
        time_column=time_column,
        metric_column=metric_column,
        flag_columns=flag_columns,
    )
