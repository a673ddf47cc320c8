"""Per-column KPI computation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from trendkit.core.dataset import Dataset
from trendkit.core.results import Kpi
from trendkit.forecasting import stats
from trendkit.profiling.classify import is_flag_column

logger = logging.getLogger(__name__)


def growth_pct(first: float, last: float) -> float | None:
    """Percentage change relative to |first|; None when first is zero."""
    if first == 0:
        return None
    return (last - first) / abs(first) * 100.0


def kpi_for_values(column: str, values: Sequence[float]) -> Kpi | None:
    """Compute a KPI for one column, or None with fewer than two values."""
    if len(values) < 2:
        return None
    first, last = values[0], values[-1]
    return Kpi(
        column=column,
        average=stats.mean(values),
        growth_pct=growth_pct(first, last),
        count=len(values),
        total=float(sum(values)),
        start=first,
        end=last,
    )


def compute_kpis(dataset: Dataset, numeric_columns: Iterable[str]) -> list[Kpi]:
    """Compute KPIs for every numeric, non-flag column.

    Columns with fewer than two numeric values are skipped.
    """
    kpis = []
    for column in numeric_columns:
        values = dataset.series(column)
        if is_flag_column(values):
            continue
        kpi = kpi_for_values(column, values)
        if kpi is None:
            logger.debug("Skipping KPI for %s: %d numeric values", column, len(values))
            continue
        logger.info(
            "%s: points=%d average=%.2f start=%g end=%g growth=%s",
            column,
            kpi.count,
            kpi.average,
            kpi.start,
            kpi.end,
            f"{kpi.growth_pct:.2f}%" if kpi.growth_defined else "undefined",
        )
        kpis.append(kpi)
    return kpis
