"""Result types for analysis and forecasting.

Plain output containers consumed by rendering and reporting layers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

import pandas as pd

if TYPE_CHECKING:
    from trendkit.core.config import ForecastConfig
    from trendkit.core.dataset import Dataset
    from trendkit.profiling.classify import Classification


def _finite(value: float) -> float | None:
    """Map NaN and infinities to None so dict output stays valid JSON."""
    return value if math.isfinite(value) else None


def _finite_list(values: tuple[float, ...]) -> list[float | None]:
    return [_finite(v) for v in values]


@dataclass(frozen=True)
class Kpi:
    """Summary statistics for one numeric column.

    ``growth_pct`` is None when growth is undefined (first value is zero);
    callers must check ``growth_defined`` before displaying it.
    """

    column: str
    average: float
    growth_pct: float | None
    count: int
    total: float
    start: float
    end: float

    @property
    def growth_defined(self) -> bool:
        return self.growth_pct is not None and math.isfinite(self.growth_pct)

    def to_dict(self) -> dict[str, Any]:
        return {
            "column": self.column,
            "average": _finite(self.average),
            "growth_pct": self.growth_pct if self.growth_defined else None,
            "count": self.count,
            "total": _finite(self.total),
            "start": _finite(self.start),
            "end": _finite(self.end),
        }


def kpis_to_frame(kpis: list[Kpi]) -> pd.DataFrame:
    """Render KPIs as a DataFrame, one row per column."""
    columns = ["column", "average", "growth_pct", "count", "total", "start", "end"]
    return pd.DataFrame([k.to_dict() for k in kpis], columns=columns)


class ConfidenceLabel(StrEnum):
    """Qualitative reading of the confidence score."""

    VALID = "Valid"
    MODERATE = "Moderate"
    WEAK = "Weak"


@dataclass(frozen=True)
class ForecastResult:
    """Trend forecast for one series.

    ``smoothed`` has the length of the input series; ``forecast``,
    ``upper`` and ``lower`` have the length of the horizon.
    """

    smoothed: tuple[float, ...]
    forecast: tuple[float, ...]
    upper: tuple[float, ...]
    lower: tuple[float, ...]
    slope: float
    volatility: float
    score: float
    label: ConfidenceLabel
    config: ForecastConfig | None = None

    @property
    def horizon(self) -> int:
        return len(self.forecast)

    def to_frame(self) -> pd.DataFrame:
        """Return forecast points with bands, one row per future step."""
        return pd.DataFrame(
            {
                "step": range(1, self.horizon + 1),
                "yhat": list(self.forecast),
                "lower": list(self.lower),
                "upper": list(self.upper),
            }
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "smoothed": _finite_list(self.smoothed),
            "forecast": _finite_list(self.forecast),
            "upper": _finite_list(self.upper),
            "lower": _finite_list(self.lower),
            "slope": _finite(self.slope),
            "volatility": _finite(self.volatility),
            "score": _finite(self.score),
            "label": str(self.label),
        }


class ForecastStatus(StrEnum):
    """Outcome of the forecasting stage of an analysis."""

    OK = "ok"
    NO_METRIC = "no_metric"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class AnalysisReport:
    """Complete output of one pipeline run.

    Derived state (classification, KPIs, forecast) always belongs to the
    dataset held here; a new ingestion produces a new report.
    """

    dataset: Dataset
    classification: Classification
    kpis: list[Kpi] = field(default_factory=list)
    metric_column: str | None = None
    status: ForecastStatus = ForecastStatus.NO_METRIC
    forecast: ForecastResult | None = None
    message: str = ""

    def kpi_frame(self) -> pd.DataFrame:
        return kpis_to_frame(self.kpis)

    def summary(self) -> dict[str, Any]:
        """Machine-readable summary of the run."""
        return {
            "rows": self.dataset.n_rows,
            "headers": list(self.dataset.headers),
            "numeric_columns": list(self.classification.numeric_columns),
            "flag_columns": list(self.classification.flag_columns),
            "time_column": self.classification.time_column,
            "metric_column": self.metric_column,
            "kpis": [k.to_dict() for k in self.kpis],
            "forecast_status": str(self.status),
            "forecast": self.forecast.to_dict() if self.forecast is not None else None,
            "message": self.message,
        }
