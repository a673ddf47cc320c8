"""trendkit - Quick KPIs and trend forecasts for small delimited datasets.

Parses CSV-like text, classifies its columns, computes per-column KPIs and
projects a short-horizon trend with confidence bands and a score.

Basic usage:
    >>> from trendkit import analyze
    >>> report = analyze(text)
    >>> report.forecast.forecast

Granular control:
    >>> from trendkit import parse, classify, compute_kpis, run_forecast
    >>> dataset = parse(text)
    >>> profile = classify(dataset)
    >>> kpis = compute_kpis(dataset, profile.numeric_columns)
    >>> result = run_forecast(dataset.series(profile.metric_column), ForecastConfig.wide())
"""

__version__ = "0.3.0"

from trendkit.analysis.kpi import compute_kpis
from trendkit.core.config import ForecastConfig
from trendkit.core.dataset import Dataset
from trendkit.core.errors import (
    EContract,
    EEmptyInput,
    EInsufficientData,
    ENoNumericColumns,
    TrendKitError,
)
from trendkit.core.results import (
    AnalysisReport,
    ConfidenceLabel,
    ForecastResult,
    ForecastStatus,
    Kpi,
)
from trendkit.core.types import CellValue, Number, Text, parse_cell
from trendkit.discovery import describe
from trendkit.forecasting.engine import run_forecast
from trendkit.ingest.parser import parse
from trendkit.pipeline import analyze, analyze_dataset, reforecast
from trendkit.profiling.classify import Classification, ColumnProfile, classify
from trendkit.session import Session, read_text_async

__all__ = [
    "__version__",
    # Pipeline
    "analyze",
    "analyze_dataset",
    "reforecast",
    "Session",
    "read_text_async",
    # Stages
    "parse",
    "classify",
    "compute_kpis",
    "run_forecast",
    # Types
    "ForecastConfig",
    "Dataset",
    "CellValue",
    "Number",
    "Text",
    "parse_cell",
    "Classification",
    "ColumnProfile",
    "Kpi",
    "ForecastResult",
    "ForecastStatus",
    "ConfidenceLabel",
    "AnalysisReport",
    # Discovery
    "describe",
    # Errors
    "TrendKitError",
    "EContract",
    "EEmptyInput",
    "EInsufficientData",
    "ENoNumericColumns",
]
