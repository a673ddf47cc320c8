"""Core module - contracts and data structures.

This module provides the foundational types, configuration and errors
shared by the ingestion, profiling, analysis and forecasting stages.
"""

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

__all__ = [
    # Config
    "ForecastConfig",
    # Data
    "Dataset",
    "CellValue",
    "Number",
    "Text",
    "parse_cell",
    # Results
    "AnalysisReport",
    "ConfidenceLabel",
    "ForecastResult",
    "ForecastStatus",
    "Kpi",
    # Errors
    "TrendKitError",
    "EContract",
    "EEmptyInput",
    "EInsufficientData",
    "ENoNumericColumns",
]
