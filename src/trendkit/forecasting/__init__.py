"""Forecasting: smoothing, slope estimation, projection and confidence."""

from trendkit.forecasting.engine import (
    confidence_bands,
    confidence_label,
    confidence_score,
    project,
    run_forecast,
)
from trendkit.forecasting.stats import (
    ema,
    endpoint_slope,
    mean,
    regression_slope,
    slope,
    std,
    volatility,
)

__all__ = [
    "confidence_bands",
    "confidence_label",
    "confidence_score",
    "ema",
    "endpoint_slope",
    "mean",
    "project",
    "regression_slope",
    "run_forecast",
    "slope",
    "std",
    "volatility",
]
