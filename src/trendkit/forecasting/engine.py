"""Trend forecast engine.

Core logic: smooth → estimate slope → project → bands → score
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from trendkit.core.config import ForecastConfig
from trendkit.core.errors import EInsufficientData
from trendkit.core.results import ConfidenceLabel, ForecastResult
from trendkit.forecasting import stats

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# =============================================================================
# Projection
# =============================================================================


def project(last: float, slope: float, periods: int = 6) -> list[float]:
    """Extend a trend line from the last smoothed value.

    Each step adds ``slope`` to the running value and records it rounded to
    two decimals. Rounding does not feed back into the running value.
    """
    if periods < 0:
        raise ValueError(f"periods must be non-negative, got {periods}")
    points = []
    for _ in range(periods):
        last += slope
        points.append(round(last, 2))
    return points


def confidence_bands(
    history: Sequence[float],
    forecast: Sequence[float],
    k: float = 1.0,
) -> tuple[list[float], list[float]]:
    """Symmetric bands of ``k`` standard deviations around each point.

    Returns:
        (upper, lower) lists parallel to ``forecast``
    """
    if k < 0:
        raise ValueError(f"band multiplier must be non-negative, got {k}")
    width = k * stats.std(history)
    upper = [f + width for f in forecast]
    lower = [f - width for f in forecast]
    return upper, lower


# =============================================================================
# Scoring
# =============================================================================


def confidence_score(n: int, volatility: float, slope: float) -> float:
    """Heuristic confidence in [0, 100].

    Rewards more points, lower volatility and a clearer trend. For fixed
    ``n`` and ``slope`` the score never rises with volatility. A NaN
    volatility scores as the worst case and a NaN slope earns no trend credit.
    """
    if math.isnan(volatility):
        volatility = math.inf
    if math.isnan(slope):
        slope = 0.0
    size_term = min(30.0, float(n))
    stability_term = _clamp(20.0 - volatility * 100.0, -20.0, 20.0)
    trend_term = min(20.0, abs(slope) * 10.0)
    return _clamp(50.0 + size_term + stability_term + trend_term, 0.0, 100.0)


def confidence_label(
    score: float,
    valid_threshold: float = 75.0,
    moderate_threshold: float = 55.0,
) -> ConfidenceLabel:
    if score >= valid_threshold:
        return ConfidenceLabel.VALID
    if score >= moderate_threshold:
        return ConfidenceLabel.MODERATE
    return ConfidenceLabel.WEAK


# =============================================================================
# Main entry point
# =============================================================================


def run_forecast(
    series: Sequence[float],
    config: ForecastConfig | None = None,
) -> ForecastResult:
    """Forecast a numeric series.

    Args:
        series: Numeric values in row order
        config: Forecast configuration (defaults to ForecastConfig())

    Returns:
        ForecastResult with smoothed history, projected points, bands and score

    Raises:
        EInsufficientData: If the series has fewer than ``config.min_samples`` points
    """
    config = config or ForecastConfig()
    values = [float(x) for x in series]

    if len(values) < config.min_samples:
        raise EInsufficientData(
            f"Forecast needs at least {config.min_samples} points, got {len(values)}",
            context={"n": len(values), "min_samples": config.min_samples},
        )

    smoothed = stats.ema(values, config.alpha)
    trend = stats.slope(smoothed, config.slope_method)
    points = project(smoothed[-1], trend, config.horizon)
    upper, lower = confidence_bands(values, points, config.band_multiplier)

    vol = stats.volatility(values)
    score = confidence_score(len(values), vol, trend)
    label = confidence_label(score, config.valid_threshold, config.moderate_threshold)

    logger.debug(
        "Forecast n=%d slope=%.4f volatility=%.4f score=%.1f (%s)",
        len(values),
        trend,
        vol,
        score,
        label,
    )

    return ForecastResult(
        smoothed=tuple(smoothed),
        forecast=tuple(points),
        upper=tuple(upper),
        lower=tuple(lower),
        slope=trend,
        volatility=vol,
        score=score,
        label=label,
        config=config,
    )


__all__ = [
    "confidence_bands",
    "confidence_label",
    "confidence_score",
    "project",
    "run_forecast",
]
