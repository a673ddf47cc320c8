"""Descriptive statistics, smoothing and slope estimators."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Literal

import numpy as np

SlopeMethod = Literal["endpoint", "regression"]


def _as_array(xs: Sequence[float]) -> np.ndarray:
    arr = np.asarray(xs, dtype=float)
    if arr.size == 0:
        raise ValueError("Statistic of an empty sequence is undefined")
    return arr


def _scaled(fn, arr: np.ndarray) -> float:
    """Apply ``fn`` and retry on values scaled by max |x| if it overflows."""
    with np.errstate(over="ignore", invalid="ignore"):
        value = float(fn(arr))
        if math.isfinite(value):
            return value
        scale = float(np.max(np.abs(arr)))
        return float(fn(arr / scale)) * scale


def mean(xs: Sequence[float]) -> float:
    return _scaled(np.mean, _as_array(xs))


def std(xs: Sequence[float]) -> float:
    """Population standard deviation."""
    return _scaled(np.std, _as_array(xs))


def volatility(xs: Sequence[float]) -> float:
    """Coefficient of variation, std / |mean|.

    A flat series has zero volatility; a non-flat series centred on zero,
    or one whose ratio is not finite, has infinite volatility.
    """
    sigma = std(xs)
    mu = abs(mean(xs))
    if sigma == 0:
        return 0.0
    if mu == 0:
        return math.inf
    ratio = sigma / mu
    return ratio if math.isfinite(ratio) else math.inf


def ema(xs: Sequence[float], alpha: float = 0.35) -> list[float]:
    """Exponential moving average.

    ``s[0] = x[0]`` and ``s[i] = alpha * x[i] + (1 - alpha) * s[i - 1]``.
    """
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"alpha must be in [0, 1], got {alpha}")
    smoothed: list[float] = []
    for x in xs:
        if not smoothed:
            smoothed.append(float(x))
        else:
            smoothed.append(alpha * x + (1 - alpha) * smoothed[-1])
    return smoothed


def endpoint_slope(s: Sequence[float]) -> float:
    """Average step between the first and last value."""
    if len(s) == 0:
        raise ValueError("Slope of an empty sequence is undefined")
    return (s[-1] - s[0]) / max(1, len(s) - 1)


def regression_slope(s: Sequence[float]) -> float:
    """Index-weighted slope, sum(i * x[i]) / sum(i ** 2)."""
    if len(s) == 0:
        raise ValueError("Slope of an empty sequence is undefined")
    idx = np.arange(len(s), dtype=float)
    denom = float(np.sum(idx * idx))
    if denom == 0:
        return 0.0
    return float(np.sum(idx * np.asarray(s, dtype=float))) / denom


def slope(s: Sequence[float], method: SlopeMethod = "endpoint") -> float:
    """Dispatch to the configured slope estimator."""
    if method == "endpoint":
        return endpoint_slope(s)
    if method == "regression":
        return regression_slope(s)
    raise ValueError(f"Unknown slope method: {method}")


__all__ = [
    "SlopeMethod",
    "ema",
    "endpoint_slope",
    "mean",
    "regression_slope",
    "slope",
    "std",
    "volatility",
]
