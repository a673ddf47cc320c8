"""Unified configuration for forecasting.

A single frozen dataclass holds every tunable of the forecast engine:
smoothing factor, horizon, band width, sample floor, slope estimator and
the score thresholds used for labeling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# Absolute floor for forecasting; callers may only raise it.
MIN_SAMPLES_FLOOR = 3

# Band multiplier for the ~95% interval mode.
WIDE_BAND_MULTIPLIER = 1.96


@dataclass(frozen=True)
class ForecastConfig:
    """Configuration for the trend forecast.

    Args:
        alpha: Exponential smoothing factor in [0, 1]
        horizon: Number of periods to project (0 yields an empty forecast)
        band_multiplier: Width of the confidence band in standard deviations
        min_samples: Minimum numeric points required to forecast
        slope_method: 'endpoint' (canonical) or 'regression'
        valid_threshold: Scores at or above this are labeled 'Valid'
        moderate_threshold: Scores at or above this are labeled 'Moderate'
    """

    alpha: float = 0.35
    horizon: int = 6
    band_multiplier: float = 1.0
    min_samples: int = MIN_SAMPLES_FLOOR

    slope_method: Literal["endpoint", "regression"] = "endpoint"

    valid_threshold: float = 75.0
    moderate_threshold: float = 55.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must be in [0, 1], got {self.alpha}")
        if self.horizon < 0:
            raise ValueError(f"horizon must be non-negative, got {self.horizon}")
        if self.band_multiplier < 0:
            raise ValueError(f"band_multiplier must be non-negative, got {self.band_multiplier}")
        if self.min_samples < MIN_SAMPLES_FLOOR:
            raise ValueError(
                f"min_samples must be at least {MIN_SAMPLES_FLOOR}, got {self.min_samples}"
            )
        if self.slope_method not in ("endpoint", "regression"):
            raise ValueError(f"Unknown slope_method: {self.slope_method}")
        if self.moderate_threshold > self.valid_threshold:
            raise ValueError("moderate_threshold must not exceed valid_threshold")

    @classmethod
    def narrow(cls, horizon: int = 6) -> ForecastConfig:
        """Heuristic preset: one standard deviation bands."""
        return cls(horizon=horizon, band_multiplier=1.0)

    @classmethod
    def wide(cls, horizon: int = 6) -> ForecastConfig:
        """Wide-interval preset: ~95% bands."""
        return cls(horizon=horizon, band_multiplier=WIDE_BAND_MULTIPLIER)

    @classmethod
    def strict(cls, horizon: int = 6) -> ForecastConfig:
        """Strict preset for report-quality confidence.

        Requires six points and uses wide bands with the lower 70/50
        labeling thresholds.
        """
        return cls(
            horizon=horizon,
            band_multiplier=WIDE_BAND_MULTIPLIER,
            min_samples=6,
            valid_threshold=70.0,
            moderate_threshold=50.0,
        )

    @classmethod
    def preset(cls, name: str, horizon: int = 6) -> ForecastConfig:
        """Look up a preset by name."""
        presets = {"narrow": cls.narrow, "wide": cls.wide, "strict": cls.strict}
        if name not in presets:
            raise ValueError(f"Unknown preset: {name}. Expected one of {sorted(presets)}")
        return presets[name](horizon=horizon)
