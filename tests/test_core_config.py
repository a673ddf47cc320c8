"""Tests for ForecastConfig.

Tests configuration validation, presets, and defaults.
"""

from __future__ import annotations

import dataclasses

import pytest

from trendkit import ForecastConfig


class TestForecastConfigDefaults:
    """Test config defaults."""

    def test_defaults(self):
        """Default values match the canonical engine settings."""
        config = ForecastConfig()
        assert config.alpha == 0.35
        assert config.horizon == 6
        assert config.band_multiplier == 1.0
        assert config.min_samples == 3
        assert config.slope_method == "endpoint"
        assert config.valid_threshold == 75.0
        assert config.moderate_threshold == 55.0

    def test_frozen(self):
        """Config is immutable."""
        config = ForecastConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.alpha = 0.5  # type: ignore[misc]


class TestForecastConfigValidation:
    """Test config validation."""

    @pytest.mark.parametrize("alpha", [-0.1, 1.1])
    def test_alpha_range(self, alpha):
        with pytest.raises(ValueError, match="alpha must be in"):
            ForecastConfig(alpha=alpha)

    @pytest.mark.parametrize("alpha", [0.0, 1.0])
    def test_alpha_bounds_allowed(self, alpha):
        assert ForecastConfig(alpha=alpha).alpha == alpha

    def test_horizon_negative(self):
        with pytest.raises(ValueError, match="horizon must be non-negative"):
            ForecastConfig(horizon=-1)

    def test_horizon_zero_allowed(self):
        assert ForecastConfig(horizon=0).horizon == 0

    def test_band_multiplier_negative(self):
        with pytest.raises(ValueError, match="band_multiplier must be non-negative"):
            ForecastConfig(band_multiplier=-1.0)

    def test_min_samples_floor(self):
        """min_samples cannot go below the absolute floor of 3."""
        with pytest.raises(ValueError, match="min_samples must be at least 3"):
            ForecastConfig(min_samples=2)

    def test_unknown_slope_method(self):
        with pytest.raises(ValueError, match="Unknown slope_method"):
            ForecastConfig(slope_method="ols")  # type: ignore[arg-type]

    def test_thresholds_ordered(self):
        with pytest.raises(ValueError, match="moderate_threshold"):
            ForecastConfig(valid_threshold=50.0, moderate_threshold=60.0)

    def test_replace_revalidates(self):
        """dataclasses.replace runs validation again."""
        with pytest.raises(ValueError):
            dataclasses.replace(ForecastConfig(), alpha=2.0)


class TestForecastConfigPresets:
    """Test preset constructors."""

    def test_narrow(self):
        assert ForecastConfig.narrow().band_multiplier == 1.0

    def test_wide(self):
        assert ForecastConfig.wide().band_multiplier == 1.96

    def test_strict(self):
        config = ForecastConfig.strict(horizon=3)
        assert config.horizon == 3
        assert config.min_samples == 6
        assert config.band_multiplier == 1.96
        assert (config.valid_threshold, config.moderate_threshold) == (70.0, 50.0)

    def test_preset_lookup(self):
        assert ForecastConfig.preset("wide") == ForecastConfig.wide()

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown preset"):
            ForecastConfig.preset("ultra")
