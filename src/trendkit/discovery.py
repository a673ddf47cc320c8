"""API discovery and introspection for trendkit.

Provides ``describe()`` which returns a machine-readable schema of
the library's public surface: version, stable APIs, error codes with
fix hints, configuration defaults and presets.

Usage:
    >>> from trendkit import describe
    >>> info = describe()
    >>> info["version"]
    '0.3.0'
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any


def describe() -> dict[str, Any]:
    """Return a machine-readable API schema for trendkit.

    Returns:
        Structured dict with ``version``, ``apis``, ``error_codes``,
        ``config_defaults`` and ``presets``.
    """
    import trendkit
    from trendkit.core.config import ForecastConfig

    return {
        "version": trendkit.__version__,
        "apis": _get_apis(),
        "error_codes": _get_error_codes(),
        "config_defaults": asdict(ForecastConfig()),
        "presets": {
            name: asdict(ForecastConfig.preset(name)) for name in ("narrow", "wide", "strict")
        },
    }


def _get_apis() -> dict[str, dict[str, str]]:
    """Return stable API surface."""
    return {
        "parse": {
            "function": "parse",
            "description": "Parse delimited text into a typed Dataset",
        },
        "classify": {
            "function": "classify",
            "description": "Detect numeric, time, metric and flag columns",
        },
        "kpis": {
            "function": "compute_kpis",
            "description": "Average and growth per numeric non-flag column",
        },
        "forecast": {
            "function": "run_forecast",
            "description": "Smoothed trend projection with bands and confidence score",
        },
        "analyze": {
            "function": "analyze",
            "description": "Run the full pipeline on raw text",
        },
    }


def _get_error_codes() -> dict[str, dict[str, str]]:
    """Return error codes with their fix hints."""
    from trendkit.core.errors import ERROR_REGISTRY

    return {
        code: {"class": cls.__name__, "fix_hint": cls.fix_hint}
        for code, cls in ERROR_REGISTRY.items()
    }


__all__ = ["describe"]
