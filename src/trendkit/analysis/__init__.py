"""Summary statistics over classified datasets."""

from trendkit.analysis.kpi import compute_kpis, growth_pct, kpi_for_values

__all__ = ["compute_kpis", "growth_pct", "kpi_for_values"]
