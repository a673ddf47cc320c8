"""Pipeline for dataset analysis.

Core logic: parse → classify → KPIs → forecast the metric column → report
"""

from __future__ import annotations

import logging

from trendkit.analysis.kpi import compute_kpis
from trendkit.core.config import ForecastConfig
from trendkit.core.dataset import Dataset
from trendkit.core.errors import EContract, EInsufficientData, ENoNumericColumns
from trendkit.core.results import AnalysisReport, ForecastStatus
from trendkit.forecasting.engine import run_forecast
from trendkit.ingest.parser import parse
from trendkit.profiling.classify import Classification, classify

logger = logging.getLogger(__name__)


def _resolve_metric(classification: Classification, metric: str | None) -> str:
    """Pick the forecast subject, validating an explicit override."""
    if metric is None:
        return classification.require_metric()

    if metric not in classification.candidate_metrics:
        raise EContract(
            f"Column {metric!r} cannot be used as a metric",
            context={"candidates": list(classification.candidate_metrics)},
            fix_hint="Choose a numeric column that is not a 0/1 flag",
        )
    return metric


def analyze_dataset(
    dataset: Dataset,
    config: ForecastConfig | None = None,
    metric: str | None = None,
    classification: Classification | None = None,
) -> AnalysisReport:
    """Run classification, KPIs and forecasting on a parsed dataset.

    Args:
        dataset: Parsed dataset
        config: Forecast configuration
        metric: Explicit metric column; defaults to the classified one
        classification: Reuse an existing classification of ``dataset``

    Returns:
        AnalysisReport. A missing metric or too short a series is reported
        through ``status`` rather than raised.

    Raises:
        EContract: If ``metric`` is not a numeric non-flag column
    """
    config = config or ForecastConfig()
    classification = classification or classify(dataset)
    kpis = compute_kpis(dataset, classification.numeric_columns)

    try:
        metric_column = _resolve_metric(classification, metric)
    except ENoNumericColumns as exc:
        logger.info("No numeric columns detected. Forecast skipped.")
        return AnalysisReport(
            dataset=dataset,
            classification=classification,
            kpis=kpis,
            status=ForecastStatus.NO_METRIC,
            message=exc.message,
        )

    try:
        result = run_forecast(dataset.series(metric_column), config)
    except EInsufficientData as exc:
        logger.warning("Forecast for %s skipped: %s", metric_column, exc.message)
        return AnalysisReport(
            dataset=dataset,
            classification=classification,
            kpis=kpis,
            metric_column=metric_column,
            status=ForecastStatus.INSUFFICIENT_DATA,
            message=exc.message,
        )

    return AnalysisReport(
        dataset=dataset,
        classification=classification,
        kpis=kpis,
        metric_column=metric_column,
        status=ForecastStatus.OK,
        forecast=result,
    )


def analyze(
    text: str,
    config: ForecastConfig | None = None,
    metric: str | None = None,
) -> AnalysisReport:
    """Analyze raw delimited text end to end.

    This is the main entry point.

    Raises:
        EEmptyInput: If the text has no non-empty lines
        EContract: If ``metric`` is not a numeric non-flag column

    Examples:
        >>> report = analyze("month,sales\\nJan,10\\nFeb,12\\nMar,15\\n")
        >>> report.forecast.label
    """
    dataset = parse(text)
    return analyze_dataset(dataset, config=config, metric=metric)


def reforecast(
    report: AnalysisReport,
    metric: str,
    config: ForecastConfig | None = None,
) -> AnalysisReport:
    """Recompute the report for another metric column without re-parsing."""
    return analyze_dataset(
        report.dataset,
        config=config,
        metric=metric,
        classification=report.classification,
    )


__all__ = ["analyze", "analyze_dataset", "reforecast"]
