"""Session state for interactive use.

A ``Session`` is an immutable value holding the most recent analysis. Every
operation returns a new session; ingesting new text replaces all derived
state at once.
"""

from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from pathlib import Path

from trendkit.core.config import ForecastConfig
from trendkit.core.errors import EContract
from trendkit.core.results import AnalysisReport
from trendkit.pipeline import analyze, analyze_dataset, reforecast


def _read_text(path: Path, encoding: str) -> str:
    return path.read_text(encoding=encoding)


def read_text_async(
    path: str | Path,
    executor: Executor | None = None,
    encoding: str = "utf-8",
) -> Future[str]:
    """Read a whole file in the background.

    The returned future resolves once with the full text. Without an
    executor a single-worker pool is created and shut down after the read.
    """
    path = Path(path)
    if executor is not None:
        return executor.submit(_read_text, path, encoding)

    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="trendkit-read")
    future = pool.submit(_read_text, path, encoding)
    pool.shutdown(wait=False)
    return future


@dataclass(frozen=True)
class Session:
    """Immutable analysis session."""

    config: ForecastConfig = field(default_factory=ForecastConfig)
    report: AnalysisReport | None = None

    def ingest(self, text: str, metric: str | None = None) -> Session:
        """Analyze new text; nothing from the previous report is kept."""
        return replace(self, report=analyze(text, config=self.config, metric=metric))

    def select_metric(self, metric: str) -> Session:
        """Recompute KPIs and forecast for another metric column."""
        report = self._require_report()
        return replace(self, report=reforecast(report, metric, config=self.config))

    def with_config(self, config: ForecastConfig) -> Session:
        """Switch configuration and recompute the current report, if any."""
        if self.report is None:
            return replace(self, config=config)
        report = analyze_dataset(
            self.report.dataset,
            config=config,
            metric=self.report.metric_column,
            classification=self.report.classification,
        )
        return replace(self, config=config, report=report)

    def _require_report(self) -> AnalysisReport:
        if self.report is None:
            raise EContract(
                "No dataset loaded",
                fix_hint="Call Session.ingest() with file contents first",
            )
        return self.report
