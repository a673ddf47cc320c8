"""CLI entry point for trendkit.

Enables ``python -m trendkit <command>`` usage.

Subcommands:
    analyze  - Parse a delimited file, print KPIs and the trend forecast.
    describe - Machine-readable API schema (JSON to stdout).
    version  - Print trendkit version.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from trendkit.core.config import ForecastConfig
from trendkit.core.errors import TrendKitError
from trendkit.core.results import AnalysisReport, ForecastStatus


def _build_config(args: argparse.Namespace) -> ForecastConfig:
    config = ForecastConfig.preset(args.preset)
    overrides = {
        name: value
        for name, value in (
            ("horizon", args.horizon),
            ("alpha", args.alpha),
            ("min_samples", args.min_samples),
        )
        if value is not None
    }
    return dataclasses.replace(config, **overrides) if overrides else config


def _print_report(report: AnalysisReport) -> None:
    """Print the analysis as a plain text log."""
    classification = report.classification
    print(f"Loaded {report.dataset.n_rows} rows")
    numeric = ", ".join(classification.numeric_columns) or "none"
    print(f"Detected numeric columns: {numeric}")
    if classification.flag_columns:
        print(f"Flag columns (ignored): {', '.join(classification.flag_columns)}")
    if classification.time_column:
        print(f"Time column: {classification.time_column}")

    for kpi in report.kpis:
        growth = f"{kpi.growth_pct:.2f}%" if kpi.growth_defined else "n/a"
        print(f"--- {kpi.column} ---")
        print(f"Data points: {kpi.count}")
        print(f"Average: {kpi.average:.2f}")
        print(f"Start: {kpi.start:g}")
        print(f"End: {kpi.end:g}")
        print(f"Growth: {growth}")

    if report.status is not ForecastStatus.OK or report.forecast is None:
        print(f"Forecast skipped ({report.status}): {report.message}")
        return

    result = report.forecast
    print(f"=== Forecast: {report.metric_column} ===")
    print(f"Slope: {result.slope:.4f}")
    print(f"Confidence: {result.score:.0f} ({result.label})")
    for step, (yhat, lo, hi) in enumerate(
        zip(result.forecast, result.lower, result.upper, strict=True), start=1
    ):
        print(f"  +{step}: {yhat:.2f}  [{lo:.2f}, {hi:.2f}]")


def _cmd_analyze(args: argparse.Namespace) -> int:
    """Analyze a file and print the results."""
    from trendkit.session import Session, read_text_async

    try:
        config = _build_config(args)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    try:
        text = read_text_async(args.file, encoding=args.encoding).result()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Could not read {args.file}: {exc}", file=sys.stderr)
        return 1

    try:
        session = Session(config=config).ingest(text, metric=args.metric)
    except TrendKitError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    report = session.report
    if args.json:
        json.dump(report.summary(), sys.stdout, indent=2, default=str, allow_nan=False)
        print()
    else:
        _print_report(report)
    return 0


def _cmd_describe() -> int:
    """Print machine-readable API schema as JSON."""
    from trendkit.discovery import describe

    info = describe()
    json.dump(info, sys.stdout, indent=2, default=str)
    print()  # trailing newline
    return 0


def _cmd_version() -> int:
    """Print version string."""
    import trendkit

    print(trendkit.__version__)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="trendkit",
        description="trendkit - KPIs and trend forecasts for small delimited datasets",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a delimited text file")
    analyze_parser.add_argument("file", help="Path to the data file")
    analyze_parser.add_argument("--metric", help="Column to forecast (default: auto-detect)")
    analyze_parser.add_argument(
        "--preset",
        choices=["narrow", "wide", "strict"],
        default="narrow",
        help="Forecast configuration preset",
    )
    analyze_parser.add_argument("--horizon", type=int, help="Number of periods to forecast")
    analyze_parser.add_argument("--alpha", type=float, help="Smoothing factor in [0, 1]")
    analyze_parser.add_argument("--min-samples", type=int, help="Minimum points to forecast")
    analyze_parser.add_argument("--encoding", default="utf-8", help="File encoding")
    analyze_parser.add_argument("--json", action="store_true", help="Print JSON summary")

    subparsers.add_parser("describe", help="Machine-readable API schema (JSON)")
    subparsers.add_parser("version", help="Print version")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "analyze":
        return _cmd_analyze(args)
    elif args.command == "describe":
        return _cmd_describe()
    elif args.command == "version":
        return _cmd_version()
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
