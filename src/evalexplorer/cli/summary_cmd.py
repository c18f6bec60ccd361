"""evalexplorer summary -- suite-level statistics for one report."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from evalexplorer.cli.output import (
    load_config_or_exit,
    load_report_or_exit,
    render_stats_json,
    render_summary,
)
from evalexplorer.evaluation.aggregation import aggregate


def summary(
    report_file: Path = typer.Argument(..., help="Evaluation report JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print stats as JSON"),
    ci: bool = typer.Option(False, "--ci", help="CI-friendly concise error output"),
) -> None:
    """Show pass rate, latency, token usage and models for a report."""
    config = load_config_or_exit(ci=ci or None)
    report = load_report_or_exit(report_file, ci=ci or config.ci_mode or None)
    stats = aggregate(report)

    if as_json:
        render_stats_json(stats)
        return

    render_summary(report, stats, Console())
