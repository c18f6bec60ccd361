"""evalexplorer cases -- list a report's cases with status and search filters."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from evalexplorer.cli.output import load_config_or_exit, load_report_or_exit, render_case_list
from evalexplorer.evaluation.filtering import StatusFilter, filter_cases


def cases(
    report_file: Path = typer.Argument(..., help="Evaluation report JSON file"),
    status: Optional[StatusFilter] = typer.Option(
        None, "--status", "-s", help="Show all, passing or failing cases", case_sensitive=False
    ),
    search: str = typer.Option("", "--search", "-q", help="Case name substring (case-insensitive)"),
    ci: bool = typer.Option(False, "--ci", help="CI-friendly concise error output"),
) -> None:
    """List cases with score, first failure reason and duration."""
    config = load_config_or_exit(ci=ci or None)
    report = load_report_or_exit(report_file, ci=ci or config.ci_mode or None)

    effective_status = status or StatusFilter(config.default_status)
    matching = filter_cases(report.cases, effective_status, search)
    render_case_list(matching, Console(), config, total=len(report.cases))
