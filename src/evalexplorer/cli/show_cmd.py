"""evalexplorer show -- detail view of a single case."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from evalexplorer.cli.output import exit_with_errors, load_config_or_exit, render_case_detail
from evalexplorer.evaluation.filtering import StatusFilter
from evalexplorer.session import ReportSession


def show(
    report_file: Path = typer.Argument(..., help="Evaluation report JSON file"),
    case_ref: str = typer.Argument(..., help="Case name or 1-based index"),
    status: Optional[StatusFilter] = typer.Option(
        None, "--status", "-s", help="Show all, passing or failing assertions", case_sensitive=False
    ),
    ci: bool = typer.Option(False, "--ci", help="CI-friendly concise error output"),
) -> None:
    """Show prompt, response, metrics and assertions of one case."""
    config = load_config_or_exit(ci=ci or None)
    session = ReportSession()
    errors = session.load_file(report_file)
    if errors:
        exit_with_errors(report_file, errors, ci=ci or config.ci_mode or None)

    case = session.select(case_ref)
    if case is None:
        typer.echo(f"Case '{case_ref}' not found.", err=True)
        names = [c.name for c in session.report.cases[:10]]
        if names:
            typer.echo(f"Available cases: {', '.join(names)}", err=True)
        raise typer.Exit(code=1)

    effective_status = status or StatusFilter(config.default_status)
    render_case_detail(case, Console(), status=effective_status)
