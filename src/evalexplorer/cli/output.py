"""Rich terminal output layer for report stats, case lists and case detail.

Every number shown here comes from the evaluation package; this module
only lays it out.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from evalexplorer.evaluation.assertions import assertion_view, evaluate_assertions
from evalexplorer.evaluation.filtering import StatusFilter, filter_assertions
from evalexplorer.evaluation.formatting import (
    UNKNOWN_MODEL,
    duration_text,
    first_failure_text,
    model_caption,
    model_label,
    pass_rate_text,
    score_text,
    tokens_text,
)
from evalexplorer.evaluation.resolver import resolve_case_fields
from evalexplorer.loader.errors import ErrorFormatter
from evalexplorer.loader.validator import (
    ValidationErrorDetail,
    validate_config_file,
    validate_report_file,
)
from evalexplorer.models.config import CONFIG_FILENAME, find_project_root

if TYPE_CHECKING:
    from evalexplorer.models.config import ExplorerConfig
    from evalexplorer.models.report import Case, Report
    from evalexplorer.models.stats import Stats


# Verdict styling: is_pass -> (symbol, Rich style)
_VERDICT_STYLES: dict[bool, tuple[str, str]] = {
    True: ("✓ PASS", "bold green"),
    False: ("✗ FAIL", "bold red"),
}


def exit_with_errors(
    filepath: Path,
    errors: list[ValidationErrorDetail],
    *,
    ci: bool | None = None,
) -> NoReturn:
    """Print formatted load errors to stderr and exit 1."""
    try:
        source = filepath.read_text(encoding="utf-8", errors="replace")
    except OSError:
        source = ""
    formatter = ErrorFormatter(ci_mode=ci)
    typer.echo(formatter.format_all(errors, source, str(filepath)), err=True)
    raise typer.Exit(code=1)


def load_config_or_exit(*, ci: bool | None = None) -> ExplorerConfig:
    """Load evalexplorer.yaml, printing formatted errors and exiting 1 on failure."""
    config_path = find_project_root() / CONFIG_FILENAME
    config, errors = validate_config_file(config_path)
    if config is None:
        exit_with_errors(config_path, errors, ci=ci)
    return config


def load_report_or_exit(filepath: Path, *, ci: bool | None = None) -> Report:
    """Load a report file, printing formatted errors and exiting 1 on failure."""
    report, errors = validate_report_file(filepath)
    if report is None:
        exit_with_errors(filepath, errors, ci=ci)
    return report


def render_summary(report: Report, stats: Stats, console: Console) -> None:
    """Render the suite overview as a key-value table."""
    console.print()
    if report.name:
        console.print(f"[bold]Report:[/bold] {escape(report.name)}")

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("Total Cases", str(stats.total))
    table.add_row(
        "Pass Rate",
        f"{pass_rate_text(stats)}  "
        f"[green]{stats.passed} Passed[/green]  [red]{stats.failed} Failed[/red]",
    )
    table.add_row(
        "Assertions",
        f"{stats.passed_assertions}/{stats.total_assertions} passed "
        f"({stats.failed_assertions} failed)",
    )
    table.add_row("Avg Latency", f"{stats.avg_duration:.2f}s per generation")
    table.add_row(
        "Avg Tokens",
        f"{stats.avg_input_tokens:.1f} in / {stats.avg_output_tokens:.1f} out",
    )
    table.add_row("Model", f"{escape(model_label(stats))} ({model_caption(stats)})")
    if len(stats.models) > 1:
        table.add_row("Targets", escape(", ".join(stats.models)))
    table.add_row(
        "Judge Models",
        escape(", ".join(stats.judge_models)) if stats.judge_models else "-",
    )

    console.print(table)


def render_stats_json(stats: Stats) -> None:
    """Write stats as indented JSON to stdout."""
    typer.echo(json.dumps(stats.model_dump(mode="json"), indent=2))


def render_case_list(
    cases: list[Case],
    console: Console,
    config: ExplorerConfig,
    *,
    total: int,
) -> None:
    """Render one row per case: status, score, name, first failure, duration."""
    if not cases:
        console.print("[dim]No cases match your criteria[/dim]")
        return

    table = Table(box=box.ROUNDED)
    table.add_column("#", justify="right")
    table.add_column("Status")
    table.add_column("Score", justify="center")
    table.add_column("Case Name")
    table.add_column("Failure Reason (First)")
    table.add_column("Duration", justify="right")

    for index, case in enumerate(cases, 1):
        evaluation = evaluate_assertions(case.assertions)
        fields = resolve_case_fields(case)
        symbol, style = _VERDICT_STYLES[evaluation.is_case_pass]
        reason = first_failure_text(evaluation, width=config.reason_width)
        reason_style = "dim green" if evaluation.is_case_pass else "red"
        table.add_row(
            str(index),
            f"[{style}]{symbol}[/{style}]",
            score_text(evaluation),
            escape(case.name),
            f"[{reason_style}]{escape(reason)}[/{reason_style}]",
            duration_text(fields.duration, config.duration_precision),
        )

    console.print(table)
    console.print(f"\n{len(cases)} of {total} cases shown.")


def _text_block(title: str, content: object, console: Console) -> None:
    """Print a titled text panel, skipping empty content."""
    if not content:
        return
    if not isinstance(content, str):
        content = json.dumps(content, indent=2, ensure_ascii=False)
    console.print(Panel(Text(content), title=title, title_align="left", box=box.ROUNDED))


def render_case_detail(
    case: Case,
    console: Console,
    *,
    status: StatusFilter = StatusFilter.all,
) -> None:
    """Render one case: header metrics, text blocks and its assertions."""
    evaluation = evaluate_assertions(case.assertions)
    fields = resolve_case_fields(case)
    symbol, style = _VERDICT_STYLES[evaluation.is_case_pass]

    console.print()
    console.print(f"[bold]Case:[/bold] {escape(case.name)}  [{style}]{symbol}[/{style}]")

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("Model", escape(fields.target_model or UNKNOWN_MODEL))
    if fields.provider:
        table.add_row("Provider", escape(fields.provider))
    table.add_row("Assertions", f"{score_text(evaluation)} passed")
    table.add_row(
        "Tokens",
        f"{tokens_text(fields.input_tokens)} in / {tokens_text(fields.output_tokens)} out",
    )
    table.add_row("Duration", duration_text(fields.duration, 4))
    console.print(table)

    inputs = case.inputs if isinstance(case.inputs, dict) else {}
    _text_block("Prompt", inputs.get("prompt"), console)
    _text_block("Response", inputs.get("response"), console)
    _text_block("Output", case.output, console)
    _text_block("Expected Output", case.expected_output, console)

    items = filter_assertions(case.assertions.items(), status)
    console.print(f"[bold]Assertions[/bold] ({len(items)} of {evaluation.total})")
    if not items:
        console.print("[dim]No assertions match this filter.[/dim]")
        return

    for key, assertion in items:
        view = assertion_view(key, assertion)
        verdict_style = "bold green" if view.value else "bold red"
        verdict = "PASS" if view.value else "FAIL"
        console.print(f"  [{verdict_style}]{verdict}[/{verdict_style}] {escape(view.label)}")
        if view.reason:
            console.print(Text(f"       {view.reason}"))
        if view.judge_model:
            console.print(f"       [dim]judge: {escape(view.judge_model)}[/dim]")
