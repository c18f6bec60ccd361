"""evalexplorer validate -- check report files before exploring them.

Reports every file's errors at once with rich or CI-friendly
formatting.
"""

from __future__ import annotations

from pathlib import Path

import typer

from evalexplorer.cli.output import load_config_or_exit
from evalexplorer.loader.errors import ErrorFormatter
from evalexplorer.loader.validator import validate_report_file


def validate(
    reports: list[Path] = typer.Argument(..., help="Report JSON files to validate"),
    ci: bool = typer.Option(False, "--ci", help="CI-friendly concise output"),
) -> None:
    """Validate evaluation report files.

    Exits with code 0 if all are valid, 1 if any has errors.
    """
    config = load_config_or_exit(ci=ci or None)
    formatter = ErrorFormatter(ci_mode=ci or config.ci_mode or None)

    total = len(reports)
    valid_count = 0

    for filepath in reports:
        report, errors = validate_report_file(filepath)
        if errors:
            try:
                source = filepath.read_text(encoding="utf-8", errors="replace")
            except OSError:
                source = ""
            typer.echo(formatter.format_all(errors, source, str(filepath)), err=not formatter.ci_mode)
        else:
            valid_count += 1
            formatter.print_success(str(filepath), len(report.cases))

    typer.echo(f"\n{valid_count}/{total} reports valid")

    if valid_count < total:
        raise typer.Exit(code=1)
