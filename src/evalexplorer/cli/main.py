"""evalexplorer CLI entry point."""

from typing import Optional

import typer

from evalexplorer import __version__
from evalexplorer.cli.cases_cmd import cases
from evalexplorer.cli.output import load_config_or_exit
from evalexplorer.cli.show_cmd import show
from evalexplorer.cli.summary_cmd import summary
from evalexplorer.cli.validate_cmd import validate
from evalexplorer.logging import setup_logging

app = typer.Typer(
    name="evalexplorer",
    help="Explore LLM evaluation reports",
    no_args_is_help=True,
)

# Register subcommands
app.command()(cases)
app.command()(show)
app.command()(summary)
app.command()(validate)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"evalexplorer {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: from evalexplorer.yaml, else WARNING).",
    ),
) -> None:
    """Explore LLM evaluation reports."""
    setup_logging(log_level or load_config_or_exit().log_level)
