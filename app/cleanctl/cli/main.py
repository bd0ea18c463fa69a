"""cleanctl command line entry point.

Builds the root Typer app, handles the global flags and wires logging
to the shared stderr console before any command runs.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from cleanctl import __version__
from cleanctl.cli.commands import clean, rules
from cleanctl.utils.formatting import err_console, printable

app = typer.Typer(
    name="cleanctl",
    help="Rule-driven recursive cleanup of files and folders.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"cleanctl version {__version__}")
        raise typer.Exit()


def _printable_record(record: logging.LogRecord) -> bool:
    """Format the message up front with undecodable file names escaped."""
    record.msg = printable(record.getMessage())
    record.args = ()
    return True


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich, at DEBUG when verbose."""
    handler = RichHandler(console=err_console, show_path=False)
    handler.addFilter(_printable_record)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


VersionFlag = Annotated[
    bool | None,
    typer.Option(
        "--version",
        "-V",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
]
VerboseFlag = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log every decision at DEBUG level to stderr."),
]
QuietFlag = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Only print removals, errors and the summary."),
]


@app.callback()
def main(
    ctx: typer.Context,
    version: VersionFlag = None,
    verbose: VerboseFlag = False,
    quiet: QuietFlag = False,
) -> None:
    """cleanctl - Rule-driven recursive cleanup of files and folders.

    Describe what to delete (file extensions or folder names below a
    destination) and cleanctl walks the tree and removes every match.
    Preview any run with [bold]cleanctl clean --dry-run[/bold].
    """
    _configure_logging(verbose)
    ctx.obj = {"quiet": quiet}


app.add_typer(clean.app, name="clean")
app.add_typer(rules.app, name="rules")


if __name__ == "__main__":
    app()
