"""Clean command implementation.

Applies cleanup rules from a JSON rule file or from discrete options.
"""

from typing import Annotated

import typer

from cleanctl.cli.types import (
    ConfigOption,
    DestinationOption,
    ExcludeOption,
    KindOption,
    PatternOption,
    split_values,
)
from cleanctl.core.rules import require_rules
from cleanctl.engine.models import RunConfig
from cleanctl.engine.reporter import ConsoleReporter
from cleanctl.engine.runner import run
from cleanctl.utils.formatting import print_run_summary

app = typer.Typer(
    help="Recursively remove files or folders matching cleanup rules.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean(
    ctx: typer.Context,
    config: ConfigOption = None,
    destination: DestinationOption = None,
    kind: KindOption = None,
    patterns: PatternOption = None,
    exclude: ExcludeOption = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed without removing."),
    ] = False,
) -> None:
    """Recursively remove files or folders matching cleanup rules.

    Failures to read or remove individual entries are reported and do
    not change the exit code.
    """
    rules = require_rules(
        config,
        destination=destination,
        kind=kind,
        patterns=split_values(patterns),
        exclude=split_values(exclude),
    )

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    reporter = ConsoleReporter(quiet=quiet)
    summary = run(RunConfig(rules=tuple(rules), dry_run=dry_run), reporter)

    print_run_summary(summary, dry_run)
