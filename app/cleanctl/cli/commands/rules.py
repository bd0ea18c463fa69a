"""Rules command implementation.

Validates rule input and displays the resulting rules without touching
the filesystem.
"""

import json
from typing import Annotated

import typer

from cleanctl.cli.types import (
    ConfigOption,
    DestinationOption,
    ExcludeOption,
    KindOption,
    OutputFormat,
    PatternOption,
    split_values,
)
from cleanctl.core.rules import require_rules
from cleanctl.utils.formatting import console, create_rules_table, print_success

app = typer.Typer(
    help="Validate and show cleanup rules.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_rules(
    config: ConfigOption = None,
    destination: DestinationOption = None,
    kind: KindOption = None,
    patterns: PatternOption = None,
    exclude: ExcludeOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Validate cleanup rules and print them."""
    rules = require_rules(
        config,
        destination=destination,
        kind=kind,
        patterns=split_values(patterns),
        exclude=split_values(exclude),
    )

    if output_format == OutputFormat.JSON:
        data = [rule.model_dump(mode="json") for rule in rules]
        console.print_json(json.dumps(data), ensure_ascii=True)
        return

    console.print(create_rules_table(rules))
    print_success(f"{len(rules)} rule(s) valid.")
