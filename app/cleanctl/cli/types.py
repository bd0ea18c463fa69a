"""Shared types and utilities for CLI commands.

This module provides common option types and helper functions used
across multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from cleanctl.engine.models import Kind


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="JSON rule file. When given, the other rule options are ignored.",
    ),
]
DestinationOption = Annotated[
    Path | None,
    typer.Option("--destination", "-d", help="Directory to clean."),
]
KindOption = Annotated[
    Kind | None,
    typer.Option(
        "--kind",
        "-k",
        help="Target kind: file (match extensions) or folder (match names).",
        case_sensitive=False,
    ),
]
PatternOption = Annotated[
    list[str] | None,
    typer.Option(
        "--pattern",
        "-p",
        help="Extension or folder name to remove (repeatable or comma separated).",
    ),
]
ExcludeOption = Annotated[
    list[str] | None,
    typer.Option(
        "--exclude",
        "-e",
        help="Entry name never visited (repeatable or comma separated).",
    ),
]


def split_values(values: list[str] | None) -> list[str] | None:
    """Flatten repeatable, comma-separated option values.

    Surrounding whitespace is stripped and empty items are dropped.

    Args:
        values: Raw option values, e.g. ["build,dist", "out"].

    Returns:
        Flat list of values, or None if the option was not given.
    """
    if values is None:
        return None
    return [item.strip() for value in values for item in value.split(",") if item.strip()]
