"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cleanctl.core.theme import get_theme

if TYPE_CHECKING:
    from cleanctl.engine.models import Rule, RunSummary


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def printable(text: object) -> str:
    """Make text safe to write to a UTF-8 stream.

    Undecodable bytes in file names arrive as lone surrogates; they are
    rendered as backslash escapes (``\\udcff``) instead of failing the write.
    """
    return str(text).encode("utf-8", "backslashreplace").decode("utf-8")


def display(text: object) -> str:
    """Printable text with Rich markup escaped, for use inside markup strings."""
    return escape(printable(text))


def create_rules_table(rules: list[Rule]) -> Table:
    """Create a table listing validated rules.

    Args:
        rules: Rules to display, in execution order.

    Returns:
        Rich Table with one row per rule.
    """
    table = Table(
        title="Cleanup Rules",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", width=3, justify="right", style="muted")
    table.add_column("Destination", no_wrap=True)
    table.add_column("Kind", width=6)
    table.add_column("Patterns", style="removing")
    table.add_column("Exclude", style="excluded")

    for index, rule in enumerate(rules, start=1):
        table.add_row(
            str(index),
            display(rule.destination),
            rule.kind.value,
            display(", ".join(rule.patterns)) or "-",
            display(", ".join(rule.exclude)) or "-",
        )

    return table


def print_run_summary(summary: RunSummary, dry_run: bool) -> None:
    """Print the closing summary of a cleanup run.

    Args:
        summary: Counters collected during the run.
        dry_run: Whether the run was a dry-run.
    """
    if dry_run:
        print_info(
            f"Dry-run: {summary.matched} entr{'y' if summary.matched == 1 else 'ies'} "
            f"would be removed across {summary.rules} rule(s)."
        )
        return

    if summary.matched == 0:
        print_success("Nothing to clean.")
    elif summary.failed == 0:
        print_success(f"Removed {summary.removed} entr{'y' if summary.removed == 1 else 'ies'}.")
    else:
        console.print(
            f"\n[success]{summary.removed} removed[/success], [error]{summary.failed} failed[/error]"
        )

    if summary.errors:
        print_warning(f"{summary.errors} location(s) could not be read.")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}", soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
