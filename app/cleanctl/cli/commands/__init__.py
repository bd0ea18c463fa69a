"""CLI commands for cleanctl.

This package contains all subcommand implementations.
"""

from cleanctl.cli.commands import clean, rules

__all__ = ["clean", "rules"]
