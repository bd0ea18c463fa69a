"""Utility modules for cleanctl.

This module exports commonly used utility functions.
"""

from cleanctl.utils.formatting import (
    console,
    create_rules_table,
    display,
    err_console,
    print_error,
    print_info,
    print_run_summary,
    print_success,
    print_warning,
    printable,
)

__all__ = [
    "console",
    "create_rules_table",
    "display",
    "err_console",
    "print_error",
    "print_info",
    "print_run_summary",
    "print_success",
    "print_warning",
    "printable",
]
