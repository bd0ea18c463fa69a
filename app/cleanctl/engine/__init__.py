"""Rule-driven cleanup engine.

This module provides the matching, listing, removal and traversal
primitives that apply cleanup rules to directory trees.
"""

from cleanctl.engine.lister import children
from cleanctl.engine.matcher import extension_of, is_excluded, matches
from cleanctl.engine.models import Kind, RemovalResult, Rule, RunConfig, RunSummary
from cleanctl.engine.remover import remove
from cleanctl.engine.reporter import ConsoleReporter, Reporter
from cleanctl.engine.runner import run
from cleanctl.engine.walker import walk

__all__ = [
    "ConsoleReporter",
    "Kind",
    "RemovalResult",
    "Reporter",
    "Rule",
    "RunConfig",
    "RunSummary",
    "children",
    "extension_of",
    "is_excluded",
    "matches",
    "remove",
    "run",
    "walk",
]
