"""Depth-first traversal applying one rule to a directory tree.

For each visible child the walker either deletes it (on match) or, for
an unmatched real directory, descends into it. Matched directories are
deleted wholesale and their contents are never inspected individually.

Entry types are re-read at match time rather than taken from the
listing, so an entry replaced by another process between listing and
matching is judged by its new type. Symbolic links are never followed
and never matched, so a link pointing at an ancestor cannot loop.

Pending listings are kept on an explicit stack, so tree depth is bounded
by the filesystem and not by the interpreter's recursion limit.
"""

from collections.abc import Iterator
from pathlib import Path

from cleanctl.engine.lister import children
from cleanctl.engine.matcher import is_real_directory, matches
from cleanctl.engine.models import Rule
from cleanctl.engine.remover import remove
from cleanctl.engine.reporter import Reporter


def walk(directory: Path, rule: Rule, dry_run: bool, reporter: Reporter) -> None:
    """Apply a rule to everything below a directory.

    Children are handled in listing order and a directory's subtree is
    finished before its next sibling is looked at. A directory that no
    longer exists is silently skipped, which covers destinations deleted
    earlier in the same run.

    Args:
        directory: Directory whose children are examined.
        rule: Rule providing kind, patterns and exclusions.
        dry_run: If True, report matches without deleting them.
        reporter: Sink for every exclusion, match, removal and failure.
    """
    if not directory.exists():
        return

    stack: list[Iterator[Path]] = [iter(children(directory, rule.exclude, reporter))]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue

        if matches(child, rule.kind, rule.patterns):
            reporter.removing(child, dry_run)
            if not dry_run:
                reporter.removed(remove(child))
        elif is_real_directory(child):
            stack.append(iter(children(child, rule.exclude, reporter)))
