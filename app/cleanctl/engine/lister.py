"""Directory listing with exclusion filtering.

Read failures are reported, never raised, so a single unreadable
subtree does not abort a whole cleanup run.
"""

import os
from collections.abc import Iterable
from pathlib import Path

from cleanctl.engine.matcher import is_excluded
from cleanctl.engine.reporter import Reporter


def children(directory: Path, exclude: Iterable[str], reporter: Reporter) -> list[Path]:
    """List the direct children of a directory, minus excluded names.

    Entries are returned in filesystem enumeration order. Each excluded
    entry is reported once and dropped. If the directory cannot be
    opened, the failure is reported and an empty list is returned. An
    entry that cannot be read is reported and skipped; listing goes on
    with the remaining entries.

    Args:
        directory: Directory to list.
        exclude: Entry names to skip (case-insensitive).
        reporter: Sink for exclusion and read-failure events.

    Returns:
        Paths of the visible children.
    """
    exclude = tuple(exclude)
    found: list[Path] = []

    try:
        entries = os.scandir(directory)
    except OSError as e:
        reporter.list_failed(directory, e)
        return found

    with entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as e:
                # scandir closes itself after a readdir failure, so the
                # next call ends the loop
                reporter.list_failed(directory, e)
                continue

            path = Path(entry.path)
            if is_excluded(entry.name, exclude):
                reporter.excluded(path)
                continue
            found.append(path)

    return found
