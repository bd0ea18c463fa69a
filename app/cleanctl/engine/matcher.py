"""Match and exclusion decisions for a single filesystem entry.

All comparisons are case-insensitive exact matches; patterns are never
interpreted as globs or regular expressions.
"""

import stat
from collections.abc import Iterable
from pathlib import Path

from cleanctl.engine.models import Kind


def _contains(item: str, candidates: Iterable[str]) -> bool:
    """Check case-insensitive membership of item in candidates."""
    folded = item.casefold()
    return any(folded == candidate.casefold() for candidate in candidates)


def is_excluded(name: str, exclude: Iterable[str]) -> bool:
    """Check if an entry name is in the exclusion set.

    Args:
        name: Base name of the entry.
        exclude: Names to exclude.

    Returns:
        True if name equals any excluded name, ignoring case.
    """
    return _contains(name, exclude)


def extension_of(name: str) -> str | None:
    """Return the extension of a base name, or None if it has none.

    The extension is the text after the last dot. Names without a dot
    and dot-files such as ``.bashrc`` have no extension; ``name.`` has
    an empty extension.

    Args:
        name: Base name of the entry.

    Returns:
        Extension without the leading dot, or None.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def _entry_mode(path: Path) -> int | None:
    """Read the entry's file mode without following symlinks."""
    try:
        return path.lstat().st_mode
    except OSError:
        return None


def matches(entry: Path, kind: Kind, patterns: Iterable[str]) -> bool:
    """Decide whether an entry matches a rule.

    The entry type is read live at call time rather than reused from the
    directory listing. Symbolic links are neither files nor folders here
    and never match.

    Args:
        entry: Path of the entry to check.
        kind: Entry kind targeted by the rule.
        patterns: Extensions (FILE) or base names (FOLDER) to match.

    Returns:
        True if the entry has the targeted type and its extension or
        name is one of the patterns.
    """
    mode = _entry_mode(entry)
    if mode is None:
        return False

    if kind == Kind.FOLDER:
        return stat.S_ISDIR(mode) and _contains(entry.name, patterns)

    if kind == Kind.FILE:
        if not stat.S_ISREG(mode):
            return False
        ext = extension_of(entry.name)
        return ext is not None and _contains(ext, patterns)

    return False


def is_real_directory(path: Path) -> bool:
    """Check if path currently is a directory and not a symlink to one."""
    mode = _entry_mode(path)
    return mode is not None and stat.S_ISDIR(mode)
