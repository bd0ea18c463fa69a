"""Deletion of matched filesystem entries.

The remover is unconditional: the match decision has already been made
by the walker. Failures are isolated per path and returned as results.
"""

import logging
import shutil
import stat
from pathlib import Path

from cleanctl.engine.models import RemovalResult

logger = logging.getLogger(__name__)


def remove(path: Path) -> RemovalResult:
    """Delete a single entry.

    Dispatches on the entry type at call time:
    - Directories: shutil.rmtree (the whole subtree)
    - Files, symlinks and anything else: Path.unlink

    Symlinks are unlinked, never followed. A directory nested too deeply
    for rmtree counts as a failed removal.

    Args:
        path: Entry to delete.

    Returns:
        RemovalResult indicating success or failure.
    """
    try:
        mode = path.lstat().st_mode
        if stat.S_ISDIR(mode):
            shutil.rmtree(path)
        else:
            path.unlink()
    except (OSError, RecursionError) as e:
        logger.debug("Removal of %s failed: %s", path, e)
        return RemovalResult(path=str(path), success=False, error=str(e) or type(e).__name__)

    return RemovalResult(path=str(path), success=True)

