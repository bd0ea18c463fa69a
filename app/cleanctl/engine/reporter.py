"""Event sinks for the cleanup engine.

The engine never raises for traversal or removal problems; every
exclusion, match, removal and failure is handed to a Reporter instead.
The base Reporter only counts events, ConsoleReporter also prints one
line per event using the shared Rich consoles.
"""

import logging
from pathlib import Path

from cleanctl.engine.models import RemovalResult, Rule, RunSummary
from cleanctl.utils.formatting import console, display, err_console

logger = logging.getLogger(__name__)


class Reporter:
    """Collects engine events into a RunSummary.

    Subclasses override the ``_on_*`` hooks to render events; the public
    methods keep the counters consistent regardless of rendering.
    """

    def __init__(self) -> None:
        self.summary = RunSummary()

    def rule_started(self, rule: Rule, dry_run: bool) -> None:
        """Record the start of a rule's traversal."""
        self.summary.rules += 1
        logger.debug(
            "Walking %s (kind=%s, patterns=%s, exclude=%s, dry_run=%s)",
            rule.destination,
            rule.kind.value,
            list(rule.patterns),
            list(rule.exclude),
            dry_run,
        )
        self._on_rule_started(rule, dry_run)

    def excluded(self, path: Path) -> None:
        """Record an entry skipped because its name is excluded."""
        self.summary.excluded += 1
        logger.debug("Excluded %s", path)
        self._on_excluded(path)

    def removing(self, path: Path, dry_run: bool) -> None:
        """Record a matched entry about to be removed."""
        self.summary.matched += 1
        logger.debug("Matched %s", path)
        self._on_removing(path, dry_run)

    def removed(self, result: RemovalResult) -> None:
        """Record the outcome of a removal."""
        if result.success:
            self.summary.removed += 1
            logger.debug("Removed %s", result.path)
            self._on_removed(result)
        else:
            self.summary.failed += 1
            logger.debug("Failed to remove %s: %s", result.path, result.error)
            self._on_remove_failed(result)

    def list_failed(self, path: Path, error: OSError) -> None:
        """Record a directory or entry that could not be read."""
        self.summary.errors += 1
        logger.debug("Cannot read %s: %s", path, error)
        self._on_list_failed(path, error)

    # Rendering hooks, no-ops by default

    def _on_rule_started(self, rule: Rule, dry_run: bool) -> None:
        pass

    def _on_excluded(self, path: Path) -> None:
        pass

    def _on_removing(self, path: Path, dry_run: bool) -> None:
        pass

    def _on_removed(self, result: RemovalResult) -> None:
        pass

    def _on_remove_failed(self, result: RemovalResult) -> None:
        pass

    def _on_list_failed(self, path: Path, error: OSError) -> None:
        pass


class ConsoleReporter(Reporter):
    """Prints one line per engine event.

    Removal intent and success lines use the ``removing`` and ``removed``
    theme styles, exclusions use ``excluded``. Failures are printed to
    stderr and are never silenced.

    Args:
        quiet: If True, suppress rule headers and exclusion lines.
    """

    def __init__(self, *, quiet: bool = False) -> None:
        super().__init__()
        self._quiet = quiet

    def _on_rule_started(self, rule: Rule, dry_run: bool) -> None:
        if self._quiet:
            return
        patterns = ", ".join(rule.patterns) or "-"
        suffix = " [muted](dry-run)[/]" if dry_run else ""
        console.print(
            f"[header]Cleaning[/] {display(rule.destination)} "
            f"[muted]({rule.kind.value}: {display(patterns)})[/]{suffix}",
            soft_wrap=True,
        )

    def _on_excluded(self, path: Path) -> None:
        if not self._quiet:
            console.print(f"[excluded]Exclude[/] {display(path)}", soft_wrap=True)

    def _on_removing(self, path: Path, dry_run: bool) -> None:
        suffix = " [muted](dry-run)[/]" if dry_run else ""
        console.print(f"[removing]Removing[/] {display(path)}{suffix}", soft_wrap=True)

    def _on_removed(self, result: RemovalResult) -> None:
        console.print(f"[removed]Removed[/] {display(result.path)}", soft_wrap=True)

    def _on_remove_failed(self, result: RemovalResult) -> None:
        err_console.print(
            f"[error]Error:[/] cannot remove {display(result.path)}: "
            f"{display(result.error or 'Unknown error')}",
            soft_wrap=True,
        )

    def _on_list_failed(self, path: Path, error: OSError) -> None:
        err_console.print(
            f"[error]Error:[/] cannot read {display(path)}: {display(error)}",
            soft_wrap=True,
        )
