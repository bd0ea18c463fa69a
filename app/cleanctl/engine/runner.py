"""Sequential execution of a validated rule list."""

import logging

from cleanctl.engine.models import RunConfig, RunSummary
from cleanctl.engine.reporter import Reporter
from cleanctl.engine.walker import walk

logger = logging.getLogger(__name__)


def run(config: RunConfig, reporter: Reporter | None = None) -> RunSummary:
    """Walk every rule's destination, one rule after another.

    Rules are independent: failures inside one traversal are reported
    and never stop the following rules.

    Args:
        config: Validated rules and the dry-run flag.
        reporter: Event sink. Defaults to a counting-only Reporter.

    Returns:
        Summary of all events across the run.
    """
    reporter = reporter or Reporter()

    for rule in config.rules:
        reporter.rule_started(rule, config.dry_run)
        walk(rule.destination, rule, config.dry_run, reporter)

    summary = reporter.summary
    logger.info(
        "Run finished: %d rule(s), %d matched, %d removed, %d failed",
        summary.rules,
        summary.matched,
        summary.removed,
        summary.failed,
    )
    return summary
