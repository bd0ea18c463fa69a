"""Rule loading and validation.

This module turns user input into validated Rule objects, either from
a JSON rule file or from discrete CLI values, and checks that every
destination is an existing directory before the engine runs.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from cleanctl.engine.models import Kind, Rule

logger = logging.getLogger(__name__)

_RULES_ADAPTER = TypeAdapter(list[Rule])


class RuleError(Exception):
    """Base exception for rule-related errors."""


class RuleUsageError(RuleError):
    """Raised when rule input is missing or points at the wrong thing."""


class RuleParseError(RuleError):
    """Raised when a rule file cannot be read or does not match the schema."""


def load_rules(path: Path) -> list[Rule]:
    """Load and validate rules from a JSON rule file.

    The file must exist and carry a ``.json`` extension (any case). It
    must contain a JSON array of rule objects. Relative destinations are
    resolved against the current working directory and every destination
    must be an existing directory.

    Args:
        path: Path to the rule file.

    Returns:
        Validated rules in file order.

    Raises:
        RuleUsageError: If the file is missing, not a JSON file, or a
            destination is not an existing directory.
        RuleParseError: If the file is unreadable, not valid JSON, or
            doesn't match the rule schema.
    """
    path = path.absolute()

    if not path.exists():
        raise RuleUsageError(f"Config file doesn't exist: {path}")

    if not path.is_file():
        raise RuleUsageError(f"Config path is not a file: {path}")

    if path.suffix.lower() != ".json":
        raise RuleUsageError(f"Config file is not a JSON file, please provide a JSON file: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise RuleParseError(f"Config file is not valid UTF-8 text: {e}") from e
    except OSError as e:
        raise RuleParseError(f"Failed to read config file: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RuleParseError(f"Invalid JSON syntax: {e}") from e

    try:
        rules = _RULES_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise RuleParseError(f"Invalid rule content: {e}") from e

    logger.debug("Loaded %d rule(s) from %s", len(rules), path)
    return [_with_checked_destination(rule) for rule in rules]


def build_rule(
    destination: Path | None,
    kind: Kind | None,
    patterns: Sequence[str] | None,
    exclude: Sequence[str] | None = None,
) -> Rule:
    """Build a single rule from discrete values.

    Args:
        destination: Directory to clean.
        kind: Targeted entry kind.
        patterns: Extensions or folder names to delete.
        exclude: Optional names to skip.

    Returns:
        Validated Rule.

    Raises:
        RuleUsageError: If a required value is missing or the destination
            is not an existing directory.
    """
    if destination is None:
        raise RuleUsageError("Please provide destination")
    if kind is None:
        raise RuleUsageError("Please provide kind")
    if not patterns:
        raise RuleUsageError("Please provide patterns")

    rule = Rule(
        destination=destination,
        kind=kind,
        patterns=tuple(patterns),
        exclude=tuple(exclude or ()),
    )
    return _with_checked_destination(rule)


def resolve_rules(
    config: Path | None,
    destination: Path | None = None,
    kind: Kind | None = None,
    patterns: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> list[Rule]:
    """Resolve rules from a rule file or, without one, from discrete values.

    When a rule file is given the discrete values are ignored.

    Raises:
        RuleUsageError: See load_rules and build_rule.
        RuleParseError: See load_rules.
    """
    if config is not None:
        return load_rules(config)
    return [build_rule(destination, kind, patterns, exclude)]


def validate_destination(destination: Path) -> Path:
    """Check that a destination is an existing directory.

    Args:
        destination: Path to check.

    Returns:
        The absolute destination path.

    Raises:
        RuleUsageError: If the path doesn't exist or isn't a directory.
    """
    destination = destination.absolute()
    if not destination.exists():
        raise RuleUsageError(f"Destination doesn't exist: {destination}")
    if not destination.is_dir():
        raise RuleUsageError(
            f"Destination is not a directory, please provide a directory path: {destination}"
        )
    return destination


def _with_checked_destination(rule: Rule) -> Rule:
    """Return a copy of the rule with a validated absolute destination."""
    destination = validate_destination(rule.destination)
    if destination == rule.destination:
        return rule
    return rule.model_copy(update={"destination": destination})


def require_rules(
    config: Path | None,
    destination: Path | None = None,
    kind: Kind | None = None,
    patterns: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> list[Rule]:
    """Resolve rules or exit with a helpful error message.

    This is a convenience wrapper around resolve_rules() for CLI commands.
    Usage errors exit with code 1, parse errors with code 2.

    Returns:
        Validated rules.

    Raises:
        typer.Exit: If the rules cannot be resolved.
    """
    import typer

    from cleanctl.utils.formatting import display, print_error, print_info

    try:
        return resolve_rules(config, destination, kind, patterns, exclude)
    except RuleUsageError as e:
        print_error(display(e))
        if config is None:
            print_info("Pass --config FILE, or --destination, --kind and --pattern.")
        raise typer.Exit(code=1) from e
    except RuleParseError as e:
        print_error(f"Failed to load rules: {display(e)}")
        raise typer.Exit(code=2) from e
