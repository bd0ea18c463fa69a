"""Domain models for rule-driven cleanup.

This module defines the rule schema used by rule files and the CLI,
the immutable run configuration handed to the runner, and the result
structures produced while walking and deleting.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Kind(str, Enum):
    """Which filesystem entries a rule targets.

    Attributes:
        FILE: Regular files, compared by extension.
        FOLDER: Directories, compared by base name.
    """

    FILE = "file"
    FOLDER = "folder"


class Rule(BaseModel):
    """A single cleanup directive.

    Rules are immutable once validated. An empty ``patterns`` tuple is
    legal: the destination is still walked but nothing matches.

    Attributes:
        destination: Root directory to clean.
        kind: Whether files (by extension) or folders (by name) are targeted.
        patterns: Extensions or folder names to delete (case-insensitive).
        exclude: Entry names that are never inspected nor descended into.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    destination: Annotated[Path, Field(description="Root directory to clean")]
    kind: Annotated[Kind, Field(description="Target entry kind")]
    patterns: Annotated[
        tuple[str, ...],
        Field(description="Extensions (file) or names (folder) to delete"),
    ]
    exclude: Annotated[
        tuple[str, ...],
        Field(default_factory=tuple, description="Names never visited"),
    ]

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v: object) -> object:
        """Accept kind values regardless of case ("File", "FOLDER", ...)."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("exclude", mode="before")
    @classmethod
    def normalize_exclude(cls, v: object) -> object:
        """Treat a null exclusion list as empty."""
        if v is None:
            return ()
        return v


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Validated input for one cleanup invocation.

    Attributes:
        rules: Rules to apply, in order.
        dry_run: If True, report matches without deleting anything.
    """

    rules: tuple[Rule, ...]
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of deleting a single matched entry.

    Attributes:
        path: Path that was operated on.
        success: Whether the deletion completed.
        error: Error message if the deletion failed, None otherwise.
    """

    path: str
    success: bool
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the deletion failed."""
        return not self.success


@dataclass(slots=True)
class RunSummary:
    """Counters accumulated over a run.

    Attributes:
        rules: Number of rules walked.
        excluded: Entries skipped because of the exclusion set.
        matched: Entries matching a rule (deleted or, in dry-run, not).
        removed: Entries successfully deleted.
        failed: Matched entries that could not be deleted.
        errors: Directories or entries that could not be read.
    """

    rules: int = 0
    excluded: int = 0
    matched: int = 0
    removed: int = 0
    failed: int = 0
    errors: int = 0
