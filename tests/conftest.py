"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from cleanctl.engine.models import Kind, Rule
from cleanctl.engine.reporter import Reporter

TreeSpec = dict[str, "str | bytes | TreeSpec"]


def build_tree(root: Path, spec: TreeSpec) -> Path:
    """Create files and directories below root.

    Keys are entry names; str/bytes values become file contents and dict
    values become subdirectories.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, content in spec.items():
        path = root / name
        if isinstance(content, dict):
            build_tree(path, content)
        elif isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
    return root


def snapshot(root: Path) -> dict[str, bytes | str]:
    """Capture a tree as {relative path: file bytes | "<dir>" | "-> target"}."""
    state: dict[str, bytes | str] = {}
    for dirpath, dirnames, filenames in os.walk(root):
        base = Path(dirpath)
        for name in dirnames + filenames:
            path = base / name
            rel = path.relative_to(root).as_posix()
            if path.is_symlink():
                state[rel] = f"-> {os.readlink(path)}"
            elif path.is_dir():
                state[rel] = "<dir>"
            else:
                state[rel] = path.read_bytes()
    return state


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[TreeSpec], Path]:
    """Factory building a tree under tmp_path/root and returning the root."""

    def _make(spec: TreeSpec) -> Path:
        return build_tree(tmp_path / "root", spec)

    return _make


@pytest.fixture
def reporter() -> Reporter:
    """Counting-only reporter."""
    return Reporter()


@pytest.fixture
def make_rule() -> Callable[..., Rule]:
    """Factory for rules with sensible defaults."""

    def _make(
        destination: Path,
        kind: Kind = Kind.FILE,
        patterns: tuple[str, ...] = (),
        exclude: tuple[str, ...] = (),
    ) -> Rule:
        return Rule(destination=destination, kind=kind, patterns=patterns, exclude=exclude)

    return _make


@pytest.fixture
def tree_snapshot() -> Callable[[Path], dict[str, bytes | str]]:
    """Function capturing the full content of a tree."""
    return snapshot
