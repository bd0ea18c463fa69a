"""Unit tests for the remover.

Tests deletion of directories, files and symlinks, and isolation of
errors into failed results.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from cleanctl.engine.models import RemovalResult
from cleanctl.engine.remover import remove


class TestRemove:
    """Tests for remove."""

    def test_remove_file(self, tmp_path: Path) -> None:
        """A file is unlinked, siblings stay."""
        target = tmp_path / "a.tmp"
        target.write_text("content")
        sibling = tmp_path / "b.txt"
        sibling.write_text("content")

        result = remove(target)

        assert result == RemovalResult(path=str(target), success=True)
        assert not target.exists()
        assert sibling.exists()

    def test_remove_directory_recursively(self, tmp_path: Path) -> None:
        """A directory is removed with its whole subtree."""
        target = tmp_path / "build"
        (target / "deep" / "deeper").mkdir(parents=True)
        (target / "deep" / "deeper" / "out.o").write_text("obj")

        result = remove(target)

        assert result.success is True
        assert not target.exists()

    def test_remove_symlink_keeps_target(self, tmp_path: Path) -> None:
        """Removing a symlink to a directory leaves the directory intact."""
        real = tmp_path / "real"
        real.mkdir()
        (real / "data.txt").write_text("keep me")
        link = tmp_path / "link"
        link.symlink_to(real, target_is_directory=True)

        result = remove(link)

        assert result.success is True
        assert not link.is_symlink()
        assert (real / "data.txt").exists()

    def test_remove_missing_path_fails(self, tmp_path: Path) -> None:
        """A path that is already gone yields a failed result."""
        result = remove(tmp_path / "gone")

        assert result.success is False
        assert result.failed is True
        assert result.error is not None

    def test_remove_permission_error(self, tmp_path: Path) -> None:
        """OSError during unlink is captured in the result."""
        target = tmp_path / "locked.tmp"
        target.write_text("content")

        with patch.object(Path, "unlink", side_effect=PermissionError("Permission denied")):
            result = remove(target)

        assert result.success is False
        assert result.error is not None
        assert "Permission denied" in result.error
        assert target.exists()

    def test_remove_directory_error(self, tmp_path: Path) -> None:
        """OSError during rmtree is captured in the result."""
        target = tmp_path / "build"
        target.mkdir()

        with patch(
            "cleanctl.engine.remover.shutil.rmtree",
            side_effect=OSError("Directory not empty"),
        ):
            result = remove(target)

        assert result.success is False
        assert result.error == "Directory not empty"

    def test_remove_too_deep_directory_fails(self, tmp_path: Path) -> None:
        """rmtree running out of stack yields a failed result instead of raising."""
        target = tmp_path / "deep"
        target.mkdir()

        with patch(
            "cleanctl.engine.remover.shutil.rmtree",
            side_effect=RecursionError("maximum recursion depth exceeded"),
        ):
            result = remove(target)

        assert result.success is False
        assert result.error == "maximum recursion depth exceeded"
        assert target.exists()


class TestRemovalResult:
    """Tests for RemovalResult."""

    def test_defaults(self) -> None:
        """RemovalResult has correct defaults."""
        result = RemovalResult(path="/test", success=True)
        assert result.error is None
        assert result.failed is False

    def test_frozen(self) -> None:
        """RemovalResult is immutable."""
        result = RemovalResult(path="/test", success=True)
        with pytest.raises(AttributeError):
            result.success = False  # type: ignore[misc]
