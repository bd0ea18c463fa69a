"""Unit tests for shared CLI helpers."""

from cleanctl.cli.types import split_values


class TestSplitValues:
    """Tests for split_values."""

    def test_none_passes_through(self) -> None:
        """An option that was not given stays None."""
        assert split_values(None) is None

    def test_repeated_and_comma_separated(self) -> None:
        """Repeated values and comma lists are flattened in order."""
        assert split_values(["build,dist", "out"]) == ["build", "dist", "out"]

    def test_whitespace_and_empty_items(self) -> None:
        """Items are stripped and empty items dropped."""
        assert split_values([" tmp , ,log ", ""]) == ["tmp", "log"]
