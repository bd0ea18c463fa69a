"""Unit tests for the rules command."""

import json
import os
import sys
from pathlib import Path

import pytest
from cleanctl.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


def _config(tmp_path: Path) -> Path:
    """Write a two-rule config file and return its path."""
    config = tmp_path / "rules.json"
    config.write_text(
        json.dumps(
            [
                {
                    "destination": str(tmp_path),
                    "kind": "Folder",
                    "patterns": ["build", "dist"],
                    "exclude": ["node_modules"],
                },
                {"destination": str(tmp_path), "kind": "file", "patterns": ["tmp"]},
            ]
        )
    )
    return config


class TestRulesCommand:
    """Tests for cleanctl rules."""

    def test_table_output(self, tmp_path: Path) -> None:
        """Valid rules are shown as a table with a count."""
        result = runner.invoke(app, ["rules", "-c", str(_config(tmp_path))])

        assert result.exit_code == 0
        assert "Cleanup Rules" in result.stdout
        assert "2 rule(s) valid." in result.stdout

    def test_json_output(self, tmp_path: Path) -> None:
        """--format json prints the normalized rules."""
        result = runner.invoke(app, ["rules", "-c", str(_config(tmp_path)), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == [
            {
                "destination": str(tmp_path),
                "kind": "folder",
                "patterns": ["build", "dist"],
                "exclude": ["node_modules"],
            },
            {"destination": str(tmp_path), "kind": "file", "patterns": ["tmp"], "exclude": []},
        ]

    @pytest.mark.skipif(sys.platform != "linux", reason="needs byte file names")
    def test_json_output_escapes_undecodable_destination(self, tmp_path: Path) -> None:
        """JSON output stays ASCII and round-trips undecodable names."""
        destination = tmp_path / os.fsdecode(b"\xff")
        destination.mkdir()

        result = runner.invoke(
            app, ["rules", "-d", str(destination), "-k", "file", "-p", "tmp", "-f", "json"]
        )

        assert result.exit_code == 0
        assert "\\udcff" in result.stdout
        assert json.loads(result.stdout)[0]["destination"] == str(destination)

    def test_discrete_options(self, tmp_path: Path) -> None:
        """A single rule can be checked from discrete options."""
        result = runner.invoke(
            app, ["rules", "-d", str(tmp_path), "-k", "file", "-p", "tmp,log", "-f", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data[0]["patterns"] == ["tmp", "log"]

    def test_does_not_touch_filesystem(self, tmp_path: Path) -> None:
        """Showing rules never removes anything."""
        (tmp_path / "a.tmp").write_text("x")

        result = runner.invoke(app, ["rules", "-d", str(tmp_path), "-k", "file", "-p", "tmp"])

        assert result.exit_code == 0
        assert (tmp_path / "a.tmp").exists()

    def test_invalid_config_exits_2(self, tmp_path: Path) -> None:
        """Schema errors are reported with exit code 2."""
        config = tmp_path / "rules.json"
        config.write_text('[{"destination": ".", "kind": "symlink", "patterns": []}]')

        result = runner.invoke(app, ["rules", "-c", str(config)])

        assert result.exit_code == 2
        assert "Failed to load rules" in result.output

    def test_missing_patterns_exits_1(self, tmp_path: Path) -> None:
        """Missing discrete values are usage errors."""
        result = runner.invoke(app, ["rules", "-d", str(tmp_path), "-k", "file"])

        assert result.exit_code == 1
        assert "Please provide patterns" in result.output
