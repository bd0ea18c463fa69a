"""DevOps tasks for cleanctl.

Usage: uv run devops.py <task>
Tasks: fmt, test, clean
"""

import subprocess
import sys


def _run(commands: list[list[str]]) -> None:
    """Execute a sequence of shell commands, exiting on first failure."""
    for cmd in commands:
        try:
            subprocess.run(cmd, check=True)  # nosec: B603, B607
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def format_code() -> None:
    """Format the codebase with Ruff."""
    _run(
        [
            ["ruff", "format", "."],
            ["ruff", "check", "--fix", "."],
        ]
    )


def test() -> None:
    """Run tests with PyTest."""
    _run([["uv", "run", "pytest", "-q"]])


def clean() -> None:
    """Clean up the project with cleanctl itself."""
    skip = ".git,.venv"
    _run(
        [
            # fmt: off
            ["uv", "run", "cleanctl", "clean", "-d", ".", "-k", "folder",
             "-p", "__pycache__,.pytest_cache,.ruff_cache,.mypy_cache,htmlcov,dist,build",
             "-e", skip],
            ["uv", "run", "cleanctl", "clean", "-d", ".", "-k", "file",
             "-p", "pyc,pyo", "-e", skip],
            # fmt: on
        ]
    )


TASKS = {"fmt": format_code, "test": test, "clean": clean}


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        print(__doc__.strip(), file=sys.stderr)
        sys.exit(2)
    TASKS[sys.argv[1]]()
