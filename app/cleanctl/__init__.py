"""cleanctl - Rule-driven recursive cleanup of build artifacts and junk files."""

__version__ = "0.1.0"
