"""Filesystem locations used by cleanctl.

cleanctl keeps no state between runs. Its only location is the XDG
config directory, which may hold a user theme.
"""

import os
from pathlib import Path

APP_NAME = "cleanctl"


def get_config_dir() -> Path:
    """Return ``$XDG_CONFIG_HOME/cleanctl``, or ``~/.config/cleanctl``.

    An empty XDG_CONFIG_HOME counts as unset.
    """
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_NAME


def get_user_theme_path() -> Path:
    """Path of the optional user theme override."""
    return get_config_dir() / "theme.toml"
