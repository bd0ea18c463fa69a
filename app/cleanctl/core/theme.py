"""Color theme for cleanctl output.

Colors come from the bundled ``data/theme.toml``. Any subset of them can
be overridden in ``$XDG_CONFIG_HOME/cleanctl/theme.toml``; a broken
override is logged and the bundled colors are used instead.
"""

import logging
import re
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from cleanctl.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

# Rendered bold on top of their color
_BOLD_STYLES = frozenset({"header", "error", "removing"})


class ThemeColors(BaseModel):
    """Hex colors for every style cleanctl prints with."""

    model_config = ConfigDict(extra="forbid")

    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    removing: str = "#ff5f5f"
    removed: str = "#d70000"
    excluded: str = "#f5b332"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, value: object) -> str:
        """Accept #RGB or #RRGGBB, ignoring surrounding whitespace."""
        if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value.strip()):
            raise ValueError(f"expected a #RGB or #RRGGBB color, got {value!r}")
        return value.strip()


def get_bundled_theme_path() -> Path:
    """Path of the theme shipped inside the package."""
    return Path(str(resources.files("cleanctl.data").joinpath("theme.toml")))


def read_theme_file(path: Path) -> dict[str, str]:
    """Read the ``[colors]`` table of a theme file.

    A missing file yields an empty mapping. Unreadable or malformed files
    are logged and ignored. Non-string values are dropped.

    Args:
        path: TOML file to read.

    Returns:
        Color name to color value.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return {name: value for name, value in colors.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge user overrides over the bundled colors."""
    bundled = read_theme_file(get_bundled_theme_path())
    user_path = get_user_theme_path()
    overrides = read_theme_file(user_path)

    if overrides:
        logger.debug("Applying %d theme override(s) from %s", len(overrides), user_path)

    try:
        return ThemeColors(**{**bundled, **overrides})
    except ValidationError as e:
        logger.warning("Invalid colors in %s, using the bundled theme: %s", user_path, e)
        return ThemeColors(**bundled)


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build a Rich Theme with one style per color.

    ``bold_header`` is added for table headers.
    """
    if colors is None:
        colors = load_theme()
    styles = {
        name: f"bold {color}" if name in _BOLD_STYLES else color
        for name, color in colors.model_dump().items()
    }
    styles["bold_header"] = f"bold {colors.header}"
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Rich theme shared by the module-level consoles."""
    return get_rich_theme()
