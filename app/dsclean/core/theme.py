"""Console color theme for dsclean.

The bundled ``data/theme.toml`` supplies the defaults; a ``[colors]``
table in ~/.config/dsclean/theme.toml may override any subset of them.
Each color becomes a Rich style of the same name.
"""

import logging
import tomllib
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError
from rich.theme import Theme

from dsclean.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

HexColor = Annotated[
    str,
    StringConstraints(strip_whitespace=True, pattern=r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"),
]

# Styles rendered in bold on top of their color.
BOLD_STYLES = frozenset({"error", "preview", "found"})


class ThemeColors(BaseModel):
    """Colors used by scan output, as #RGB or #RRGGBB hex codes."""

    model_config = ConfigDict(extra="forbid")

    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    muted: HexColor = "#b2bec3"

    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    # Per-file lines
    path: HexColor = "#faf870"
    preview: HexColor = "#f5b332"
    found: HexColor = "#0e8ac8"


def _read_colors(source: Path | Traversable) -> dict[str, object]:
    """Read the ``[colors]`` table of a theme file.

    A missing file yields an empty table; an unreadable or malformed
    one is logged and also yields an empty table.
    """
    try:
        data = tomllib.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", source, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", source)
        return {}
    return colors


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Load the bundled colors with user overrides applied.

    Args:
        user_path: User theme file. Defaults to the XDG config location.

    Returns:
        Validated colors. If the merged colors fail validation, the
        built-in defaults are returned instead.
    """
    bundled = resources.files("dsclean.data").joinpath("theme.toml")
    colors = {**_read_colors(bundled), **_read_colors(user_path or get_user_theme_path())}

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def build_theme(colors: ThemeColors) -> Theme:
    """Turn theme colors into Rich styles.

    Args:
        colors: Validated theme colors.

    Returns:
        Rich Theme with one style per color plus ``bold_header``.
    """
    styles = {
        name: f"bold {value}" if name in BOLD_STYLES else value
        for name, value in colors.model_dump().items()
    }
    styles["bold_header"] = f"bold {colors.header}"
    return Theme(styles)
