"""Theme management for scopectl CLI.

Colors default to the values below and can be overridden per name in
the [colors] table of ~/.config/scopectl/theme.toml.
"""

import logging
import tomllib
from functools import cache
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationError
from rich.theme import Theme

from scopectl.core.paths import get_theme_path

logger = logging.getLogger(__name__)


def _check_hex(value: str) -> str:
    """Accept #RGB and #RRGGBB color codes."""
    color = value.strip()
    if not color.startswith("#"):
        msg = f"color must start with '#', got {value!r}"
        raise ValueError(msg)
    digits = color[1:]
    if len(digits) not in (3, 6):
        msg = f"color must be #RGB or #RRGGBB, got {value!r}"
        raise ValueError(msg)
    try:
        int(digits, 16)
    except ValueError:
        msg = f"invalid hex color {value!r}"
        raise ValueError(msg) from None
    return color


HexColor = Annotated[str, AfterValidator(_check_hex)]


class ThemeColors(BaseModel):
    """Colors used by scopectl output."""

    model_config = ConfigDict(extra="forbid")

    # Base colors
    text: HexColor = "#ffffff"
    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"

    # Messages
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    # Membership decisions
    included: HexColor = "#c1ff62"
    excluded: HexColor = "#f53263"
    derived: HexColor = "#d44ebc"


# Rich style name -> (color field, style prefix)
_STYLES: dict[str, tuple[str, str]] = {
    "text": ("text", ""),
    "muted": ("muted", ""),
    "dim": ("muted", ""),
    "header": ("header", ""),
    "bold_header": ("header", "bold"),
    "border": ("border", ""),
    "path": ("text", "bold"),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "info": ("info", ""),
    "included": ("included", ""),
    "excluded": ("excluded", ""),
    "derived": ("derived", "italic"),
}


def _read_overrides(path: Path) -> dict[str, object]:
    """Read the [colors] table of a theme file.

    Returns an empty dict if the file is missing or unusable; problems
    other than a missing file are logged.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] must be a table", path)
        return {}
    return colors


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load theme colors with user overrides.

    An invalid override file falls back to the default colors as a whole.

    Args:
        path: Theme file. If None, uses ~/.config/scopectl/theme.toml.

    Returns:
        Validated ThemeColors.
    """
    theme_path = path or get_theme_path()
    overrides = _read_overrides(theme_path)
    if not overrides:
        return ThemeColors()

    try:
        colors = ThemeColors.model_validate(overrides)
    except ValidationError as e:
        logger.warning("Invalid colors in %s, using defaults: %s", theme_path, e)
        return ThemeColors()
    logger.debug("Loaded %d color override(s) from %s", len(overrides), theme_path)
    return colors


def build_rich_theme(colors: ThemeColors) -> Theme:
    """Map theme colors onto the Rich style names used by the CLI."""
    styles = {}
    for name, (field, prefix) in _STYLES.items():
        color = getattr(colors, field)
        styles[name] = f"{prefix} {color}" if prefix else color
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Return the Rich theme for the shared consoles, loaded once."""
    return build_rich_theme(load_theme())
