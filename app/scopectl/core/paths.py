"""XDG-compliant locations of scopectl's user files.

Both files live in $XDG_CONFIG_HOME/scopectl/, defaulting to
~/.config/scopectl/ when the variable is unset or empty.
"""

import os
from pathlib import Path

# Directory name below the XDG config home
APP_NAME = "scopectl"

CONFIG_FILENAME = "config.toml"
THEME_FILENAME = "theme.toml"


def get_config_dir() -> Path:
    """Return the scopectl configuration directory (not created)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME


def get_config_path() -> Path:
    """Return the default scope configuration file."""
    return get_config_dir() / CONFIG_FILENAME


def get_theme_path() -> Path:
    """Return the user theme file."""
    return get_config_dir() / THEME_FILENAME
