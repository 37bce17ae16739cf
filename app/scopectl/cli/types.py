"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from scopectl.core.config import ScopeConfig, ScopeConfigError, load_config_or_default
from scopectl.filesystem.tree import FilesystemTree
from scopectl.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def load_settings(config_path: Path | None) -> ScopeConfig:
    """Load the scope configuration or exit with an error message.

    Args:
        config_path: Explicit config file, or None for the default location.

    Returns:
        Loaded (or default) ScopeConfig.

    Raises:
        typer.Exit: If the configuration is invalid.
    """
    try:
        return load_config_or_default(config_path)
    except ScopeConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def open_tree(base: Path, config: ScopeConfig) -> FilesystemTree:
    """Open the workspace directory as a resource tree.

    Args:
        base: Workspace root directory.
        config: Configuration providing the derived patterns.

    Returns:
        FilesystemTree rooted at base.

    Raises:
        typer.Exit: If base is not a directory.
    """
    if not base.is_dir():
        print_error(f"Workspace directory not found: {base}")
        raise typer.Exit(code=1)
    return FilesystemTree(base.resolve(), config.derived_patterns)


def is_quiet(ctx: typer.Context) -> bool:
    """Return the global --quiet flag from the context."""
    obj = ctx.find_root().obj
    return bool(obj.get("quiet")) if isinstance(obj, dict) else False
