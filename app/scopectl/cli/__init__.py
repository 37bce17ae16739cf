"""CLI package for scopectl.

This package contains the Typer application and all subcommands.
"""

from scopectl.cli.main import app

__all__ = ["app"]
