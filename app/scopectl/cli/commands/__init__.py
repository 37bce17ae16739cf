"""CLI commands for scopectl.

This package contains all subcommand implementations.
"""

from scopectl.cli.commands import config, match, roots, walk

__all__ = ["config", "match", "roots", "walk"]
