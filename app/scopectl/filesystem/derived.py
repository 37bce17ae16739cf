"""Derived resource markers.

This module defines the name patterns that mark a directory or file as
derived (generated build output, caches, installed dependencies).
Everything below a derived directory is derived as well.
"""

import fnmatch
from collections.abc import Sequence

# Derived resource name patterns (glob-style, matched against the
# final path segment only).
DEFAULT_DERIVED_PATTERNS: list[str] = [
    # Build output
    "build",
    "dist",
    "target",
    "out",
    # Python
    "__pycache__",
    "*.egg-info",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".tox",
    "*.pyc",
    # JavaScript
    "node_modules",
    # Version control metadata
    ".git",
]


def is_derived_name(name: str, patterns: Sequence[str] | None = None) -> bool:
    """Check if a resource name marks a derived resource.

    Args:
        name: File or directory name (last path segment).
        patterns: Patterns to match against. Defaults to
            DEFAULT_DERIVED_PATTERNS.

    Returns:
        True if the name matches any derived pattern, False otherwise.
    """
    if patterns is None:
        patterns = DEFAULT_DERIVED_PATTERNS

    return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)
