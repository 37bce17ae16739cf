"""Filesystem resource tree and concurrent walker.

This module provides the resource tree backed by a real directory,
derived-resource detection, and the tree walker that evaluates a
search scope for every visited resource.
"""

from scopectl.filesystem.derived import DEFAULT_DERIVED_PATTERNS, is_derived_name
from scopectl.filesystem.tree import FilesystemTree
from scopectl.filesystem.walker import ScopeWalker, WalkResult

__all__ = [
    "DEFAULT_DERIVED_PATTERNS",
    "FilesystemTree",
    "ScopeWalker",
    "WalkResult",
    "is_derived_name",
]
