"""Data models for scopectl.

This module exports the resource and working set models.
"""

from scopectl.models.resource import ResourceKind, ResourcePath, ResourceProxy
from scopectl.models.working_set import WorkingSet

__all__ = [
    "ResourceKind",
    "ResourcePath",
    "ResourceProxy",
    "WorkingSet",
]
