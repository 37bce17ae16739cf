"""Resource tree models used by the search scope.

This module defines the immutable values that describe nodes of a
hierarchical resource tree: their path, their kind and whether they
are derived (generated) resources.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

# Both separators are accepted when parsing path strings
_SEPARATORS = re.compile(r"[\\/]+")


@dataclass(frozen=True, slots=True)
class ResourcePath:
    """Path of a node in the resource tree.

    A path is an ordered tuple of segments. The empty tuple is the
    workspace root, which is a prefix of every other path.

    Attributes:
        segments: Path segments from the workspace root downwards.
    """

    segments: tuple[str, ...] = ()

    @classmethod
    def from_string(cls, value: str) -> ResourcePath:
        """Parse a slash separated path string.

        Empty and "." segments are dropped, so "/a//b/./c" and "a/b/c"
        parse to the same path.

        Args:
            value: Path string (e.g., "/proj/src").

        Returns:
            Parsed ResourcePath.
        """
        parts = tuple(part for part in _SEPARATORS.split(value) if part and part != ".")
        return cls(parts)

    @property
    def name(self) -> str:
        """Last segment, or an empty string for the workspace root."""
        return self.segments[-1] if self.segments else ""

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def parent(self) -> ResourcePath:
        """Parent path. The workspace root is its own parent."""
        return ResourcePath(self.segments[:-1])

    def append(self, name: str) -> ResourcePath:
        """Return the child path with the given segment appended."""
        return ResourcePath((*self.segments, name))

    def is_prefix_of(self, other: ResourcePath) -> bool:
        """Check whether this path is an ancestor of, or equal to, other.

        Args:
            other: Path to compare against.

        Returns:
            True if every segment of this path matches the leading
            segments of other.
        """
        count = len(self.segments)
        if count > len(other.segments):
            return False
        return other.segments[:count] == self.segments

    def __str__(self) -> str:
        return "/" + "/".join(self.segments)


class ResourceKind(str, Enum):
    """Kind of resource tree node.

    Attributes:
        FILE: Leaf node with content; file name patterns apply to it.
        CONTAINER: Node with children (project, folder, workspace root).
    """

    FILE = "file"
    CONTAINER = "container"


@dataclass(frozen=True, slots=True)
class ResourceProxy:
    """Read-only view of a resource tree node at traversal time.

    Attributes:
        path: Full path of the node.
        kind: File or container.
        derived: True if the node or any of its ancestors is derived.
    """

    path: ResourcePath
    kind: ResourceKind
    derived: bool = False

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_file(self) -> bool:
        return self.kind == ResourceKind.FILE
