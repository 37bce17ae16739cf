"""Resource tree backed by a directory on disk.

The base directory is the workspace root; resource path "/proj/src"
maps to "<base>/proj/src".
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from scopectl.core.tree import ResourceTree
from scopectl.filesystem.derived import is_derived_name
from scopectl.models.resource import ResourceKind, ResourcePath, ResourceProxy

logger = logging.getLogger(__name__)


class FilesystemTree(ResourceTree):
    """Resource tree over a real directory.

    Symbolic links to directories are reported as files so that walks
    never leave the tree or loop. Paths that reach outside the base
    directory through a linked ancestor are rejected.

    Args:
        base_dir: Directory acting as the workspace root.
        derived_patterns: Name patterns marking derived resources.
            Defaults to DEFAULT_DERIVED_PATTERNS.
    """

    def __init__(self, base_dir: Path, derived_patterns: Sequence[str] | None = None) -> None:
        self._base_dir = base_dir
        self._derived_patterns = tuple(derived_patterns) if derived_patterns is not None else None

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def to_os_path(self, path: ResourcePath) -> Path:
        """Map a resource path to its location on disk."""
        return self._base_dir.joinpath(*path.segments)

    def is_derived(self, path: ResourcePath) -> bool:
        """Check whether the path or any of its ancestors is derived."""
        return any(is_derived_name(segment, self._derived_patterns) for segment in path.segments)

    def proxy_for(self, path: ResourcePath) -> ResourceProxy | None:
        if ".." in path.segments:
            logger.warning("Rejecting path outside the workspace: %s", path)
            return None

        os_path = self.to_os_path(path)
        if not os_path.exists() and not os_path.is_symlink():
            return None

        if not path.is_root and not self._is_inside(os_path.parent):
            logger.warning("Rejecting path linked outside the workspace: %s", path)
            return None

        return ResourceProxy(
            path=path,
            kind=self._kind_of(os_path),
            derived=self.is_derived(path),
        )

    def children(self, proxy: ResourceProxy) -> list[ResourceProxy]:
        if proxy.kind != ResourceKind.CONTAINER:
            return []

        entries = sorted(self.to_os_path(proxy.path).iterdir(), key=lambda entry: entry.name)
        return [
            ResourceProxy(
                path=proxy.path.append(entry.name),
                kind=self._kind_of(entry),
                derived=proxy.derived or is_derived_name(entry.name, self._derived_patterns),
            )
            for entry in entries
        ]

    def _is_inside(self, os_path: Path) -> bool:
        """Check that os_path, with links resolved, stays below the base directory."""
        return os_path.resolve().is_relative_to(self._base_dir.resolve())

    @staticmethod
    def _kind_of(os_path: Path) -> ResourceKind:
        if os_path.is_dir() and not os_path.is_symlink():
            return ResourceKind.CONTAINER
        return ResourceKind.FILE
