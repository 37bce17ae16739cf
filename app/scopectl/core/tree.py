"""Abstract resource tree interface.

Resource trees are owned by collaborators outside the search scope.
Root-candidate providers use them to resolve paths, tree walkers use
them to enumerate children.
"""

from abc import ABC, abstractmethod

from scopectl.models.resource import ResourcePath, ResourceProxy


class ResourceTree(ABC):
    """Read-only hierarchical resource tree.

    Example:
        >>> tree = FilesystemTree(Path("~/workspace").expanduser())
        >>> proxy = tree.proxy_for(ResourcePath.from_string("/proj/src"))
        >>> if proxy is not None:
        ...     for child in tree.children(proxy):
        ...         print(child.path, child.kind)
    """

    @abstractmethod
    def proxy_for(self, path: ResourcePath) -> ResourceProxy | None:
        """Look up a node by path.

        Args:
            path: Path of the node.

        Returns:
            ResourceProxy for the node, or None if it does not exist.
        """

    @abstractmethod
    def children(self, proxy: ResourceProxy) -> list[ResourceProxy]:
        """List the children of a container.

        Args:
            proxy: Container node.

        Returns:
            Child proxies sorted by name. Empty for files.

        Raises:
            OSError: If the container cannot be read.
        """

    def resolve(self, value: str) -> ResourceProxy | None:
        """Look up a node from a path string."""
        return self.proxy_for(ResourcePath.from_string(value))
