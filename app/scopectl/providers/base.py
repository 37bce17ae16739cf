"""Abstract base class for root-candidate providers.

This module defines the RootCandidateProvider interface. Providers turn
a user-level selection (explicit paths, working sets) into candidate
roots; overlap between candidates is resolved later by the root set
builder.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from scopectl.core.tree import ResourceTree
from scopectl.models.resource import ResourceProxy


class RootCandidateProvider(ABC):
    """Abstract base class for all root-candidate providers.

    Example:
        >>> provider = ExplicitRootProvider(tree, ["/proj/src", "/proj/lib"])
        >>> for proxy in provider.candidates():
        ...     print(proxy.path)

    Args:
        tree: Resource tree used to resolve paths.
    """

    def __init__(self, tree: ResourceTree) -> None:
        self._tree = tree

    @property
    def tree(self) -> ResourceTree:
        return self._tree

    @property
    @abstractmethod
    def label(self) -> str:
        """Return a short label describing the selection."""

    @abstractmethod
    def candidates(self) -> Iterator[ResourceProxy]:
        """Yield candidate roots in selection order.

        Yields:
            ResourceProxy for each resolvable candidate. Candidates may
            overlap or repeat.
        """
