"""Root candidates from an explicit list of resource paths."""

import logging
from collections.abc import Iterator, Sequence

from scopectl.core.tree import ResourceTree
from scopectl.models.resource import ResourceProxy
from scopectl.providers.base import RootCandidateProvider

logger = logging.getLogger(__name__)


class ExplicitRootProvider(RootCandidateProvider):
    """Resolves a flat list of path strings against a resource tree.

    Paths that do not exist in the tree are logged and skipped.

    Args:
        tree: Resource tree used to resolve paths.
        paths: Resource path strings (e.g., "/proj/src").
    """

    def __init__(self, tree: ResourceTree, paths: Sequence[str]) -> None:
        super().__init__(tree)
        self._paths = tuple(paths)

    @property
    def label(self) -> str:
        return ", ".join(self._paths) if self._paths else "(no paths)"

    def candidates(self) -> Iterator[ResourceProxy]:
        for value in self._paths:
            proxy = self._tree.resolve(value)
            if proxy is None:
                logger.warning("Skipping unknown resource: %s", value)
                continue
            yield proxy
