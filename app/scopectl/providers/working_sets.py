"""Root candidates from working sets.

Working sets are resolved in label order. An aggregate working set with
no elements stands for the whole workspace; as soon as one is found,
the workspace root is the only candidate.
"""

import logging
from collections.abc import Iterator, Sequence

from scopectl.core.tree import ResourceTree
from scopectl.models.resource import ResourcePath, ResourceProxy
from scopectl.models.working_set import WorkingSet
from scopectl.providers.base import RootCandidateProvider

logger = logging.getLogger(__name__)


def sort_working_sets(working_sets: Sequence[WorkingSet]) -> tuple[WorkingSet, ...]:
    """Sort working sets by label, case-insensitively, then by exact label."""
    return tuple(sorted(working_sets, key=lambda ws: (ws.label.casefold(), ws.label)))


class WorkingSetProvider(RootCandidateProvider):
    """Resolves working sets to candidate roots.

    Args:
        tree: Resource tree used to resolve element paths.
        working_sets: Working sets to resolve. Stored sorted by label.
    """

    def __init__(self, tree: ResourceTree, working_sets: Sequence[WorkingSet]) -> None:
        super().__init__(tree)
        self._working_sets = sort_working_sets(working_sets)

    @property
    def working_sets(self) -> tuple[WorkingSet, ...]:
        return self._working_sets

    @property
    def label(self) -> str:
        return ", ".join(ws.label for ws in self._working_sets) or "(no working sets)"

    def candidates(self) -> Iterator[ResourceProxy]:
        for working_set in self._working_sets:
            if working_set.aggregate and working_set.is_empty:
                logger.debug("Empty aggregate working set %r covers workspace", working_set.label)
                root = self._tree.proxy_for(ResourcePath())
                if root is not None:
                    yield root
                return

        for working_set in self._working_sets:
            for element in working_set.elements:
                proxy = self._tree.resolve(element)
                if proxy is None:
                    logger.warning(
                        "Skipping unknown resource %s in working set %r",
                        element,
                        working_set.label,
                    )
                    continue
                yield proxy
