"""Concurrent resource tree walker.

Enumerates the resources of a search scope level by level. Directory
listings and membership checks run on a thread pool; each worker thread
matches file names through its own matchers from the scope.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field

from scopectl.core.scope import SearchScope
from scopectl.core.tree import ResourceTree
from scopectl.models.resource import ResourceKind, ResourcePath, ResourceProxy

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


@dataclass(frozen=True, slots=True)
class WalkResult:
    """Outcome of a scope walk.

    Attributes:
        files: Member files, sorted by path.
        visited: Number of resources passed to the scope.
        missing_roots: Roots that do not exist in the tree.
        unreadable: Containers whose children could not be listed.
        cancelled: True if the walk was stopped before completion.
    """

    files: tuple[ResourcePath, ...]
    visited: int
    missing_roots: tuple[ResourcePath, ...] = ()
    unreadable: tuple[ResourcePath, ...] = ()
    cancelled: bool = False


@dataclass(slots=True)
class _Visit:
    files: list[ResourcePath] = field(default_factory=list)
    containers: list[ResourceProxy] = field(default_factory=list)
    visited: int = 0
    unreadable: bool = False


class ScopeWalker:
    """Walks the roots of a search scope with a thread pool.

    A container for which the scope answers False is not descended into.

    Args:
        scope: Scope deciding membership.
        tree: Resource tree to enumerate.
        max_workers: Thread pool size.
    """

    def __init__(
        self,
        scope: SearchScope,
        tree: ResourceTree,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        if max_workers < 1:
            msg = f"max_workers must be at least 1, got {max_workers}"
            raise ValueError(msg)
        self._scope = scope
        self._tree = tree
        self._max_workers = max_workers

    def walk(self, cancel_event: threading.Event | None = None) -> WalkResult:
        """Enumerate all member files of the scope.

        Args:
            cancel_event: When set, no further directory levels are
                scheduled and the partial result is returned.

        Returns:
            WalkResult with the member files in sorted order.
        """
        files: list[ResourcePath] = []
        missing: list[ResourcePath] = []
        unreadable: list[ResourcePath] = []
        pending: list[ResourceProxy] = []
        visited = 0

        for root in self._scope.roots:
            proxy = self._tree.proxy_for(root)
            if proxy is None:
                logger.warning("Skipping missing root: %s", root)
                missing.append(root)
                continue
            visited += 1
            if not self._scope.contains(proxy):
                continue
            if proxy.kind == ResourceKind.FILE:
                files.append(proxy.path)
            else:
                pending.append(proxy)

        cancelled = False
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            while pending:
                if cancel_event is not None and cancel_event.is_set():
                    logger.debug("Walk cancelled with %d containers pending", len(pending))
                    cancelled = True
                    break

                futures = {pool.submit(self._visit, container): container for container in pending}
                pending = []
                for future in as_completed(futures):
                    outcome = future.result()
                    visited += outcome.visited
                    files.extend(outcome.files)
                    pending.extend(outcome.containers)
                    if outcome.unreadable:
                        unreadable.append(futures[future].path)

        files.sort(key=lambda path: path.segments)
        unreadable.sort(key=lambda path: path.segments)
        return WalkResult(
            files=tuple(files),
            visited=visited,
            missing_roots=tuple(missing),
            unreadable=tuple(unreadable),
            cancelled=cancelled,
        )

    def _visit(self, container: ResourceProxy) -> _Visit:
        """List one container and evaluate its children on the calling worker."""
        outcome = _Visit()
        try:
            children = self._tree.children(container)
        except OSError as e:
            logger.warning("Cannot list %s: %s", container.path, e)
            outcome.unreadable = True
            return outcome

        matchers = self._scope.matchers()
        for child in children:
            outcome.visited += 1
            if not self._scope.contains(child, matchers):
                continue
            if child.kind == ResourceKind.FILE:
                outcome.files.append(child.path)
            else:
                outcome.containers.append(child)

        return outcome
