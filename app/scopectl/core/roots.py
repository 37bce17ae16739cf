"""Root set reduction.

Reduces a possibly overlapping list of candidate roots to the minimal
set of roots that covers the same resources: no root is an ancestor of
another and no path appears twice.
"""

import logging
from collections.abc import Iterable

from scopectl.models.resource import ResourcePath, ResourceProxy

logger = logging.getLogger(__name__)

# Ordered, overlap-free sequence of root paths
RootSet = tuple[ResourcePath, ...]


def build_root_set(candidates: Iterable[ResourceProxy], include_derived: bool) -> RootSet:
    """Build the minimal root set for a list of candidates.

    Candidates are processed in input order. Each surviving candidate is
    compared against the roots collected so far, newest first:

    1. An existing root that is a prefix of (or equal to) the candidate
       already covers it, so the candidate is discarded.
    2. An existing root nested inside the candidate is removed, and the
       scan continues.

    Broader roots therefore always win regardless of arrival order, and
    duplicate paths collapse onto their first occurrence.

    Args:
        candidates: Candidate roots in input order.
        include_derived: If False, derived candidates are dropped.

    Returns:
        Tuple of root paths with no ancestor/descendant overlap.
    """
    roots: list[ResourcePath] = []

    for candidate in candidates:
        if not include_derived and candidate.derived:
            logger.debug("Dropping derived root candidate: %s", candidate.path)
            continue

        path = candidate.path
        covered = False
        for index in range(len(roots) - 1, -1, -1):
            existing = roots[index]
            if existing.is_prefix_of(path):
                covered = True
                break
            if path.is_prefix_of(existing):
                logger.debug("Root %s subsumed by %s", existing, path)
                del roots[index]

        if covered:
            logger.debug("Root candidate %s already covered", path)
            continue
        roots.append(path)

    return tuple(roots)
