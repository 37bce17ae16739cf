"""Search scope: the membership predicate consumed by tree walkers.

A SearchScope bundles a minimal root set, compiled file name patterns
and the derived-resource policy. It is immutable after construction and
may be shared by reference across walker threads; each thread matches
file names through its own matchers obtained from a MatcherCache.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from scopectl.core.matchers import MatcherCache, WorkerMatchers
from scopectl.core.patterns import (
    IS_CASE_SENSITIVE_FILESYSTEM,
    CompiledPatternSet,
    compile_patterns,
)
from scopectl.core.roots import RootSet, build_root_set
from scopectl.models.resource import ResourceKind, ResourcePath, ResourceProxy
from scopectl.models.working_set import WorkingSet
from scopectl.providers.working_sets import WorkingSetProvider

# Scope descriptions
WORKSPACE_SCOPE = "Workspace"
_ROOT_LABELS = ("Empty scope", "'{0}'", "'{0}', '{1}'", "'{0}', '{1}', ...")
_WORKING_SET_LABELS = (
    "Working sets: (none)",
    "Working set '{0}'",
    "Working sets '{0}', '{1}'",
    "Working sets '{0}', '{1}', ...",
)


class SearchScope:
    """Immutable description of which resources a search may visit.

    Pattern compilation happens first, so a malformed pattern raises
    before any scope object exists.

    Args:
        description: Human-readable scope label.
        roots: Minimal, overlap-free root set.
        file_name_patterns: Raw patterns, or None to match all file names.
        include_derived: Whether derived resources belong to the scope.
        working_sets: Working sets the scope was built from, if any.
        case_sensitive: Case sensitivity for file name matching.

    Raises:
        PatternSyntaxError: If a file name pattern is malformed.
    """

    def __init__(
        self,
        description: str,
        roots: RootSet,
        file_name_patterns: Sequence[str] | None,
        include_derived: bool,
        *,
        working_sets: Sequence[WorkingSet] | None = None,
        case_sensitive: bool = IS_CASE_SENSITIVE_FILESYSTEM,
    ) -> None:
        self._patterns = compile_patterns(file_name_patterns, case_sensitive)
        self._description = description
        self._roots = tuple(roots)
        self._file_name_patterns = (
            tuple(file_name_patterns) if file_name_patterns is not None else None
        )
        self._include_derived = include_derived
        self._working_sets = tuple(working_sets) if working_sets is not None else None
        self._matchers = MatcherCache(self._patterns)

    @property
    def description(self) -> str:
        return self._description

    @property
    def roots(self) -> RootSet:
        """Root paths to start enumeration from."""
        return self._roots

    @property
    def file_name_patterns(self) -> tuple[str, ...] | None:
        """Patterns as given at construction, or None to match all file names."""
        return self._file_name_patterns

    @property
    def include_derived(self) -> bool:
        return self._include_derived

    @property
    def working_sets(self) -> tuple[WorkingSet, ...] | None:
        """Working sets the scope is based on, or None."""
        return self._working_sets

    @property
    def patterns(self) -> CompiledPatternSet:
        return self._patterns

    @property
    def filter_description(self) -> str:
        """Describe the file name patterns, sorted and comma separated."""
        if self._file_name_patterns is None:
            return "*"
        return ", ".join(sorted(self._file_name_patterns))

    def matchers(self) -> WorkerMatchers:
        """Return the calling thread's private file name matchers."""
        return self._matchers.get()

    def contains(self, proxy: ResourceProxy, matchers: WorkerMatchers | None = None) -> bool:
        """Decide whether a visited resource belongs to the scope.

        For containers, False also tells the walker not to descend.

        Args:
            proxy: Resource being visited.
            matchers: Worker matchers to use. Defaults to the calling
                thread's matchers.

        Returns:
            True if the resource is a member of the scope.
        """
        # Everything below a derived container is derived as well
        if not self._include_derived and proxy.derived:
            return False

        if proxy.kind == ResourceKind.CONTAINER:
            return True

        return self.matches_file_name(proxy.name, matchers)

    def matches_file_name(self, name: str, matchers: WorkerMatchers | None = None) -> bool:
        """Check a file name against the inclusion and exclusion patterns.

        Args:
            name: File name (last path segment).
            matchers: Worker matchers to use. Defaults to the calling
                thread's matchers.

        Returns:
            True if the name passes the inclusion test and is not excluded.
        """
        if matchers is None:
            matchers = self._matchers.get()
        return matchers.matches(name)

    def __repr__(self) -> str:
        return (
            f"SearchScope(description={self._description!r}, "
            f"roots={[str(root) for root in self._roots]!r}, "
            f"filter={self.filter_description!r}, include_derived={self._include_derived})"
        )


def _describe(labels: Sequence[str], templates: tuple[str, str, str, str]) -> str:
    empty, single, double, multiple = templates
    if not labels:
        return empty
    if len(labels) == 1:
        return single.format(labels[0])
    if len(labels) == 2:
        return double.format(labels[0], labels[1])
    return multiple.format(labels[0], labels[1])


def _root_label(root: ResourcePath) -> str:
    return root.name or WORKSPACE_SCOPE


def new_search_scope(
    candidates: Iterable[ResourceProxy],
    file_name_patterns: Sequence[str] | None,
    include_derived: bool,
    *,
    case_sensitive: bool = IS_CASE_SENSITIVE_FILESYSTEM,
) -> SearchScope:
    """Create a scope for explicit root resources.

    Args:
        candidates: Candidate roots, possibly overlapping.
        file_name_patterns: Raw patterns, or None to match all file names.
        include_derived: Whether derived resources belong to the scope.
        case_sensitive: Case sensitivity for file name matching.

    Returns:
        SearchScope over the minimal root set.

    Raises:
        PatternSyntaxError: If a file name pattern is malformed.
    """
    roots = build_root_set(candidates, include_derived)
    description = _describe([_root_label(root) for root in roots], _ROOT_LABELS)
    return SearchScope(
        description,
        roots,
        file_name_patterns,
        include_derived,
        case_sensitive=case_sensitive,
    )


def new_working_set_scope(
    provider: WorkingSetProvider,
    file_name_patterns: Sequence[str] | None,
    include_derived: bool,
    *,
    case_sensitive: bool = IS_CASE_SENSITIVE_FILESYSTEM,
) -> SearchScope:
    """Create a scope for the resources of one or more working sets.

    Args:
        provider: Resolves the working sets to candidate roots.
        file_name_patterns: Raw patterns, or None to match all file names.
        include_derived: Whether derived resources belong to the scope.
        case_sensitive: Case sensitivity for file name matching.

    Returns:
        SearchScope over the minimal root set of the working sets.

    Raises:
        PatternSyntaxError: If a file name pattern is malformed.
    """
    working_sets = provider.working_sets
    description = _describe([ws.label for ws in working_sets], _WORKING_SET_LABELS)
    roots = build_root_set(provider.candidates(), include_derived)
    return SearchScope(
        description,
        roots,
        file_name_patterns,
        include_derived,
        working_sets=working_sets,
        case_sensitive=case_sensitive,
    )


def new_workspace_scope(
    file_name_patterns: Sequence[str] | None,
    include_derived: bool,
    *,
    case_sensitive: bool = IS_CASE_SENSITIVE_FILESYSTEM,
) -> SearchScope:
    """Create a scope covering the whole workspace.

    Raises:
        PatternSyntaxError: If a file name pattern is malformed.
    """
    return SearchScope(
        WORKSPACE_SCOPE,
        (ResourcePath(),),
        file_name_patterns,
        include_derived,
        case_sensitive=case_sensitive,
    )
