"""Unit tests for SearchScope and the scope factories.

Tests for membership decisions, derived propagation, descriptions and
concurrent evaluation from many threads.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from scopectl.core.patterns import PatternSyntaxError
from scopectl.core.scope import (
    WORKSPACE_SCOPE,
    SearchScope,
    new_search_scope,
    new_working_set_scope,
    new_workspace_scope,
)
from scopectl.filesystem.tree import FilesystemTree
from scopectl.models.resource import ResourceKind, ResourcePath, ResourceProxy
from scopectl.models.working_set import WorkingSet
from scopectl.providers.working_sets import WorkingSetProvider


def _file(path: str, derived: bool = False) -> ResourceProxy:
    """Create a file proxy for a path string."""
    return ResourceProxy(ResourcePath.from_string(path), ResourceKind.FILE, derived)


def _container(path: str, derived: bool = False) -> ResourceProxy:
    """Create a container proxy for a path string."""
    return ResourceProxy(ResourcePath.from_string(path), ResourceKind.CONTAINER, derived)


class TestContains:
    """Tests for SearchScope.contains."""

    def test_default_match_all(self) -> None:
        """Without patterns every non-derived file is a member."""
        scope = new_workspace_scope(None, include_derived=False, case_sensitive=True)
        assert scope.contains(_file("/a/anything.bin"))
        assert scope.contains(_file("/a/.hidden"))

    def test_patterns_decide_files(self) -> None:
        """Inclusion admits, exclusion vetoes."""
        scope = new_workspace_scope(["*.java", "!Test*.java"], False, case_sensitive=True)
        assert scope.contains(_file("/src/Foo.java"))
        assert not scope.contains(_file("/src/TestFoo.java"))
        assert not scope.contains(_file("/src/Foo.txt"))

    def test_negation_only(self) -> None:
        """Only negated patterns admit every file except the excluded ones."""
        scope = new_workspace_scope(["!*.txt"], False, case_sensitive=True)
        assert scope.contains(_file("/a/b.java"))
        assert not scope.contains(_file("/a/b.txt"))
        assert scope.contains(_file("/a/b.TXT"))

    def test_containers_ignore_patterns(self) -> None:
        """Containers are members even if their name fails the patterns."""
        scope = new_workspace_scope(["*.java"], False, case_sensitive=True)
        assert scope.contains(_container("/proj/docs"))

    def test_derived_container_excluded(self) -> None:
        """A derived container is not a member when derived resources are excluded."""
        scope = new_workspace_scope(None, include_derived=False)
        assert not scope.contains(_container("/proj/build", derived=True))

    def test_derived_file_excluded_even_if_pattern_matches(self) -> None:
        """The derived check runs before file name matching."""
        scope = new_workspace_scope(["*.java"], False, case_sensitive=True)
        assert not scope.contains(_file("/proj/build/Gen.java", derived=True))

    def test_derived_included_when_enabled(self) -> None:
        """Derived resources are evaluated normally when included."""
        scope = new_workspace_scope(["*.java"], True, case_sensitive=True)
        assert scope.contains(_container("/proj/build", derived=True))
        assert scope.contains(_file("/proj/build/Gen.java", derived=True))
        assert not scope.contains(_file("/proj/build/Gen.class", derived=True))

    def test_explicit_matchers(self) -> None:
        """Callers may pass their own worker matchers."""
        scope = new_workspace_scope(["*.py"], False, case_sensitive=True)
        matchers = scope.matchers()
        assert scope.contains(_file("/a.py"), matchers)
        assert not scope.contains(_file("/a.txt"), matchers)

    def test_matches_file_name(self) -> None:
        """File names can be tested without a proxy."""
        scope = new_workspace_scope(["*.md"], False, case_sensitive=False)
        assert scope.matches_file_name("README.MD")
        assert not scope.matches_file_name("setup.py")


class TestSearchScopeConstruction:
    """Tests for SearchScope construction and accessors."""

    def test_malformed_pattern_fails(self) -> None:
        """A malformed pattern prevents scope creation."""
        with pytest.raises(PatternSyntaxError):
            SearchScope("x", (), ["[abc"], False)

    def test_accessors(self) -> None:
        """Constructor arguments are exposed as read-only properties."""
        roots = (ResourcePath.from_string("/a"),)
        scope = SearchScope("label", roots, ["*.py"], True, case_sensitive=True)
        assert scope.description == "label"
        assert scope.roots == roots
        assert scope.file_name_patterns == ("*.py",)
        assert scope.include_derived is True
        assert scope.working_sets is None
        assert scope.patterns.inclusion_patterns == ("*.py",)
        assert scope.patterns.case_sensitive is True

    def test_patterns_copied(self) -> None:
        """Mutating the caller's list does not affect the scope."""
        patterns = ["*.py"]
        scope = SearchScope("x", (), patterns, False)
        patterns.append("*.txt")
        assert scope.file_name_patterns == ("*.py",)

    def test_filter_description(self) -> None:
        """Patterns are described sorted and comma separated."""
        scope = SearchScope("x", (), ["*.xml", "!Test*", "*.java"], False)
        assert scope.filter_description == "!Test*, *.java, *.xml"

    def test_filter_description_without_patterns(self) -> None:
        """No patterns are described as '*'."""
        assert SearchScope("x", (), None, False).filter_description == "*"

    def test_repr(self) -> None:
        """repr shows description, roots and filter."""
        scope = SearchScope("x", (ResourcePath.from_string("/a"),), None, False)
        assert repr(scope) == (
            "SearchScope(description='x', roots=['/a'], filter='*', include_derived=False)"
        )


class TestNewSearchScope:
    """Tests for new_search_scope."""

    def test_roots_reduced(self) -> None:
        """Overlapping candidates are reduced to a minimal root set."""
        scope = new_search_scope(
            [_container("/proj/src"), _container("/proj/src/pkg"), _container("/proj/lib")],
            None,
            False,
        )
        assert [str(root) for root in scope.roots] == ["/proj/src", "/proj/lib"]

    @pytest.mark.parametrize(
        ("paths", "expected"),
        [
            ([], "Empty scope"),
            (["/proj/src"], "'src'"),
            (["/proj/src", "/proj/lib"], "'src', 'lib'"),
            (["/a", "/b", "/c"], "'a', 'b', ..."),
            (["/"], "'Workspace'"),
        ],
    )
    def test_description(self, paths: list[str], expected: str) -> None:
        """The description names up to two roots."""
        scope = new_search_scope([_container(p) for p in paths], None, False)
        assert scope.description == expected

    def test_derived_candidates_do_not_appear_in_description(self) -> None:
        """Dropped derived candidates are not described."""
        scope = new_search_scope([_container("/proj/build", derived=True)], None, False)
        assert scope.roots == ()
        assert scope.description == "Empty scope"


class TestNewWorkingSetScope:
    """Tests for new_working_set_scope."""

    def test_working_set_roots(self, tree: FilesystemTree) -> None:
        """Working set elements become reduced roots."""
        provider = WorkingSetProvider(
            tree,
            [
                WorkingSet(label="src", elements=["/proj/src", "/proj/src/pkg"]),
                WorkingSet(label="lib", elements=["/proj/lib"]),
            ],
        )
        scope = new_working_set_scope(provider, ["*.java"], False)
        # Sorted by label: lib before src
        assert [str(root) for root in scope.roots] == ["/proj/lib", "/proj/src"]
        assert scope.description == "Working sets 'lib', 'src'"
        assert scope.working_sets is not None
        assert [ws.label for ws in scope.working_sets] == ["lib", "src"]

    @pytest.mark.parametrize(
        ("labels", "expected"),
        [
            ([], "Working sets: (none)"),
            (["one"], "Working set 'one'"),
            (["b", "a", "c"], "Working sets 'a', 'b', ..."),
        ],
    )
    def test_description(self, tree: FilesystemTree, labels: list[str], expected: str) -> None:
        """The description names up to two working sets."""
        provider = WorkingSetProvider(tree, [WorkingSet(label=label) for label in labels])
        assert new_working_set_scope(provider, None, False).description == expected

    def test_empty_aggregate_covers_workspace(self, tree: FilesystemTree) -> None:
        """An empty aggregate working set yields the workspace root."""
        provider = WorkingSetProvider(
            tree,
            [
                WorkingSet(label="src", elements=["/proj/src"]),
                WorkingSet(label="all", aggregate=True),
            ],
        )
        scope = new_working_set_scope(provider, None, False)
        assert scope.roots == (ResourcePath(),)

    def test_derived_elements_dropped(self, tree: FilesystemTree) -> None:
        """Derived working set elements are dropped when excluded."""
        provider = WorkingSetProvider(
            tree, [WorkingSet(label="out", elements=["/proj/build", "/proj/lib"])]
        )
        scope = new_working_set_scope(provider, None, False)
        assert [str(root) for root in scope.roots] == ["/proj/lib"]


class TestNewWorkspaceScope:
    """Tests for new_workspace_scope."""

    def test_workspace_root(self) -> None:
        """The workspace scope has the root path as its only root."""
        scope = new_workspace_scope(None, False)
        assert scope.roots == (ResourcePath(),)
        assert scope.description == WORKSPACE_SCOPE
        assert scope.working_sets is None


class TestConcurrentEvaluation:
    """Tests for evaluating one scope from many threads."""

    def test_results_match_sequential(self) -> None:
        """Concurrent decisions equal sequential decisions."""
        scope = new_workspace_scope(
            ["*.java", "*.py", "!Test*", "!*_test.py"], False, case_sensitive=True
        )
        names = [
            f"{prefix}{index}{suffix}"
            for index in range(200)
            for prefix in ("", "Test")
            for suffix in (".java", ".py", "_test.py", ".txt")
        ]
        proxies = [_file(f"/p/{name}", derived=index % 7 == 0) for index, name in enumerate(names)]
        expected = [scope.contains(proxy) for proxy in proxies]

        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(scope.contains, proxies, chunksize=5))

        assert actual == expected

    def test_each_thread_has_private_matchers(self) -> None:
        """Matchers obtained on different threads are distinct objects."""
        scope = new_workspace_scope(["*.py"], False)
        main_matchers = scope.matchers()

        with ThreadPoolExecutor(max_workers=1) as pool:
            worker_matchers = pool.submit(scope.matchers).result()

        assert worker_matchers is not main_matchers
        assert scope.matchers() is main_matchers
