"""Unit tests for derived resource markers."""

import pytest
from scopectl.filesystem.derived import DEFAULT_DERIVED_PATTERNS, is_derived_name


class TestIsDerivedName:
    """Tests for is_derived_name function."""

    @pytest.mark.parametrize(
        "name",
        ["build", "dist", "__pycache__", "scopectl.egg-info", "node_modules", ".git", "a.pyc"],
    )
    def test_default_derived_names(self, name: str) -> None:
        """Common build and cache outputs are derived."""
        assert is_derived_name(name)

    @pytest.mark.parametrize("name", ["src", "Build", "builder", "README.md", "egg-info"])
    def test_regular_names(self, name: str) -> None:
        """Other names are not derived; matching is case-sensitive."""
        assert not is_derived_name(name)

    def test_custom_patterns(self) -> None:
        """Explicit patterns replace the defaults."""
        assert is_derived_name("gen", ["gen", "*.o"])
        assert is_derived_name("main.o", ["gen", "*.o"])
        assert not is_derived_name("build", ["gen"])

    def test_empty_patterns(self) -> None:
        """An empty pattern list marks nothing as derived."""
        assert not is_derived_name("build", [])

    def test_defaults_are_globs(self) -> None:
        """Default patterns are non-empty strings."""
        assert all(isinstance(p, str) and p for p in DEFAULT_DERIVED_PATTERNS)
