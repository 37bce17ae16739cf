"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from scopectl.filesystem.tree import FilesystemTree

# Files created by the workspace fixture, relative to the workspace root
WORKSPACE_FILES: tuple[str, ...] = (
    "proj/README.md",
    "proj/src/Foo.java",
    "proj/src/TestFoo.java",
    "proj/src/notes.txt",
    "proj/src/pkg/Bar.java",
    "proj/lib/util.py",
    "proj/build/Gen.java",
    "proj/build/classes/Foo.class",
    "other/data.csv",
)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a small workspace directory with one derived build folder."""
    for relative in WORKSPACE_FILES:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"content of {relative}\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def tree(workspace: Path) -> FilesystemTree:
    """Resource tree over the workspace fixture with default derived patterns."""
    return FilesystemTree(workspace)


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home
