"""Unit tests for XDG path management."""

from pathlib import Path

import pytest
from scopectl.core.paths import (
    APP_NAME,
    CONFIG_FILENAME,
    THEME_FILENAME,
    get_config_dir,
    get_config_path,
    get_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without XDG_CONFIG_HOME the directory is below ~/.config."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        assert get_config_dir() == Path.home() / ".config" / APP_NAME

    def test_empty_xdg_config_home_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty XDG_CONFIG_HOME falls back to the default."""
        monkeypatch.setenv("XDG_CONFIG_HOME", "")

        assert get_config_dir() == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """XDG_CONFIG_HOME overrides the default location."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_dir() == tmp_path / APP_NAME

    def test_not_created(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Looking up the directory does not create it."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert not get_config_dir().exists()


class TestFilePaths:
    """Tests for config file path helpers."""

    def test_config_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The config file lives in the config directory."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / APP_NAME / CONFIG_FILENAME
        assert CONFIG_FILENAME == "config.toml"

    def test_theme_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The theme file lives in the config directory."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_theme_path() == tmp_path / APP_NAME / THEME_FILENAME
        assert THEME_FILENAME == "theme.toml"
