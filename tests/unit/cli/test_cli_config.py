"""Unit tests for the config CLI commands."""

import json
from pathlib import Path

from scopectl.cli.main import app
from scopectl.core.config import ScopeConfig, load_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigShow:
    """Tests for scopectl config show."""

    def test_defaults_as_json(self, tmp_path: Path) -> None:
        """Without a file the defaults are shown."""
        result = runner.invoke(
            app, ["config", "show", "--config", str(tmp_path / "none.toml"), "-f", "json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == ScopeConfig().model_dump(mode="json")

    def test_file_as_json(self, tmp_path: Path) -> None:
        """Settings from the file are shown."""
        path = tmp_path / "config.toml"
        path.write_text('file_name_patterns = ["*.py"]\nmax_workers = 2\n')

        result = runner.invoke(app, ["config", "show", "--config", str(path), "-f", "json"])

        data = json.loads(result.stdout)
        assert data["file_name_patterns"] == ["*.py"]
        assert data["max_workers"] == 2

    def test_table(self, tmp_path: Path) -> None:
        """Table output lists every setting."""
        path = tmp_path / "config.toml"
        path.write_text('[[working_sets]]\nlabel = "core"\nelements = ["/proj"]\n')

        result = runner.invoke(app, ["config", "show", "--config", str(path)])

        assert result.exit_code == 0
        for setting in ("file_name_patterns", "include_derived", "max_workers", "core"):
            assert setting in result.stdout

    def test_defaults_note(self, tmp_path: Path) -> None:
        """A missing file is pointed out in table output."""
        result = runner.invoke(app, ["config", "show", "--config", str(tmp_path / "none.toml")])

        assert result.exit_code == 0
        assert "No config file at" in result.stdout

    def test_invalid_file(self, tmp_path: Path) -> None:
        """Invalid configuration is reported."""
        path = tmp_path / "config.toml"
        path.write_text("max_workers = 100\n")

        result = runner.invoke(app, ["config", "show", "--config", str(path)])

        assert result.exit_code == 1
        assert "Invalid scope config content" in result.output


class TestConfigInit:
    """Tests for scopectl config init."""

    def test_writes_defaults(self, tmp_path: Path) -> None:
        """init writes a loadable default configuration."""
        path = tmp_path / "config.toml"

        result = runner.invoke(app, ["config", "init", "--config", str(path)])

        assert result.exit_code == 0
        assert load_config(path) == ScopeConfig()

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        """An existing file is kept unless --force is given."""
        path = tmp_path / "config.toml"
        path.write_text("max_workers = 2\n")

        result = runner.invoke(app, ["config", "init", "--config", str(path)])

        assert result.exit_code == 1
        assert "Config already exists" in result.output
        assert load_config(path).max_workers == 2

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """--force replaces an existing file."""
        path = tmp_path / "config.toml"
        path.write_text("max_workers = 2\n")

        result = runner.invoke(app, ["config", "init", "--config", str(path), "--force"])

        assert result.exit_code == 0
        assert load_config(path).max_workers == ScopeConfig().max_workers

    def test_default_location(self, isolated_config_home: Path) -> None:
        """Without --config the file is written to the XDG config directory."""
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert (isolated_config_home / "scopectl" / "config.toml").exists()
