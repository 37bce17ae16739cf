"""Scope configuration and settings.

This module provides the configuration model and I/O functions for the
default search scope settings: file name patterns, derived-resource
policy, walker concurrency and named working sets.

Configuration is stored in ~/.config/scopectl/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from scopectl.core.paths import get_config_path
from scopectl.filesystem.derived import DEFAULT_DERIVED_PATTERNS
from scopectl.filesystem.walker import DEFAULT_MAX_WORKERS
from scopectl.models.working_set import WorkingSet

logger = logging.getLogger(__name__)


class ScopeConfig(BaseModel):
    """Default settings for building search scopes.

    Attributes:
        file_name_patterns: Patterns applied to file names. None matches
            every file name.
        include_derived: Whether derived resources belong to scopes.
        derived_patterns: Name patterns marking derived resources.
        max_workers: Walker thread pool size (1-64).
        working_sets: Named working sets available for scopes.
    """

    model_config = ConfigDict(extra="forbid")

    file_name_patterns: Annotated[
        list[str] | None,
        Field(description="File name patterns (None = all files)"),
    ] = None
    include_derived: Annotated[
        bool,
        Field(description="Include derived resources"),
    ] = False
    derived_patterns: Annotated[
        list[str],
        Field(
            default_factory=lambda: list(DEFAULT_DERIVED_PATTERNS),
            description="Name patterns marking derived resources",
        ),
    ]
    max_workers: Annotated[
        int,
        Field(ge=1, le=64, description="Walker threads (1-64)"),
    ] = DEFAULT_MAX_WORKERS
    working_sets: Annotated[
        list[WorkingSet],
        Field(default_factory=list, description="Named working sets"),
    ]

    @model_validator(mode="after")
    def validate_unique_labels(self) -> "ScopeConfig":
        """Validate that working set labels are unique."""
        labels = [ws.label for ws in self.working_sets]
        duplicates = {label for label in labels if labels.count(label) > 1}
        if duplicates:
            msg = f"Duplicate working set labels: {sorted(duplicates)}"
            raise ValueError(msg)
        return self

    def get_working_sets(self, labels: list[str]) -> list[WorkingSet]:
        """Select working sets by label.

        Args:
            labels: Labels to select.

        Returns:
            Matching working sets in the order of labels.

        Raises:
            KeyError: If a label is not configured.
        """
        by_label = {ws.label: ws for ws in self.working_sets}
        missing = [label for label in labels if label not in by_label]
        if missing:
            raise KeyError(f"Unknown working set(s): {', '.join(missing)}")
        return [by_label[label] for label in labels]


class ScopeConfigError(Exception):
    """Base exception for scope configuration errors."""


class ScopeConfigNotFoundError(ScopeConfigError):
    """Raised when the config file is not found."""


class ScopeConfigParseError(ScopeConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ScopeConfig:
    """Load scope configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses default config path.

    Returns:
        Validated ScopeConfig object.

    Raises:
        ScopeConfigNotFoundError: If the config file doesn't exist.
        ScopeConfigParseError: If the TOML syntax is invalid.
        ScopeConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ScopeConfigNotFoundError(f"Scope config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ScopeConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ScopeConfigError(f"Failed to read scope config: {e}") from e

    try:
        return ScopeConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ScopeConfigError(f"Invalid scope config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> ScopeConfig:
    """Load the scope configuration, falling back to defaults if missing.

    Parse and validation errors still propagate.

    Args:
        path: Path to the config file. If None, uses default config path.

    Returns:
        Loaded or default ScopeConfig.
    """
    try:
        return load_config(path)
    except ScopeConfigNotFoundError:
        logger.debug("No scope config found, using defaults")
        return ScopeConfig()


def save_config(config: ScopeConfig, path: Path | None = None) -> Path:
    """Save scope configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The ScopeConfig object to save.
        path: Path to save the config. If None, uses default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ScopeConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ScopeConfigError(f"Failed to write scope config: {e}") from e

    return config_path


def _config_to_dict(config: ScopeConfig) -> dict[str, object]:
    """Convert ScopeConfig to a dictionary for TOML serialization.

    TOML has no null, so an absent pattern list is omitted.

    Args:
        config: The ScopeConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {
        "include_derived": config.include_derived,
        "derived_patterns": list(config.derived_patterns),
        "max_workers": config.max_workers,
    }

    if config.file_name_patterns is not None:
        result["file_name_patterns"] = list(config.file_name_patterns)

    if config.working_sets:
        result["working_sets"] = [
            {"label": ws.label, "elements": list(ws.elements), "aggregate": ws.aggregate}
            for ws in config.working_sets
        ]

    return result
