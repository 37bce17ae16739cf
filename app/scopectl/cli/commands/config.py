"""Configuration commands.

Provides commands to show the effective scope configuration and to
write a default configuration file.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from scopectl.cli.types import OutputFormat, load_settings
from scopectl.core.config import ScopeConfig, ScopeConfigError, save_config
from scopectl.core.paths import get_config_path
from scopectl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize the scope configuration.",
    no_args_is_help=True,
)


@app.command()
def show(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Configuration file."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the effective configuration (defaults if no file exists)."""
    config = load_settings(config_path)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(config.model_dump(mode="json")))
        return

    table = Table(title="Scope Configuration", header_style="bold_header", border_style="border")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    patterns = config.file_name_patterns
    table.add_row("file_name_patterns", escape(", ".join(patterns)) if patterns else "*")
    table.add_row("include_derived", str(config.include_derived))
    table.add_row("derived_patterns", escape(", ".join(config.derived_patterns)))
    table.add_row("max_workers", str(config.max_workers))
    for working_set in config.working_sets:
        kind = "aggregate" if working_set.aggregate else "working set"
        elements = ", ".join(working_set.elements) or "(empty)"
        table.add_row(escape(f"{kind} '{working_set.label}'"), escape(elements))
    console.print(table)

    source = config_path or get_config_path()
    if not source.exists():
        print_info(f"No config file at {source}; showing defaults.")


@app.command()
def init(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Configuration file to write."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing file."),
    ] = False,
) -> None:
    """Write a configuration file with default settings."""
    target = config_path or get_config_path()
    if target.exists() and not force:
        print_error(f"Config already exists: {target} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        written = save_config(ScopeConfig(), target)
    except ScopeConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default configuration to {written}")
