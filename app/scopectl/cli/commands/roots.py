"""Roots command implementation.

Reduces a list of resource paths to the minimal root set a search
would start from.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from scopectl.cli.types import OutputFormat, load_settings, open_tree
from scopectl.core.scope import new_search_scope
from scopectl.providers.explicit import ExplicitRootProvider
from scopectl.utils.formatting import console, create_resource_table, print_info


def roots(
    paths: Annotated[
        list[str],
        typer.Argument(help="Resource paths relative to the workspace (e.g. /proj/src)."),
    ],
    base: Annotated[
        Path,
        typer.Option("--base", "-b", help="Workspace root directory."),
    ] = Path("."),
    include_derived: Annotated[
        bool | None,
        typer.Option(
            "--include-derived/--exclude-derived",
            help="Keep derived resources as roots (default from config).",
        ),
    ] = None,
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
    """Reduce paths to a minimal, non-overlapping root set.

    Nested paths are covered by their ancestors, duplicates collapse and
    derived resources are dropped unless --include-derived is given.

    Examples:
        scopectl roots /proj/src /proj/src/pkg /proj/lib
        scopectl roots /proj --base ~/workspace --format json
    """
    config = load_settings(config_path)
    tree = open_tree(base, config)
    derived = config.include_derived if include_derived is None else include_derived

    provider = ExplicitRootProvider(tree, paths)
    scope = new_search_scope(provider.candidates(), None, derived)
    root_set = scope.roots
    description = scope.description

    if output_format == OutputFormat.JSON:
        payload = {
            "description": description,
            "include_derived": derived,
            "roots": [str(root) for root in root_set],
        }
        console.print_json(json.dumps(payload))
        return

    if not root_set:
        print_info(f"No roots for {provider.label}: the scope is empty.")
        return

    table = create_resource_table(escape(f"Search Roots ({description})"))
    for index, root in enumerate(root_set, start=1):
        table.add_row(str(index), escape(str(root)))
    console.print(table)
