"""Walk command implementation.

Builds a search scope and lists every member file of the workspace.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from scopectl.cli.types import OutputFormat, is_quiet, load_settings, open_tree
from scopectl.core.config import ScopeConfig
from scopectl.core.patterns import PatternSyntaxError
from scopectl.core.scope import (
    SearchScope,
    new_search_scope,
    new_working_set_scope,
    new_workspace_scope,
)
from scopectl.filesystem.tree import FilesystemTree
from scopectl.filesystem.walker import ScopeWalker, WalkResult
from scopectl.models.resource import ResourcePath
from scopectl.providers.explicit import ExplicitRootProvider
from scopectl.providers.working_sets import WorkingSetProvider
from scopectl.utils.formatting import (
    console,
    create_resource_table,
    print_error,
    print_success,
    print_warning,
)


def walk(
    ctx: typer.Context,
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Root paths relative to the workspace. Defaults to the workspace."),
    ] = None,
    base: Annotated[
        Path,
        typer.Option("--base", "-b", help="Workspace root directory."),
    ] = Path("."),
    patterns: Annotated[
        list[str] | None,
        typer.Option(
            "--pattern",
            "-p",
            help="File name pattern; prefix with '!' to exclude. Repeatable.",
        ),
    ] = None,
    include_derived: Annotated[
        bool | None,
        typer.Option(
            "--include-derived/--exclude-derived",
            help="Include derived resources (default from config).",
        ),
    ] = None,
    working_sets: Annotated[
        list[str] | None,
        typer.Option(
            "--working-set",
            "-w",
            help="Configured working set label to search. Repeatable.",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option("--workers", min=1, max=64, help="Walker threads (default from config)."),
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
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=1, help="Limit number of files displayed."),
    ] = None,
) -> None:
    """List the files a search with this scope would visit.

    Roots come from PATHS, from --working-set, or default to the whole
    workspace. Patterns and the derived policy default to the config.

    Examples:
        scopectl walk                                  # Whole workspace
        scopectl walk /proj/src -p '*.py' -p '!test_*'
        scopectl walk --working-set core --format json
    """
    config = load_settings(config_path)
    tree = open_tree(base, config)

    scope = _build_scope(
        config,
        tree,
        paths=paths or [],
        working_sets=working_sets or [],
        patterns=patterns if patterns else config.file_name_patterns,
        include_derived=config.include_derived if include_derived is None else include_derived,
    )

    result = ScopeWalker(scope, tree, max_workers=workers or config.max_workers).walk()

    display = result.files[:limit] if limit else result.files

    if output_format == OutputFormat.JSON:
        _print_json(scope, result, display)
        return

    if not result.files:
        print_success(f"No files in scope {scope.description}.")
        return

    table = create_resource_table(
        escape(f"Files in {scope.description} ({scope.filter_description})")
    )
    for index, path in enumerate(display, start=1):
        label = escape(str(path))
        if tree.is_derived(path):
            label = f"[derived]{label}[/]"
        table.add_row(str(index), label)
    console.print(table)

    if not is_quiet(ctx):
        console.print(
            f"\n[dim]{len(result.files)} file(s) in scope, "
            f"{result.visited} resource(s) visited[/dim]"
        )
        if limit and len(display) < len(result.files):
            console.print(
                f"[dim](showing {len(display)} of {len(result.files)}, limited to {limit})[/dim]"
            )
        if result.unreadable:
            print_warning(f"{len(result.unreadable)} container(s) could not be read")


def _build_scope(
    config: ScopeConfig,
    tree: FilesystemTree,
    *,
    paths: list[str],
    working_sets: list[str],
    patterns: list[str] | None,
    include_derived: bool,
) -> SearchScope:
    """Create the scope for the selected roots, exiting on invalid input."""
    try:
        if working_sets:
            provider = WorkingSetProvider(tree, config.get_working_sets(working_sets))
            return new_working_set_scope(provider, patterns, include_derived)
        if paths:
            candidates = ExplicitRootProvider(tree, paths).candidates()
            return new_search_scope(candidates, patterns, include_derived)
        return new_workspace_scope(patterns, include_derived)
    except KeyError as e:
        print_error(str(e.args[0]))
        raise typer.Exit(code=1) from e
    except PatternSyntaxError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _print_json(scope: SearchScope, result: WalkResult, files: tuple[ResourcePath, ...]) -> None:
    """Display the walk result as JSON."""
    data = {
        "scope": scope.description,
        "filter": scope.filter_description,
        "include_derived": scope.include_derived,
        "roots": [str(root) for root in scope.roots],
        "files": [str(path) for path in files],
        "total_files": len(result.files),
        "visited": result.visited,
        "missing_roots": [str(root) for root in result.missing_roots],
        "unreadable": [str(path) for path in result.unreadable],
        "cancelled": result.cancelled,
    }
    console.print_json(json.dumps(data))
