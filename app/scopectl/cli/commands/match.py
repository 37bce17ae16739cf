"""Match command implementation.

Shows how a set of file name patterns decides individual file names.
"""

import json
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from scopectl.cli.types import OutputFormat
from scopectl.core.patterns import IS_CASE_SENSITIVE_FILESYSTEM, PatternSyntaxError
from scopectl.core.scope import SearchScope, new_workspace_scope
from scopectl.utils.formatting import console, format_decision, print_error


def match(
    names: Annotated[
        list[str],
        typer.Argument(help="File names to test."),
    ],
    patterns: Annotated[
        list[str] | None,
        typer.Option(
            "--pattern",
            "-p",
            help="File name pattern; prefix with '!' to exclude. Repeatable.",
        ),
    ] = None,
    case_sensitive: Annotated[
        bool | None,
        typer.Option(
            "--case-sensitive/--ignore-case",
            help="Override the host filesystem case sensitivity.",
        ),
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
    """Test file names against inclusion and exclusion patterns.

    Examples:
        scopectl match Foo.java TestFoo.java -p '*.java' -p '!Test*.java'
        scopectl match README.md --format json
    """
    if case_sensitive is None:
        case_sensitive = IS_CASE_SENSITIVE_FILESYSTEM
    try:
        scope = new_workspace_scope(patterns, include_derived=True, case_sensitive=case_sensitive)
    except PatternSyntaxError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    decisions = [(name, scope.matches_file_name(name)) for name in names]

    if output_format == OutputFormat.JSON:
        data = [{"name": name, "included": included} for name, included in decisions]
        console.print_json(json.dumps(data))
        return

    _print_table(scope, decisions)


def _print_table(scope: SearchScope, decisions: list[tuple[str, bool]]) -> None:
    """Display decisions as a Rich table."""
    table = Table(
        title=escape(f"File Name Matches ({scope.filter_description})"),
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Name", style="path")
    table.add_column("Decision", width=10)
    for name, included in decisions:
        table.add_row(escape(name), format_decision(included))
    console.print(table)
