"""List command implementation.

Lists the immediate children of a directory.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from fileotter.directory.dir import Dir
from fileotter.utils.formatting import (
    console,
    create_path_table,
    format_path_row,
    print_error,
    print_info,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    PLAIN = "plain"


def list_children(
    path: Annotated[
        Path | None,
        typer.Argument(help="Directory to list (default: cwd)."),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include entries beginning with a dot."),
    ] = False,
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Print raw entry names, including . and .."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table, json, or plain.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List the immediate children of a directory."""
    directory = Dir(path if path is not None else Dir.current())

    if not Dir.exists(directory.path):
        print_error(f"Not a directory: {directory.path}")
        raise typer.Exit(code=1)

    try:
        if raw:
            names = Dir.entries(directory.path)
        else:
            names = [p.name for p in directory]
    except OSError as e:
        print_error(f"Cannot read {directory.path}: {e}")
        raise typer.Exit(code=1) from e

    if not show_all:
        names = [n for n in names if not n.startswith(".")]

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(names))
        return

    if output_format == OutputFormat.PLAIN:
        for name in names:
            typer.echo(name)
        return

    if not names:
        print_info(f"{directory.path} is empty.")
        return

    table = create_path_table(escape(str(directory.path)))
    for name in names:
        table.add_row(*format_path_row(Path(name), directory.path))
    console.print(table)
