"""Well-known directories command."""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from fileotter.core.paths import WELL_KNOWN_DIRS
from fileotter.directory.listing import exists
from fileotter.utils.formatting import console


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def show_dirs(
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
    """Show the home, current, caches, documents and library directories."""
    resolved = {name: getter() for name, getter in WELL_KNOWN_DIRS.items()}

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps({name: str(path) for name, path in resolved.items()}))
        return

    table = Table(
        title="Well-known Directories",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Name", style="bold")
    table.add_column("Path", no_wrap=True)
    table.add_column("Exists", width=8, justify="center")

    for name, path in resolved.items():
        marker = "[success]yes[/]" if exists(path) else "[muted]no[/]"
        table.add_row(name, escape(str(path)), marker)

    console.print(table)
