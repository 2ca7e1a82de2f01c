"""Remove command implementation.

Removes directories (recursively), files and symbolic links.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from fileotter.directory.operator import DirectoryOperator, RemovalResult
from fileotter.utils.formatting import console, print_info, print_success, print_warning


def remove_paths(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Paths to remove."),
    ],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Remove directories and files.

    Directories are removed with their contents; symbolic links are
    removed without touching their targets.
    """
    if not dry_run and not yes:
        confirmed = typer.confirm(
            f"Remove {len(paths)} path(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    operator = DirectoryOperator(dry_run=dry_run)
    results = operator.remove(paths)

    _print_removal_results(results)

    if any(not r.success for r in results):
        raise typer.Exit(code=1)


def _print_removal_results(results: list[RemovalResult]) -> None:
    """Display removal results."""
    table = Table(title="Removal Results", show_lines=False)
    table.add_column("Path", style="bold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")

    for r in results:
        if not r.success:
            status = "[error]failed[/]"
            detail = r.error or "Unknown error"
        elif r.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would remove"
        else:
            status = "[success]removed[/]"
            detail = ""
        table.add_row(escape(r.path), status, escape(detail))

    console.print(table)

    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if not r.success)
    dry_count = sum(1 for r in results if r.dry_run)

    if dry_count:
        print_info(f"Dry-run: {dry_count} path(s) would be removed.")
    if fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    elif not dry_count:
        print_success(f"All {success_count} path(s) removed.")
