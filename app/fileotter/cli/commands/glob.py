"""Glob command implementation.

Matches shell-style glob patterns below a base directory.
"""

import json
from enum import Enum
from itertools import islice
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from fileotter.core.config import ConfigError, load_config
from fileotter.globbing.engine import Glob
from fileotter.globbing.errors import InvalidPatternError, TraversalWarning
from fileotter.globbing.options import GlobOptions
from fileotter.utils.formatting import (
    console,
    create_path_table,
    format_path_row,
    print_error,
    print_info,
    print_warning,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    PLAIN = "plain"


def glob_paths(
    patterns: Annotated[
        list[str],
        typer.Argument(help="One or more glob patterns; a path matching any of them is listed."),
    ],
    base: Annotated[
        Path | None,
        typer.Option(
            "--base",
            "-b",
            help="Directory relative patterns are matched against (default: cwd).",
        ),
    ] = None,
    ignore_case: Annotated[
        bool | None,
        typer.Option(
            "--ignore-case/--case-sensitive",
            "-i",
            help="Match names case-insensitively.",
        ),
    ] = None,
    hidden: Annotated[
        bool | None,
        typer.Option(
            "--hidden/--no-hidden",
            "-a",
            help="Let wildcards match names beginning with a dot.",
        ),
    ] = None,
    follow_symlinks: Annotated[
        bool | None,
        typer.Option(
            "--follow-symlinks/--no-follow-symlinks",
            "-L",
            help="Descend into symlinked directories.",
        ),
    ] = None,
    relative: Annotated[
        bool | None,
        typer.Option(
            "--relative/--absolute",
            "-r",
            help="Print paths relative to the base directory.",
        ),
    ] = None,
    unsorted: Annotated[
        bool | None,
        typer.Option(
            "--unsorted/--sorted",
            help="Keep discovery order instead of sorting.",
        ),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            min=1,
            help="Stop after this many matches.",
        ),
    ] = None,
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
    """List paths matching glob patterns.

    Supports *, ?, [...] classes and ** for any depth. Stored defaults
    from config.toml apply unless overridden by a flag.

    Examples:
        fileotter glob '*.txt'                  # Text files in cwd
        fileotter glob '**/*.py' -b src         # Python files below src/
        fileotter glob '*.txt' '*.md' -f plain  # Union of both patterns
        fileotter glob '**/x' --unsorted -n 1   # Stop at the first match
    """
    try:
        defaults = load_config().glob
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    options = _merge_options(
        defaults,
        ignore_case=ignore_case,
        hidden=hidden,
        follow_symlinks=follow_symlinks,
        relative=relative,
        unsorted=unsorted,
    )

    try:
        engine = Glob(patterns, base=base, options=options)
    except InvalidPatternError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if limit is not None and not options.sort:
        # Discovery order allows stopping the walk early
        matches = engine.iter_matches()
        paths = list(islice(matches, limit))
        matches.close()
        warnings: tuple[TraversalWarning, ...] = tuple(engine.warnings)
    else:
        result = engine.run()
        paths = result.paths[:limit] if limit else result.paths
        warnings = result.warnings

    for warning in warnings:
        print_warning(f"Skipped {warning.path}: {warning.reason}")

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([str(p) for p in paths]))
        return

    if output_format == OutputFormat.PLAIN:
        for path in paths:
            typer.echo(str(path))
        return

    if not paths:
        print_info("No matches.")
        return

    table = create_path_table(escape(f"Matches for {', '.join(patterns)}"))
    for path in paths:
        table.add_row(*format_path_row(path, engine.base))
    console.print(table)
    console.print(f"\n[dim]Found {len(paths)} match(es)[/dim]")


def _merge_options(
    defaults: GlobOptions,
    *,
    ignore_case: bool | None,
    hidden: bool | None,
    follow_symlinks: bool | None,
    relative: bool | None,
    unsorted: bool | None,
) -> GlobOptions:
    """Apply command-line overrides on top of stored defaults."""
    update: dict[str, bool] = {}
    if ignore_case is not None:
        update["case_sensitive"] = not ignore_case
    if hidden is not None:
        update["include_hidden"] = hidden
    if follow_symlinks is not None:
        update["follow_symlinks"] = follow_symlinks
    if relative is not None:
        update["relative"] = relative
    if unsorted is not None:
        update["sort"] = not unsorted
    return defaults.model_copy(update=update)

