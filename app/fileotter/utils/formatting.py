"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fileotter.core.config import load_theme_colors
from fileotter.core.theme import get_rich_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
_theme = get_rich_theme(load_theme_colors())
console = Console(theme=_theme, color_system=_detect_color_system())
err_console = Console(theme=_theme, stderr=True, color_system=_detect_color_system())


def entry_style(path: Path) -> str:
    """Pick the theme style for a filesystem entry."""
    try:
        if path.is_symlink():
            return "symlink"
        if path.is_dir():
            return "directory"
    except OSError:
        return "muted"
    return "file"


def create_path_table(title: str) -> Table:
    """Create a pre-configured table for displaying paths.

    Args:
        title: Table title.

    Returns:
        Rich Table with Path and Type columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Type", width=10, style="muted")
    return table


def format_path_row(path: Path, base: Path | None = None) -> tuple[str, str]:
    """Format a path as a styled (path, type) table row.

    Args:
        path: Path to display.
        base: Directory a relative ``path`` is relative to, used to
            determine the entry type. Defaults to the working directory.

    Returns:
        Tuple of (styled path, type name).
    """
    target = base / path if base is not None and not path.is_absolute() else path
    style = entry_style(target)
    return f"[{style}]{escape(str(path))}[/]", style


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
