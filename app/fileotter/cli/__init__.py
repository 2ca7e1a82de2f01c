"""CLI package for fileotter.

This package contains the Typer application and all subcommands.
"""

from fileotter.cli.main import app

__all__ = ["app"]
