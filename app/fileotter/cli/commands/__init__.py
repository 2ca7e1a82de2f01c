"""CLI commands for fileotter.

This package contains all subcommand implementations.
"""

from fileotter.cli.commands import config, dirs, glob, ls, rm

__all__ = ["config", "dirs", "glob", "ls", "rm"]
