"""Typer application for the ``fileotter`` command.

Global options control logging; each subcommand lives in
``fileotter.cli.commands``.
"""

import logging
from typing import Annotated

import typer

from fileotter import __version__
from fileotter.cli.commands import config, dirs, glob, ls, rm
from fileotter.core.log import setup_logging
from fileotter.utils.formatting import err_console

app = typer.Typer(
    name="fileotter",
    help="Directory helpers and shell-style globbing.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _show_version(flag: bool) -> None:
    if flag:
        typer.echo(f"fileotter version {__version__}")
        raise typer.Exit()


def _log_level(verbose: bool, quiet: bool) -> int:
    # --verbose wins when both flags are given
    if verbose:
        return logging.DEBUG
    return logging.ERROR if quiet else logging.WARNING


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", "-V", callback=_show_version, is_eager=True, help="Print the version."
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log errors.")] = False,
) -> None:
    """Match paths with *, ?, [...] and **, list directories, and remove trees."""
    ctx.obj = {"verbose": verbose, "quiet": quiet}
    setup_logging(_log_level(verbose, quiet), console=err_console)


app.command("glob")(glob.glob_paths)
app.command("ls")(ls.list_children)
app.command("rm")(rm.remove_paths)
app.command("dirs")(dirs.show_dirs)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
