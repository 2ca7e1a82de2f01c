"""Configuration commands.

Shows and edits the persisted defaults in config.toml.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from fileotter.core.config import ConfigError, load_config, save_config, set_config_value
from fileotter.core.paths import get_config_path
from fileotter.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Show and edit stored defaults.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(
        title=escape(f"Configuration ({get_config_path()})"),
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")

    for section, values in config.model_dump().items():
        for key, value in values.items():
            text = str(value).lower() if isinstance(value, bool) else escape(str(value))
            table.add_row(f"{section}.{key}", text)

    console.print(table)


@app.command("set")
def set_value(
    key: Annotated[str, typer.Argument(help="Dotted key, e.g. glob.include_hidden.")],
    value: Annotated[str, typer.Argument(help="New value.")],
) -> None:
    """Set a configuration value."""
    try:
        config = set_config_value(load_config(), key, value)
        path = save_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Set {key} = {value} in {path}")


@app.command()
def path() -> None:
    """Print the configuration file path."""
    typer.echo(str(get_config_path()))
