"""Config commands.

Shows the effective configuration and writes a default config file.
"""

import json
from typing import Annotated

import typer
from rich.table import Table

from rofilter.cli.types import OutputFormat, get_config, get_config_path
from rofilter.core.config import get_default_config, save_config
from rofilter.core.errors import ConfigError
from rofilter.core.paths import CONFIG_FILE_NAME, ensure_config_dir
from rofilter.core.paths import get_config_path as get_default_config_path
from rofilter.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the rofilter configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show(
    ctx: typer.Context,
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
    """Show the effective configuration."""
    config = get_config(ctx)
    source = get_config_path(ctx) or get_default_config_path()

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(config.model_dump()))
        return

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", no_wrap=True)
    table.add_column("Value")
    for key, value in config.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)

    if source.exists():
        console.print(f"[dim]Loaded from {source}[/dim]")
    else:
        console.print(f"[dim]{source} not found, showing defaults[/dim]")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default values."""
    target = get_config_path(ctx)
    if target is None:
        try:
            target = ensure_config_dir() / CONFIG_FILE_NAME
        except RuntimeError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    if target.exists() and not force:
        print_info(f"Config already exists: {target} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(get_default_config(), target, include_defaults=True)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
