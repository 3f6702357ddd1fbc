"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from rofilter import __version__
from rofilter.cli.commands import check, config, describe, scan

# Create main Typer app
app = typer.Typer(
    name="rofilter",
    help="Read-optimized path filter for versioned table layouts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rofilter version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log errors.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: ~/.config/rofilter/config.toml).",
        ),
    ] = None,
) -> None:
    """rofilter - show only the latest committed file versions of managed tables.

    Files of managed tables are filtered down to the latest committed
    version of each file group; every other file passes through.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="scan")(scan.scan_tree)
app.command(name="check")(check.check_paths)
app.command(name="inspect")(describe.inspect_table)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
