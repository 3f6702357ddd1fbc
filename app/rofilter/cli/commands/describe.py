"""Inspect command implementation.

Shows the table config and completed commits of a managed table root.
"""

from typing import Annotated

import typer
from rich.table import Table

from rofilter.cli.types import get_config, to_table_path
from rofilter.core.errors import FilesystemError, MalformedMetadataError
from rofilter.filesystem.client import get_filesystem
from rofilter.models.result import NotATable
from rofilter.table.reader import TableMetadataReader
from rofilter.utils.formatting import console, print_error, print_warning


def inspect_table(
    ctx: typer.Context,
    root: Annotated[
        str,
        typer.Argument(help="Table root directory."),
    ],
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            help="Show only the most recent N commits.",
        ),
    ] = None,
) -> None:
    """Show the config and completed commits of a managed table."""
    get_config(ctx)
    root_path = to_table_path(root)

    try:
        fs = get_filesystem(root_path)
        opened = TableMetadataReader(fs).open_as_table(root_path)
    except (FilesystemError, MalformedMetadataError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if isinstance(opened, NotATable):
        print_warning(f"{root_path} is not a managed table ({opened.reason}).")
        raise typer.Exit(code=1)

    console.print(f"[bold_header]Table:[/] {opened.config.name}")
    console.print(f"[muted]Root:[/] {opened.root}")
    console.print(f"[muted]Type:[/] {opened.config.table_type.value}")
    console.print(f"[muted]Base file format:[/] {opened.config.base_file_format.value}")

    completed = list(opened.completed_commits_view())
    completed_times = {i.timestamp for i in completed}
    pending = {
        i.timestamp
        for i in opened.timeline.commits_timeline()
        if i.timestamp not in completed_times
    }

    shown = completed[-limit:] if limit else completed
    table = Table(
        title="Completed Commits",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Instant", no_wrap=True)
    table.add_column("Action")
    for instant in reversed(shown):
        table.add_row(instant.timestamp, instant.action)
    console.print(table)

    console.print(
        f"\n[dim]{len(completed)} completed, {len(pending)} pending commit instants[/dim]"
    )
