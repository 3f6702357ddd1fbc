"""Check command implementation.

Classifies individual file paths with a single classifier, so files of
one directory share the cached decision.
"""

import json
from typing import Annotated

import typer

from rofilter.cli.types import OutputFormat, get_config, to_table_path
from rofilter.core.errors import PathFilterError
from rofilter.filter.classifier import PathClassifier
from rofilter.utils.formatting import console, create_paths_table, format_decision, print_error


def check_paths(
    ctx: typer.Context,
    paths: Annotated[
        list[str],
        typer.Argument(help="File paths to classify."),
    ],
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
    """Report whether each path is visible through the filter.

    Exits with code 1 if any path cannot be classified.
    """
    config = get_config(ctx)
    classifier = PathClassifier(config)

    decisions: list[tuple[str, bool]] = []
    for raw in paths:
        path = to_table_path(raw)
        try:
            decisions.append((str(path), classifier.accept(path)))
        except PathFilterError as e:
            print_error(f"{e} ({e.__cause__})")
            raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        data = [{"path": path, "accepted": accepted} for path, accepted in decisions]
        console.print_json(json.dumps(data))
        return

    table = create_paths_table("Path Decisions")
    for path, accepted in decisions:
        table.add_row(format_decision(accepted), path)
    console.print(table)
