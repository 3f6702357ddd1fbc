"""Scan command implementation.

Walks a directory tree and lists the files visible through the filter.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from rofilter.cli.types import OutputFormat, get_config, to_table_path
from rofilter.core.errors import FilesystemError, PathFilterError
from rofilter.filter.classifier import FilterStats, PathClassifier
from rofilter.scan.walker import DirectoryScanner, ScanReport
from rofilter.utils.formatting import (
    console,
    create_paths_table,
    format_decision,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def scan_tree(
    ctx: typer.Context,
    root: Annotated[
        str,
        typer.Argument(help="Directory to scan (local path or scheme://authority/path)."),
    ],
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-w",
            min=1,
            max=64,
            help="Worker threads (default: scan_workers from config).",
        ),
    ] = None,
    show_rejected: Annotated[
        bool,
        typer.Option("--show-rejected", "-r", help="Also list filtered-out files."),
    ] = False,
    skip_errors: Annotated[
        bool,
        typer.Option(
            "--skip-errors",
            help="Skip files that cannot be classified instead of aborting.",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export results to JSON file.",
        ),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            help="Limit number of files to display.",
        ),
    ] = None,
) -> None:
    """Scan a directory tree and list the files visible to queries.

    Examples:
        rofilter scan /data/warehouse              # Visible files as a table
        rofilter scan /data/warehouse -r           # Include filtered-out files
        rofilter scan /data/warehouse -f json      # Output as JSON
        rofilter scan /data/warehouse -w 16        # Use 16 worker threads
    """
    config = get_config(ctx)
    root_path = to_table_path(root)

    classifier = PathClassifier(config)
    scanner = DirectoryScanner(
        classifier,
        workers=workers or config.scan_workers,
        fail_fast=not skip_errors,
    )

    try:
        report = scanner.scan(root_path)
    except PathFilterError as e:
        print_error(f"{e} ({e.__cause__})")
        raise typer.Exit(code=1) from e
    except FilesystemError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    stats = classifier.stats

    if export_path is not None:
        _export_report(report, stats, export_path)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(_report_to_dict(report, stats, show_rejected, limit)))
    else:
        _print_table(report, show_rejected, limit)
        _print_summary(report, stats)

    if report.errors:
        for error in report.errors:
            print_warning(f"Skipped {error.path}: {error.message}")
        raise typer.Exit(code=1)


# === Private helper functions ===


def _rows(report: ScanReport, show_rejected: bool) -> list[tuple[str, bool]]:
    """Build (path, accepted) rows in path order."""
    rows = [(p, True) for p in report.accepted]
    if show_rejected:
        rows.extend((p, False) for p in report.rejected)
    rows.sort()
    return rows


def _print_table(report: ScanReport, show_rejected: bool, limit: int | None) -> None:
    """Display classified files as a Rich table."""
    rows = _rows(report, show_rejected)
    if not rows:
        print_info(f"No visible files under {report.root}.")
        return

    display = rows[:limit] if limit else rows
    table = create_paths_table("Visible Files" if not show_rejected else "Classified Files")
    for path, accepted in display:
        table.add_row(format_decision(accepted), path)
    console.print(table)

    if limit and len(display) < len(rows):
        console.print(f"[dim](showing {len(display)} of {len(rows)}, limited to {limit})[/dim]")


def _print_summary(report: ScanReport, stats: FilterStats) -> None:
    """Print scan totals and cache effectiveness."""
    print_success(
        f"{len(report.accepted)} visible, {len(report.rejected)} filtered "
        f"in {report.directories} directories"
    )
    console.print(
        f"[dim]{stats.resolutions} metadata reads, {stats.cache_hits} cache hits[/dim]"
    )


def _report_to_dict(
    report: ScanReport,
    stats: FilterStats,
    show_rejected: bool = True,
    limit: int | None = None,
) -> dict[str, object]:
    """Convert a scan report to a JSON-serializable dictionary."""
    accepted = report.accepted[:limit] if limit else report.accepted
    data: dict[str, object] = {
        "root": report.root,
        "directories": report.directories,
        "accepted": accepted,
        "errors": [{"path": e.path, "message": e.message} for e in report.errors],
        "stats": {
            "calls": stats.calls,
            "cache_hits": stats.cache_hits,
            "resolutions": stats.resolutions,
            "accepted": stats.accepted,
            "rejected": stats.rejected,
        },
    }
    if show_rejected:
        data["rejected"] = report.rejected[:limit] if limit else report.rejected
    return data


def _export_report(report: ScanReport, stats: FilterStats, export_path: Path) -> None:
    """Export the full scan report to a JSON file."""
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(_report_to_dict(report, stats), indent=2))
        print_info(f"Results exported to {export_path}")
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e
