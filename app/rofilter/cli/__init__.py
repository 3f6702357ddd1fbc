"""CLI package for rofilter.

This package contains the Typer application and all subcommands.
"""

from rofilter.cli.main import app

__all__ = ["app"]
