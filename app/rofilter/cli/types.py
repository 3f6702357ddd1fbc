"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from rofilter.core.config import FilterConfig, load_config_or_default
from rofilter.core.errors import ConfigError, MalformedInputError
from rofilter.models.path import TablePath
from rofilter.utils.formatting import print_error
from rofilter.utils.logging import configure_logging


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def get_config_path(ctx: typer.Context) -> Path | None:
    """Return the --config override stored by the main callback, if any."""
    obj = ctx.find_root().obj or {}
    return obj.get("config_path")


def get_config(ctx: typer.Context) -> FilterConfig:
    """Load the filter config and apply the effective log level.

    --verbose wins over --quiet, which wins over the configured level.

    Raises:
        typer.Exit: If the config file exists but is invalid.
    """
    obj = ctx.find_root().obj or {}
    try:
        config = load_config_or_default(obj.get("config_path"))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if obj.get("verbose"):
        configure_logging("DEBUG")
    elif obj.get("quiet"):
        configure_logging("ERROR")
    else:
        configure_logging(config.log_level)
    return config


def to_table_path(value: str) -> TablePath:
    """Convert a command line path to a TablePath.

    Local paths are made absolute; ``scheme://`` paths are kept as given.

    Raises:
        typer.Exit: If the value is not a usable path.
    """
    if "://" not in value:
        value = str(Path(value).expanduser().absolute())
    try:
        return TablePath.parse(value)
    except MalformedInputError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
