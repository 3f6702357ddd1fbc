"""CLI commands for rofilter.

This package contains all subcommand implementations.
"""

from rofilter.cli.commands import check, config, describe, scan

__all__ = ["check", "config", "describe", "scan"]
