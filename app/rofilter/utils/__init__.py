"""Utility modules for rofilter.

This module exports commonly used utility functions.
"""

from rofilter.utils.formatting import (
    console,
    create_paths_table,
    err_console,
    format_decision,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from rofilter.utils.logging import configure_logging

__all__ = [
    "configure_logging",
    "console",
    "create_paths_table",
    "err_console",
    "format_decision",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
