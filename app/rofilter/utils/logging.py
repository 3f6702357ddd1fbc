"""Logging setup for the rofilter CLI.

Library modules only create loggers; handlers are installed here, once,
by the command line entry point.
"""

import logging

from rich.logging import RichHandler

from rofilter.utils.formatting import err_console

# Mapping of level names accepted by the config file and CLI
_LEVEL_MAP: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

LOGGER_NAME = "rofilter"


def resolve_level(name: str) -> int:
    """Convert a level name to a logging constant (WARNING if unknown)."""
    return _LEVEL_MAP.get(name.upper(), logging.WARNING)


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Install a Rich handler on the package logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.

    Args:
        level: Level name or logging constant.

    Returns:
        The configured package logger.
    """
    numeric = resolve_level(level) if isinstance(level, str) else level

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_path=False,
        rich_tracebacks=False,
        log_time_format="%H:%M:%S",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(numeric)
    logger.propagate = False
    return logger
