"""Config file locations for rofilter.

Follows the XDG base directory layout: the config file lives in
$XDG_CONFIG_HOME/rofilter/, falling back to ~/.config/rofilter/.
"""

import os
from pathlib import Path

APP_NAME = "rofilter"

CONFIG_FILE_NAME = "config.toml"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Resolve an XDG base directory for rofilter.

    Args:
        env_var: Name of the XDG variable to consult, e.g. "XDG_CONFIG_HOME".
        default_subdir: Home-relative fallback used when the variable is
            unset or empty, e.g. ".config".

    Returns:
        The rofilter subdirectory of the resolved base.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Directory holding the rofilter config file."""
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Default location of the config file (``<config dir>/config.toml``)."""
    return get_config_dir() / CONFIG_FILE_NAME


def ensure_config_dir() -> Path:
    """Create the config directory when missing.

    Returns:
        The config directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    config_dir = get_config_dir()
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        raise RuntimeError(f"Cannot create config directory {config_dir}: Permission denied") from e
    except OSError as e:
        raise RuntimeError(f"Cannot create config directory {config_dir}: {e}") from e
    return config_dir
