"""Filter configuration and settings.

Configuration is stored in ~/.config/rofilter/config.toml. Every key is
optional; absent keys take the model defaults.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rofilter.core.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from rofilter.core.paths import get_config_path

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class FilterConfig(BaseModel):
    """Configuration for the path classifier and the scanning host.

    Attributes:
        fallback_root_depth: Ancestor depth assumed between a data directory
            and its table root when no partition markers are present.
        scan_workers: Number of worker threads used by the directory scanner.
        log_level: Default log level for the CLI.
    """

    model_config = ConfigDict(extra="forbid")

    fallback_root_depth: Annotated[
        int,
        Field(ge=1, le=16, description="Ancestor depth of the table root without markers"),
    ] = 3
    scan_workers: Annotated[
        int,
        Field(ge=1, le=64, description="Worker threads for directory scans (1-64)"),
    ] = 8
    log_level: Annotated[
        LogLevel,
        Field(description="Default log level"),
    ] = "WARNING"


def get_default_config() -> FilterConfig:
    """Create a default FilterConfig."""
    return FilterConfig()


def load_config(path: Path | None = None) -> FilterConfig:
    """Load filter configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FilterConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return FilterConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> FilterConfig:
    """Load the config file, falling back to defaults when it is absent.

    Parse and validation errors still propagate.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return get_default_config()


def save_config(
    config: FilterConfig,
    path: Path | None = None,
    *,
    include_defaults: bool = False,
) -> Path:
    """Save filter configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The FilterConfig object to save.
        path: Path to save the config. If None, uses the default config path.
        include_defaults: Write every key, not only non-default values.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump() if include_defaults else _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: FilterConfig) -> dict[str, object]:
    """Convert FilterConfig to a dictionary for TOML serialization.

    Only non-default values are included to keep the file clean.
    """
    defaults = get_default_config()
    return {
        name: value
        for name, value in config.model_dump().items()
        if value != getattr(defaults, name)
    }
