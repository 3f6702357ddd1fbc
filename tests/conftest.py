"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules, most notably
a builder for managed table layouts on the local filesystem.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from rofilter.models.table import METAFOLDER_NAME, PARTITION_METAFILE_NAME, TABLE_PROPERTIES_NAME


class TableBuilder:
    """Creates a managed table layout below a root directory.

    Example:
        >>> table = TableBuilder(tmp_path / "warehouse" / "db" / "trips")
        >>> table.commit("20240101000000")
        >>> table.partition("2024/01/01", depth=3)
        >>> table.data_file("2024/01/01", "fileA", "20240101000000")
    """

    def __init__(self, root: Path, name: str = "trips", **properties: str) -> None:
        self.root = root
        self.metafolder = root / METAFOLDER_NAME
        self.metafolder.mkdir(parents=True)
        lines = [f"hoodie.table.name={name}"]
        lines.extend(f"{key.replace('_', '.')}={value}" for key, value in properties.items())
        (self.metafolder / TABLE_PROPERTIES_NAME).write_text("\n".join(lines) + "\n")

    def commit(self, instant: str, action: str = "commit") -> None:
        """Record a completed commit (with its requested and inflight files)."""
        (self.metafolder / f"{instant}.{action}.requested").touch()
        (self.metafolder / f"{instant}.{action}.inflight").touch()
        (self.metafolder / f"{instant}.{action}").write_text("{}")

    def inflight(self, instant: str, action: str = "commit") -> None:
        """Record a commit that started but never completed."""
        (self.metafolder / f"{instant}.{action}.requested").touch()
        (self.metafolder / f"{instant}.{action}.inflight").touch()

    def partition(self, relative: str, depth: int | None = None) -> Path:
        """Create a partition directory, with a marker file if depth is given."""
        directory = self.root / relative
        directory.mkdir(parents=True, exist_ok=True)
        if depth is not None:
            (directory / PARTITION_METAFILE_NAME).write_text(
                f"#partition metadata\ncommitTime=20240101000000\npartitionDepth={depth}\n"
            )
        return directory

    def data_file(
        self,
        relative: str,
        file_id: str,
        instant: str,
        token: str = "1-0-1",
        ext: str = ".parquet",
    ) -> Path:
        """Write a base data file version for a file group."""
        directory = self.root / relative if relative else self.root
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{file_id}_{token}_{instant}{ext}"
        path.write_text("data")
        return path


@pytest.fixture
def table_factory() -> Iterator[type[TableBuilder]]:
    """Provide the TableBuilder class to tests."""
    yield TableBuilder


@pytest.fixture
def deep_dir(tmp_path: Path) -> Path:
    """A directory guaranteed to be more than three levels deep."""
    path = tmp_path / "lake" / "zone" / "area"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def partitioned_table(deep_dir: Path) -> TableBuilder:
    """A table with one partition holding two file groups.

    fileA has two committed versions and one in-flight version; fileB has
    one committed version.
    """
    table = TableBuilder(deep_dir / "trips")
    table.commit("20240101000000")
    table.commit("20240102000000")
    table.inflight("20240103000000")
    table.partition("americas", depth=1)
    table.data_file("americas", "fileA", "20240101000000")
    table.data_file("americas", "fileA", "20240102000000")
    table.data_file("americas", "fileA", "20240103000000")
    table.data_file("americas", "fileB", "20240101000000")
    return table


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """Undo handler and level changes made by CLI invocations."""
    logger = logging.getLogger("rofilter")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the XDG config directory at a temporary location.

    Returns:
        Path of the (not yet existing) default config file.
    """
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "rofilter" / "config.toml"
