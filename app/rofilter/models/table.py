"""Managed-table domain models.

This module defines the data structures read from a table's on-disk
metadata: timeline instants, base data files, the table config and the
result of probing a directory for partition markers.
"""

import re
from dataclasses import dataclass
from enum import Enum

from rofilter.models.path import TablePath

# Reserved metadata folder at the root of every managed table
METAFOLDER_NAME = ".hoodie"

# Per-partition marker file recording the depth below the table root
PARTITION_METAFILE_NAME = ".hoodie_partition_metadata"

# Table config file inside the metadata folder
TABLE_PROPERTIES_NAME = "hoodie.properties"


class InstantState(str, Enum):
    """Lifecycle state of a timeline instant.

    Attributes:
        REQUESTED: Action planned but not started.
        INFLIGHT: Action started but not finished (or failed midway).
        COMPLETED: Action committed successfully.
    """

    REQUESTED = "requested"
    INFLIGHT = "inflight"
    COMPLETED = "completed"


class TableType(str, Enum):
    """Storage layout of a managed table."""

    COPY_ON_WRITE = "COPY_ON_WRITE"
    MERGE_ON_READ = "MERGE_ON_READ"


class BaseFileFormat(str, Enum):
    """File format of a table's base (columnar) data files."""

    PARQUET = "PARQUET"
    ORC = "ORC"
    HFILE = "HFILE"

    @property
    def extension(self) -> str:
        return "." + self.value.lower()


# Actions that write data files
COMMIT_ACTIONS: frozenset[str] = frozenset({"commit", "deltacommit", "replacecommit"})

# All actions recognized on the timeline
KNOWN_ACTIONS: frozenset[str] = COMMIT_ACTIONS | {"clean", "rollback", "savepoint", "compaction"}

_INSTANT_RE = re.compile(r"^(?P<ts>\d+)\.(?P<action>[a-z]+)(?:\.(?P<state>requested|inflight))?$")

_DATA_FILE_RE = re.compile(
    r"^(?P<file_id>[^_]+)_(?P<write_token>[^_]+)_(?P<instant>\d+)(?P<ext>\.[A-Za-z0-9]+)$"
)


@dataclass(frozen=True, slots=True, order=True)
class Instant:
    """A single entry of the commit timeline.

    Ordered by timestamp first, so sorting a list of instants yields
    timeline order.

    Attributes:
        timestamp: Instant time, a fixed-width digit string (yyyyMMddHHmmss...).
        action: Timeline action (commit, deltacommit, clean, ...).
        state: Lifecycle state of the action.
    """

    timestamp: str
    action: str
    state: InstantState

    @property
    def is_completed(self) -> bool:
        return self.state == InstantState.COMPLETED

    @classmethod
    def from_file_name(cls, name: str) -> "Instant | None":
        """Parse a timeline file name, returning None for unrelated files.

        ``<ts>.commit`` is a completed commit, ``<ts>.commit.requested`` a
        requested one and the legacy ``<ts>.inflight`` an in-flight commit.
        """
        match = _INSTANT_RE.match(name)
        if match is None:
            return None
        action = match.group("action")
        state = match.group("state")
        if action == "inflight" and state is None:
            return cls(match.group("ts"), "commit", InstantState.INFLIGHT)
        if action not in KNOWN_ACTIONS:
            return None
        if state is None:
            # compaction only ever appears as requested/inflight; it completes as a commit
            if action == "compaction":
                return None
            return cls(match.group("ts"), action, InstantState.COMPLETED)
        return cls(match.group("ts"), action, InstantState(state))


@dataclass(frozen=True, slots=True)
class DataFile:
    """A base data file written by a commit.

    File names follow ``<fileId>_<writeToken>_<instantTime>.<ext>``; all
    versions of one logical record group share the file id.

    Attributes:
        path: Absolute path of the file.
        file_id: Logical file group identifier.
        write_token: Writer attempt token.
        instant_time: Timestamp of the commit that wrote this version.
        extension: File extension including the dot.
    """

    path: TablePath
    file_id: str
    write_token: str
    instant_time: str
    extension: str

    @classmethod
    def from_path(cls, path: TablePath) -> "DataFile | None":
        """Parse a data file path, returning None if the name does not match."""
        match = _DATA_FILE_RE.match(path.name)
        if match is None:
            return None
        return cls(
            path=path,
            file_id=match.group("file_id"),
            write_token=match.group("write_token"),
            instant_time=match.group("instant"),
            extension=match.group("ext"),
        )


@dataclass(frozen=True, slots=True)
class TableConfig:
    """Table-level settings read from ``hoodie.properties``.

    Attributes:
        name: Table name.
        table_type: Storage layout.
        base_file_format: Format of base data files.
    """

    name: str
    table_type: TableType = TableType.COPY_ON_WRITE
    base_file_format: BaseFileFormat = BaseFileFormat.PARQUET


@dataclass(frozen=True, slots=True)
class PartitionProbeResult:
    """Outcome of probing a directory for partition markers.

    Attributes:
        depth: Number of ancestor levels between the directory and the
            table root, or None if the directory carries no markers.
    """

    depth: int | None = None

    @property
    def has_markers(self) -> bool:
        return self.depth is not None
