"""Data models for rofilter.

This module exports the core data structures used throughout the application.
"""

from rofilter.models.path import TablePath, directory_key
from rofilter.models.result import (
    CacheLookup,
    CacheState,
    NotATable,
    Resolution,
    ResolutionKind,
)
from rofilter.models.table import (
    METAFOLDER_NAME,
    PARTITION_METAFILE_NAME,
    TABLE_PROPERTIES_NAME,
    BaseFileFormat,
    DataFile,
    Instant,
    InstantState,
    PartitionProbeResult,
    TableConfig,
    TableType,
)

__all__ = [
    "METAFOLDER_NAME",
    "PARTITION_METAFILE_NAME",
    "TABLE_PROPERTIES_NAME",
    "BaseFileFormat",
    "CacheLookup",
    "CacheState",
    "DataFile",
    "Instant",
    "InstantState",
    "NotATable",
    "PartitionProbeResult",
    "Resolution",
    "ResolutionKind",
    "TableConfig",
    "TablePath",
    "TableType",
    "directory_key",
]
