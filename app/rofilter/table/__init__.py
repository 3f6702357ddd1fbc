"""Managed table metadata module.

This module provides read-only access to the on-disk metadata of managed
tables: partition markers, the commit timeline and the table config.
"""

from rofilter.table.partition import PartitionMetadataProbe
from rofilter.table.properties import parse_properties
from rofilter.table.reader import TableHandle, TableMetadataReader
from rofilter.table.timeline import Timeline

__all__ = [
    "PartitionMetadataProbe",
    "TableHandle",
    "TableMetadataReader",
    "Timeline",
    "parse_properties",
]
