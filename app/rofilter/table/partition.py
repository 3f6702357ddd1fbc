"""Partition marker probing.

Every partition directory of a managed table carries a small properties
file recording the commit that created it and how many directory levels
separate it from the table root.
"""

import logging

from rofilter.core.errors import MalformedMetadataError
from rofilter.filesystem.client import FilesystemClient
from rofilter.models.path import TablePath
from rofilter.models.table import PARTITION_METAFILE_NAME, PartitionProbeResult
from rofilter.table.properties import parse_properties

logger = logging.getLogger(__name__)

PARTITION_DEPTH_KEY = "partitionDepth"


class PartitionMetadataProbe:
    """Reads partition markers through a filesystem client.

    Args:
        fs: Filesystem client used for all reads.
    """

    def __init__(self, fs: FilesystemClient) -> None:
        self._fs = fs

    def has_markers(self, directory: TablePath) -> bool:
        """Check whether a directory carries a partition marker file."""
        return self._fs.is_file(directory.child(PARTITION_METAFILE_NAME))

    def read_depth(self, directory: TablePath) -> int:
        """Read the partition depth recorded in a directory's marker file.

        Raises:
            FilesystemError: If the marker file cannot be read.
            MalformedMetadataError: If the depth is missing, not an integer
                or negative.
        """
        marker = directory.child(PARTITION_METAFILE_NAME)
        props = parse_properties(self._fs.read_text(marker))

        raw = props.get(PARTITION_DEPTH_KEY)
        if raw is None:
            msg = f"Partition marker {marker} has no {PARTITION_DEPTH_KEY}"
            raise MalformedMetadataError(msg, path=str(marker))
        try:
            depth = int(raw)
        except ValueError:
            msg = f"Partition marker {marker} has non-integer depth {raw!r}"
            raise MalformedMetadataError(msg, path=str(marker)) from None
        if depth < 0:
            msg = f"Partition marker {marker} has negative depth {depth}"
            raise MalformedMetadataError(msg, path=str(marker))
        return depth

    def probe(self, directory: TablePath) -> PartitionProbeResult:
        """Probe a directory, returning its depth when markers are present."""
        if not self.has_markers(directory):
            return PartitionProbeResult()
        depth = self.read_depth(directory)
        logger.debug("Partition %s reports depth %d", directory, depth)
        return PartitionProbeResult(depth=depth)
