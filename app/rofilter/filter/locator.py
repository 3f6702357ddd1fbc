"""Table root discovery.

There is no registry of managed tables. The root of a candidate table is
guessed from the directory layout, then confirmed or refuted by the
metadata reader.
"""

import logging

from rofilter.core.errors import MalformedMetadataError
from rofilter.models.path import TablePath
from rofilter.table.partition import PartitionMetadataProbe

logger = logging.getLogger(__name__)

# Unpartitioned or unknown tables keep their data files this many levels below the root
DEFAULT_FALLBACK_DEPTH = 3


class TableRootLocator:
    """Derives a candidate table root for a data directory.

    With partition markers, the root is the ancestor at the recorded depth.
    Without markers, the root is assumed to sit ``fallback_depth`` levels up.

    Args:
        probe: Partition marker probe.
        fallback_depth: Ancestor depth used when no markers are present.
    """

    def __init__(
        self,
        probe: PartitionMetadataProbe,
        *,
        fallback_depth: int = DEFAULT_FALLBACK_DEPTH,
    ) -> None:
        self._probe = probe
        self._fallback_depth = fallback_depth

    def locate(self, directory: TablePath) -> TablePath | None:
        """Return the candidate root for ``directory``, or None.

        None means the directory is too shallow to belong to a table.

        Raises:
            MalformedMetadataError: If the marker depth points above the
                filesystem root.
            FilesystemError: If the markers cannot be read.
        """
        result = self._probe.probe(directory)

        if result.depth is not None:
            root = directory.ancestor(result.depth)
            if root is None:
                msg = (
                    f"Partition depth {result.depth} of {directory} "
                    "points above the filesystem root"
                )
                raise MalformedMetadataError(msg, path=str(directory))
            return root

        root = directory.ancestor(self._fallback_depth)
        if root is None:
            logger.debug(
                "%s is less than %d levels deep, cannot be in a table",
                directory,
                self._fallback_depth,
            )
        return root
