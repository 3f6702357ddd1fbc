"""Latest-version resolution for one directory of a managed table."""

import logging

from rofilter.filesystem.client import FilesystemClient
from rofilter.models.path import TablePath
from rofilter.models.result import NotATable, Resolution
from rofilter.table.reader import TableMetadataReader

logger = logging.getLogger(__name__)


class LatestVersionResolver:
    """Computes the accepted files of a directory against a candidate root.

    Resolution runs once per directory: the listing and the timeline are
    read once and the result serves every file of that directory.

    Args:
        reader: Table metadata reader.
        fs: Filesystem client used to list the directory.
    """

    def __init__(self, reader: TableMetadataReader, fs: FilesystemClient) -> None:
        self._reader = reader
        self._fs = fs

    def resolve(self, root: TablePath, directory: TablePath) -> Resolution:
        """Resolve the latest file versions of ``directory``.

        Returns:
            ``Resolution.resolved`` with the accepted paths, or
            ``Resolution.not_a_table`` if ``root`` holds no table.

        Raises:
            FilesystemError: On I/O failures.
            MalformedMetadataError: If the table metadata is inconsistent.
        """
        opened = self._reader.open_as_table(root)
        if isinstance(opened, NotATable):
            return Resolution.not_a_table(opened)

        timeline = opened.completed_commits_view()
        listing = self._fs.list_directory(directory)
        accepted = opened.latest_files_among(timeline, listing)

        logger.info(
            "Based on table metadata from base path: %s, caching %d files under %s",
            root,
            len(accepted),
            directory,
        )
        return Resolution.resolved(root, accepted)
