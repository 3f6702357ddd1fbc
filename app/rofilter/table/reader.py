"""Table metadata reader.

Opens a candidate root directory as a managed table. A root without a
metadata folder is an expected outcome reported as ``NotATable``; a
metadata folder with a broken table config is a fatal inconsistency.
"""

import logging

from rofilter.core.errors import FilesystemError, MalformedMetadataError
from rofilter.filesystem.client import FilesystemClient
from rofilter.models.path import TablePath
from rofilter.models.result import NotATable
from rofilter.models.table import (
    METAFOLDER_NAME,
    TABLE_PROPERTIES_NAME,
    BaseFileFormat,
    DataFile,
    TableConfig,
    TableType,
)
from rofilter.table.properties import parse_properties
from rofilter.table.timeline import Timeline

logger = logging.getLogger(__name__)

TABLE_NAME_KEY = "hoodie.table.name"
TABLE_TYPE_KEY = "hoodie.table.type"
BASE_FILE_FORMAT_KEY = "hoodie.table.base.file.format"


class TableHandle:
    """Read-only view of a managed table opened at a root directory.

    Attributes:
        root: Table root directory.
        config: Table-level settings.
        timeline: Full timeline (all actions, all states).
    """

    def __init__(self, root: TablePath, config: TableConfig, timeline: Timeline) -> None:
        self.root = root
        self.config = config
        self.timeline = timeline

    @property
    def metafolder(self) -> TablePath:
        return self.root.child(METAFOLDER_NAME)

    def completed_commits_view(self) -> Timeline:
        """Commit timeline restricted to completed instants.

        In-flight, requested and failed commits never influence visibility.
        """
        return self.timeline.commits_timeline().filter_completed()

    def latest_files_among(
        self,
        timeline: Timeline,
        listing: list[TablePath],
    ) -> frozenset[TablePath]:
        """Select the latest committed base file per file group.

        Files whose name does not parse as a base file of this table's
        format, or whose writing instant is not on ``timeline``, are
        never selected.

        Args:
            timeline: Timeline of instants considered committed.
            listing: Entries of one directory.

        Returns:
            Paths of the latest version of each file group in the listing.
        """
        extension = self.config.base_file_format.extension
        latest: dict[str, DataFile] = {}

        for path in listing:
            data_file = DataFile.from_path(path)
            if data_file is None or data_file.extension != extension:
                continue
            if not timeline.contains(data_file.instant_time):
                continue
            current = latest.get(data_file.file_id)
            if current is None or data_file.instant_time > current.instant_time:
                latest[data_file.file_id] = data_file

        return frozenset(f.path for f in latest.values())

    def __repr__(self) -> str:
        return f"TableHandle(root={self.root}, name={self.config.name!r})"


class TableMetadataReader:
    """Opens candidate roots as managed tables.

    Args:
        fs: Filesystem client used for all reads.
    """

    def __init__(self, fs: FilesystemClient) -> None:
        self._fs = fs

    def open_as_table(self, root: TablePath) -> TableHandle | NotATable:
        """Open ``root`` as a managed table.

        Returns:
            A TableHandle, or NotATable if the root has no metadata folder.

        Raises:
            FilesystemError: If the metadata cannot be read.
            MalformedMetadataError: If the table config is missing or invalid.
        """
        metafolder = root.child(METAFOLDER_NAME)
        if not self._fs.is_directory(metafolder):
            return NotATable(root, reason=f"no {METAFOLDER_NAME} folder")

        config = self._read_config(metafolder)
        timeline = Timeline.from_listing(self._fs.list_directory(metafolder))
        logger.debug(
            "Opened table %r at %s with %d timeline instants",
            config.name,
            root,
            len(timeline),
        )
        return TableHandle(root, config, timeline)

    def _read_config(self, metafolder: TablePath) -> TableConfig:
        """Read and validate the table config inside a metadata folder."""
        props_path = metafolder.child(TABLE_PROPERTIES_NAME)
        try:
            text = self._fs.read_text(props_path)
        except FilesystemError as e:
            if e.kind != "not_found":
                raise
            msg = f"Metadata folder {metafolder} has no {TABLE_PROPERTIES_NAME}"
            raise MalformedMetadataError(msg, path=str(props_path)) from e

        props = parse_properties(text)
        name = props.get(TABLE_NAME_KEY)
        if not name:
            msg = f"{props_path} does not define {TABLE_NAME_KEY}"
            raise MalformedMetadataError(msg, path=str(props_path))

        try:
            table_type = TableType(props.get(TABLE_TYPE_KEY, TableType.COPY_ON_WRITE.value))
            base_format = BaseFileFormat(
                props.get(BASE_FILE_FORMAT_KEY, BaseFileFormat.PARQUET.value).upper()
            )
        except ValueError as e:
            msg = f"{props_path} has an invalid setting: {e}"
            raise MalformedMetadataError(msg, path=str(props_path)) from e

        return TableConfig(name=name, table_type=table_type, base_file_format=base_format)
