"""Unit tests for managed-table domain models."""

import pytest
from rofilter.models.path import TablePath
from rofilter.models.result import CacheLookup, CacheState, NotATable, Resolution, ResolutionKind
from rofilter.models.table import (
    BaseFileFormat,
    DataFile,
    Instant,
    InstantState,
    PartitionProbeResult,
)


class TestInstantFromFileName:
    """Tests for timeline file name parsing."""

    @pytest.mark.parametrize(
        ("name", "action", "state"),
        [
            ("20240101000000.commit", "commit", InstantState.COMPLETED),
            ("20240101000000.commit.requested", "commit", InstantState.REQUESTED),
            ("20240101000000.commit.inflight", "commit", InstantState.INFLIGHT),
            ("20240101000000.inflight", "commit", InstantState.INFLIGHT),
            ("20240101000000.deltacommit", "deltacommit", InstantState.COMPLETED),
            ("20240101000000.clean.inflight", "clean", InstantState.INFLIGHT),
            ("20240101000000.compaction.requested", "compaction", InstantState.REQUESTED),
        ],
    )
    def test_parses_timeline_files(self, name: str, action: str, state: InstantState) -> None:
        """Timeline file names map to (timestamp, action, state)."""
        instant = Instant.from_file_name(name)

        assert instant is not None
        assert instant.timestamp == "20240101000000"
        assert instant.action == action
        assert instant.state == state

    @pytest.mark.parametrize(
        "name",
        ["hoodie.properties", ".aux", "20240101000000.unknown", "abc.commit", "20240101.compaction"],
    )
    def test_ignores_other_files(self, name: str) -> None:
        """Non-timeline files are not instants."""
        assert Instant.from_file_name(name) is None

    def test_instants_order_by_timestamp(self) -> None:
        """Sorting instants yields timeline order."""
        later = Instant("20240102000000", "clean", InstantState.COMPLETED)
        earlier = Instant("20240101000000", "commit", InstantState.COMPLETED)

        assert sorted([later, earlier]) == [earlier, later]


class TestDataFileFromPath:
    """Tests for base data file name parsing."""

    def test_parses_base_file_name(self) -> None:
        """fileId, write token, instant and extension are extracted."""
        path = TablePath.parse("/t/p/abc-123_1-0-1_20240101000000.parquet")
        data_file = DataFile.from_path(path)

        assert data_file is not None
        assert data_file.path == path
        assert data_file.file_id == "abc-123"
        assert data_file.write_token == "1-0-1"
        assert data_file.instant_time == "20240101000000"
        assert data_file.extension == ".parquet"

    @pytest.mark.parametrize(
        "name",
        [".hoodie_partition_metadata", "plain.csv", "a_b.parquet", "a_b_notatime.parquet"],
    )
    def test_rejects_other_names(self, name: str) -> None:
        """Names that do not follow the base file pattern are not data files."""
        assert DataFile.from_path(TablePath.parse(f"/t/{name}")) is None


class TestSmallModels:
    """Tests for probe results, file formats and tagged results."""

    def test_probe_result_markers(self) -> None:
        """has_markers reflects whether a depth was found."""
        assert not PartitionProbeResult().has_markers
        assert PartitionProbeResult(depth=0).has_markers

    def test_base_file_extension(self) -> None:
        """Formats map to lowercase extensions."""
        assert BaseFileFormat.PARQUET.extension == ".parquet"
        assert BaseFileFormat.ORC.extension == ".orc"

    def test_cache_lookup_constructors(self) -> None:
        """CacheLookup helpers set the state and accepted set."""
        accepted = frozenset({TablePath.parse("/a/f")})

        assert CacheLookup.miss().state == CacheState.MISS
        assert CacheLookup.unmanaged().accepted is None
        assert CacheLookup.managed(accepted).accepted == accepted

    def test_resolution_variants(self) -> None:
        """Resolutions distinguish resolved tables from non-tables."""
        root = TablePath.parse("/t")

        resolved = Resolution.resolved(root, frozenset())
        not_table = Resolution.not_a_table(NotATable(root, reason="missing"))

        assert resolved.is_table
        assert not not_table.is_table
        assert not_table.kind == ResolutionKind.NOT_A_TABLE
        assert not_table.reason == "missing"
