"""Unit tests for DirectoryScanner."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rofilter.core.errors import FilesystemError, MalformedMetadataError, PathFilterError
from rofilter.filter.classifier import PathClassifier
from rofilter.scan.walker import DirectoryScanner, ScanError, ScanReport


def _names(paths: list[str]) -> list[str]:
    return [Path(p).name for p in paths]


class TestScan:
    """Tests for scanning directory trees."""

    def test_scans_table_and_plain_files(self, partitioned_table, deep_dir: Path) -> None:
        """Managed files are filtered; plain files pass through."""
        (deep_dir / "notes.txt").write_text("x")

        report = DirectoryScanner(PathClassifier(), workers=4).scan(str(deep_dir))

        assert _names(report.accepted) == [
            "notes.txt",
            "fileA_1-0-1_20240102000000.parquet",
            "fileB_1-0-1_20240101000000.parquet",
        ]
        assert "fileA_1-0-1_20240101000000.parquet" in _names(report.rejected)
        assert "hoodie.properties" in _names(report.rejected)
        assert report.errors == []
        # area, trips, trips/.hoodie, trips/americas
        assert report.directories == 4
        assert report.total == len(report.accepted) + len(report.rejected)

    def test_results_sorted(self, partitioned_table) -> None:
        """Accepted and rejected lists come back sorted."""
        report = DirectoryScanner(PathClassifier(), workers=8).scan(str(partitioned_table.root))

        assert report.accepted == sorted(report.accepted)
        assert report.rejected == sorted(report.rejected)

    def test_single_worker_matches_parallel(self, partitioned_table) -> None:
        """Worker count does not change the outcome."""
        root = str(partitioned_table.root)

        single = DirectoryScanner(PathClassifier(), workers=1).scan(root)
        parallel = DirectoryScanner(PathClassifier(), workers=8).scan(root)

        assert single.accepted == parallel.accepted
        assert single.rejected == parallel.rejected

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty tree yields an empty report."""
        report = DirectoryScanner(PathClassifier()).scan(str(tmp_path))

        assert report == ScanReport(root=str(tmp_path), directories=1)

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        """A root that cannot be listed is an error."""
        with pytest.raises(FilesystemError):
            DirectoryScanner(PathClassifier()).scan(str(tmp_path / "missing"))

    def test_invalid_worker_count(self) -> None:
        """At least one worker is required."""
        with pytest.raises(ValueError, match="workers"):
            DirectoryScanner(PathClassifier(), workers=0)

    def test_symlink_cycle_not_followed(self, tmp_path: Path) -> None:
        """A link back to an ancestor directory is listed once and not descended."""
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "f.csv").write_text("x")
        (tmp_path / "a" / "loop").symlink_to(tmp_path, target_is_directory=True)

        report = DirectoryScanner(PathClassifier(), workers=2).scan(str(tmp_path))

        assert report.accepted == [str(tmp_path / "a" / "f.csv")]
        assert report.rejected == []
        assert report.directories == 2

    def test_symlinked_file_classified(self, tmp_path: Path) -> None:
        """Links to files are classified like the files they point to."""
        (tmp_path / "data.csv").write_text("x")
        (tmp_path / "alias.csv").symlink_to(tmp_path / "data.csv")

        report = DirectoryScanner(PathClassifier()).scan(str(tmp_path))

        assert _names(report.accepted) == ["alias.csv", "data.csv"]


class TestClassificationErrors:
    """Tests for errors raised by the classifier during a scan."""

    @pytest.fixture
    def failing_classifier(self) -> MagicMock:
        classifier = MagicMock(spec=PathClassifier)

        def accept(path) -> bool:
            if path.name == "bad.parquet":
                error = PathFilterError(str(path), str(path.parent))
                error.__cause__ = MalformedMetadataError("broken marker", path=str(path))
                raise error
            return True

        classifier.accept.side_effect = accept
        return classifier

    def test_fail_fast_raises(self, tmp_path: Path, failing_classifier: MagicMock) -> None:
        """The first classification error aborts the scan."""
        (tmp_path / "bad.parquet").write_text("")

        with pytest.raises(PathFilterError):
            DirectoryScanner(failing_classifier).scan(str(tmp_path))

    def test_errors_collected(self, tmp_path: Path, failing_classifier: MagicMock) -> None:
        """With fail_fast off, failing files are skipped and reported."""
        (tmp_path / "bad.parquet").write_text("")
        (tmp_path / "good.csv").write_text("")

        report = DirectoryScanner(failing_classifier, fail_fast=False).scan(str(tmp_path))

        assert _names(report.accepted) == ["good.csv"]
        assert len(report.errors) == 1
        error = report.errors[0]
        assert isinstance(error, ScanError)
        assert error.path == str(tmp_path / "bad.parquet")
        assert "broken marker" in error.message
        assert report.total == 2
