"""Unit tests for the TablePath value type."""

import pytest
from rofilter.core.errors import MalformedInputError
from rofilter.models.path import TablePath, directory_key


class TestNormalization:
    """Tests for path normalization and identity."""

    @pytest.mark.parametrize(
        "raw",
        ["/a/b/c", "/a/b/c/", "//a//b/c", "/a/./b/c", "/a/b/x/../c"],
    )
    def test_equivalent_spellings_share_one_key(self, raw: str) -> None:
        """Semantically equal paths produce identical keys."""
        assert str(TablePath.parse(raw)) == "/a/b/c"
        assert TablePath.parse(raw) == TablePath.parse("/a/b/c")
        assert hash(TablePath.parse(raw)) == hash(TablePath.parse("/a/b/c"))

    def test_relative_path_rejected(self) -> None:
        """Relative paths are malformed input."""
        with pytest.raises(MalformedInputError):
            TablePath.parse("a/b")

    def test_empty_path_rejected(self) -> None:
        """Empty strings are malformed input."""
        with pytest.raises(MalformedInputError):
            TablePath.parse("")

    def test_scheme_and_authority_kept(self) -> None:
        """Distributed filesystem URIs keep their scheme and authority."""
        path = TablePath.parse("hdfs://nn:8020/warehouse//t/")

        assert path.scheme == "hdfs"
        assert path.authority == "nn:8020"
        assert str(path) == "hdfs://nn:8020/warehouse/t"

    def test_scheme_is_part_of_identity(self) -> None:
        """Same path on different filesystems is a different location."""
        assert TablePath.parse("hdfs://nn/a") != TablePath.parse("/a")

    def test_parse_returns_existing_instance(self) -> None:
        """Parsing a TablePath returns it unchanged."""
        path = TablePath.parse("/a")
        assert TablePath.parse(path) is path

    def test_directory_key_is_string_form(self) -> None:
        """directory_key returns the normalized string."""
        assert directory_key(TablePath.parse("/a/b/")) == "/a/b"


class TestNavigation:
    """Tests for parent, ancestor and child navigation."""

    def test_segments_and_name(self) -> None:
        """Segments exclude empty parts; name is the last segment."""
        path = TablePath.parse("/d/p1/file.parquet")

        assert path.segments == ("d", "p1", "file.parquet")
        assert path.name == "file.parquet"

    def test_parent(self) -> None:
        """parent drops the last segment."""
        assert TablePath.parse("/a/b").parent == TablePath.parse("/a")
        assert TablePath.parse("/a").parent == TablePath.parse("/")

    def test_root_has_no_parent(self) -> None:
        """The filesystem root has no parent."""
        root = TablePath.parse("/")

        assert root.is_root
        assert root.parent is None
        assert root.name == ""

    def test_parent_keeps_scheme(self) -> None:
        """Navigation stays on the same filesystem."""
        assert str(TablePath.parse("s3://bucket/a/b").parent) == "s3://bucket/a"

    def test_ancestor_zero_is_self(self) -> None:
        """ancestor(0) returns the path itself."""
        path = TablePath.parse("/a/b/c")
        assert path.ancestor(0) == path

    def test_ancestor_levels(self) -> None:
        """ancestor(n) walks n levels up, reaching the root at most."""
        path = TablePath.parse("/a/b/c")

        assert path.ancestor(1) == TablePath.parse("/a/b")
        assert path.ancestor(3) == TablePath.parse("/")
        assert path.ancestor(4) is None

    def test_ancestor_negative_rejected(self) -> None:
        """Negative depths are programming errors."""
        with pytest.raises(ValueError):
            TablePath.parse("/a").ancestor(-1)

    def test_child_and_contains_segment(self) -> None:
        """child appends a segment; contains_segment matches whole segments."""
        path = TablePath.parse("/t").child(".hoodie").child("x.commit")

        assert str(path) == "/t/.hoodie/x.commit"
        assert path.contains_segment(".hoodie")
        assert not TablePath.parse("/t/.hoodie_partition_metadata").contains_segment(".hoodie")

    def test_sorting(self) -> None:
        """Paths sort by string form."""
        paths = [TablePath.parse("/b"), TablePath.parse("/a/z"), TablePath.parse("/a")]
        assert [str(p) for p in sorted(paths)] == ["/a", "/a/z", "/b"]
