"""Unit tests for the inspect command."""

from pathlib import Path

import pytest
from rofilter.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("isolated_config")


class TestInspectCommand:
    """Tests for rofilter inspect."""

    def test_inspect_table(self, partitioned_table) -> None:
        """Inspect shows the table config and completed commits."""
        result = runner.invoke(app, ["inspect", str(partitioned_table.root)])

        assert result.exit_code == 0
        assert "trips" in result.stdout
        assert "COPY_ON_WRITE" in result.stdout
        assert "PARQUET" in result.stdout
        assert "Completed Commits" in result.stdout
        assert "20240102000000" in result.stdout
        assert "2 completed, 1 pending" in result.stdout

    def test_inspect_limit(self, partitioned_table) -> None:
        """--limit shows only the most recent commits."""
        result = runner.invoke(app, ["inspect", str(partitioned_table.root), "--limit", "1"])

        assert result.exit_code == 0
        assert "20240102000000" in result.stdout
        assert "20240101000000" not in result.stdout

    def test_inspect_not_a_table(self, tmp_path: Path) -> None:
        """A directory without metadata is reported and exits with code 1."""
        result = runner.invoke(app, ["inspect", str(tmp_path)])

        assert result.exit_code == 1
        assert "not a managed table" in " ".join(result.output.split())

    def test_inspect_malformed_table(self, tmp_path: Path) -> None:
        """A metadata folder without a table config is an error."""
        (tmp_path / ".hoodie").mkdir()

        result = runner.invoke(app, ["inspect", str(tmp_path)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_inspect_unsupported_scheme(self) -> None:
        """Paths on filesystems without a client are rejected."""
        result = runner.invoke(app, ["inspect", "s3://bucket/table"])

        assert result.exit_code == 1
        assert "s3" in result.output
