"""Unit tests for the ls CLI command."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from fileotter.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestLs:
    """Tests for listing directory children."""

    def test_plain_hides_dot_entries(self, tree: Path) -> None:
        """By default names beginning with a dot are left out."""
        result = runner.invoke(app, ["ls", str(tree), "-f", "plain"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["a.txt", "b.txt", "c.md", "docs", "sub", "x.txt"]

    def test_all(self, tree: Path) -> None:
        """--all includes hidden entries."""
        result = runner.invoke(app, ["ls", str(tree / "docs"), "--all", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == ["guide.md", "x.txt"]

        result = runner.invoke(app, ["ls", str(tree), "-a", "-f", "plain"])
        assert result.stdout.splitlines()[:2] == [".hidden", ".secret"]

    def test_raw_entries(self, tree: Path) -> None:
        """--raw --all shows . and .. as well."""
        result = runner.invoke(app, ["ls", str(tree / "docs"), "--raw", "-a", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [".", "..", "guide.md", "x.txt"]

    def test_defaults_to_cwd(self, tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a path the working directory is listed."""
        monkeypatch.chdir(tree / "sub")

        result = runner.invoke(app, ["ls", "-f", "plain"])

        assert result.stdout.splitlines() == ["notes.TXT", "sub2", "x.txt"]

    def test_table(self, tree: Path) -> None:
        """Table output lists names."""
        result = runner.invoke(app, ["ls", str(tree / "docs")])

        assert result.exit_code == 0
        assert "guide.md" in result.stdout

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty directory is reported as such."""
        (tmp_path / "empty").mkdir()

        result = runner.invoke(app, ["ls", str(tmp_path / "empty")])

        assert result.exit_code == 0
        assert "empty" in result.stdout

    def test_not_a_directory(self, tree: Path) -> None:
        """Listing a file fails with status 1."""
        result = runner.invoke(app, ["ls", str(tree / "a.txt")])

        assert result.exit_code == 1
        assert "Not a directory" in result.output

    def test_unreadable(self, tree: Path) -> None:
        """A directory that cannot be read fails with status 1."""
        with patch(
            "fileotter.directory.listing.Path.iterdir",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            result = runner.invoke(app, ["ls", str(tree)])

        assert result.exit_code == 1
        assert "Cannot read" in result.output
