"""Unit tests for working directory switching."""

import logging
from pathlib import Path

import pytest
from fileotter.directory.workdir import chdir, working_directory


@pytest.fixture(autouse=True)
def restore_cwd(monkeypatch: pytest.MonkeyPatch) -> None:
    """Restore the working directory after each test."""
    monkeypatch.chdir(Path.cwd())


class TestChdir:
    """Tests for chdir()."""

    def test_success(self, tmp_path: Path) -> None:
        """chdir() switches the working directory and returns True."""
        assert chdir(tmp_path) is True
        assert Path.cwd() == tmp_path

    def test_failure_returns_false(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """chdir() into a missing directory returns False and logs."""
        before = Path.cwd()

        with caplog.at_level(logging.WARNING, logger="fileotter.directory.workdir"):
            assert chdir(tmp_path / "missing") is False

        assert Path.cwd() == before
        assert "Cannot change directory" in caplog.text


class TestWorkingDirectory:
    """Tests for the working_directory() context manager."""

    def test_switches_and_restores(self, tmp_path: Path) -> None:
        """The block runs in the target directory; the old one returns after."""
        before = Path.cwd()

        with working_directory(tmp_path) as inside:
            assert inside == tmp_path
            assert Path.cwd() == tmp_path

        assert Path.cwd() == before

    def test_restores_on_exception(self, tmp_path: Path) -> None:
        """The previous directory is restored when the block raises."""
        before = Path.cwd()

        with pytest.raises(RuntimeError, match="boom"), working_directory(tmp_path):
            raise RuntimeError("boom")

        assert Path.cwd() == before

    def test_nested(self, tmp_path: Path) -> None:
        """Nested blocks unwind in order."""
        outer = tmp_path / "outer"
        inner = outer / "inner"
        inner.mkdir(parents=True)
        before = Path.cwd()

        with working_directory(outer):
            with working_directory(inner):
                assert Path.cwd() == inner
            assert Path.cwd() == outer

        assert Path.cwd() == before

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """Entering a missing directory raises and leaves the cwd alone."""
        before = Path.cwd()

        with pytest.raises(FileNotFoundError), working_directory(tmp_path / "missing"):
            pass

        assert Path.cwd() == before
