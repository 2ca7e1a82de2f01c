"""Unit tests for well-known directory lookups.

Tests for the paths module that resolves home, caches, documents,
library and configuration directories.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from fileotter.core.paths import (
    APP_NAME,
    WELL_KNOWN_DIRS,
    caches,
    current,
    documents,
    ensure_config_dir,
    get_config_dir,
    get_config_path,
    getwd,
    home,
    library,
    pwd,
)


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temporary directory on a non-macOS platform."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    for var in ("XDG_CACHE_HOME", "XDG_DATA_HOME", "XDG_DOCUMENTS_DIR", "XDG_CONFIG_HOME"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("fileotter.core.paths._is_macos", lambda: False)
    return home_dir


class TestHomeAndCurrent:
    """Tests for home() and current()."""

    def test_home(self, fake_home: Path) -> None:
        """home() follows the HOME environment variable."""
        assert home() == fake_home

    def test_current(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """current() and its aliases return the working directory."""
        monkeypatch.chdir(tmp_path)

        assert current() == tmp_path
        assert pwd() == getwd() == current()


class TestCaches:
    """Tests for caches()."""

    def test_default(self, fake_home: Path) -> None:
        """Defaults to ~/.cache."""
        assert caches() == fake_home / ".cache"

    def test_respects_xdg_cache_home(self, fake_home: Path, tmp_path: Path) -> None:
        """XDG_CACHE_HOME overrides the default."""
        with patch.dict(os.environ, {"XDG_CACHE_HOME": str(tmp_path / "cache")}):
            result = caches()

        assert result == tmp_path / "cache"

    def test_macos(self, fake_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """macOS uses ~/Library/Caches."""
        monkeypatch.setattr("fileotter.core.paths._is_macos", lambda: True)

        assert caches() == fake_home / "Library" / "Caches"


class TestLibrary:
    """Tests for library()."""

    def test_default(self, fake_home: Path) -> None:
        """Defaults to ~/.local/share."""
        assert library() == fake_home / ".local" / "share"

    def test_respects_xdg_data_home(self, fake_home: Path, tmp_path: Path) -> None:
        """XDG_DATA_HOME overrides the default."""
        with patch.dict(os.environ, {"XDG_DATA_HOME": str(tmp_path / "data")}):
            result = library()

        assert result == tmp_path / "data"

    def test_macos(self, fake_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """macOS uses ~/Library."""
        monkeypatch.setattr("fileotter.core.paths._is_macos", lambda: True)

        assert library() == fake_home / "Library"


class TestDocuments:
    """Tests for documents()."""

    def test_default(self, fake_home: Path) -> None:
        """Falls back to ~/Documents."""
        assert documents() == fake_home / "Documents"

    def test_environment_variable(self, fake_home: Path, tmp_path: Path) -> None:
        """XDG_DOCUMENTS_DIR in the environment wins."""
        with patch.dict(os.environ, {"XDG_DOCUMENTS_DIR": str(tmp_path / "docs")}):
            result = documents()

        assert result == tmp_path / "docs"

    def test_user_dirs_file(self, fake_home: Path) -> None:
        """The XDG user-dirs file is consulted, with $HOME expanded."""
        config = fake_home / ".config"
        config.mkdir()
        (config / "user-dirs.dirs").write_text(
            '# written by xdg-user-dirs-update\nXDG_DESKTOP_DIR="$HOME/Desktop"\n'
            'XDG_DOCUMENTS_DIR="$HOME/Dokumente"\n'
        )

        assert documents() == fake_home / "Dokumente"

    def test_user_dirs_file_without_key(self, fake_home: Path) -> None:
        """A user-dirs file lacking the key falls back to ~/Documents."""
        config = fake_home / ".config"
        config.mkdir()
        (config / "user-dirs.dirs").write_text('XDG_MUSIC_DIR="$HOME/Music"\n')

        assert documents() == fake_home / "Documents"


class TestConfigPaths:
    """Tests for configuration file locations."""

    def test_default_config_dir(self, fake_home: Path) -> None:
        """get_config_dir returns ~/.config/fileotter by default."""
        assert get_config_dir() == fake_home / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_config_path(self, tmp_path: Path) -> None:
        """The config file is config.toml inside the config directory."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_path()

        assert result == tmp_path / APP_NAME / "config.toml"

    def test_ensure_config_dir_creates(self, tmp_path: Path) -> None:
        """ensure_config_dir creates the directory."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = ensure_config_dir()

        assert result.is_dir()

    def test_ensure_config_dir_permission_error(self, tmp_path: Path) -> None:
        """ensure_config_dir wraps permission failures in RuntimeError."""
        with (
            patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}),
            patch.object(Path, "mkdir", side_effect=PermissionError("denied")),
            pytest.raises(RuntimeError, match="Permission denied"),
        ):
            ensure_config_dir()


class TestWellKnownDirs:
    """Tests for the WELL_KNOWN_DIRS mapping."""

    def test_names(self) -> None:
        """All well-known directories are listed."""
        assert list(WELL_KNOWN_DIRS) == ["home", "current", "caches", "documents", "library"]

    def test_getters_return_paths(self) -> None:
        """Every getter returns a Path."""
        assert all(isinstance(getter(), Path) for getter in WELL_KNOWN_DIRS.values())
