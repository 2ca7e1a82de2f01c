"""Well-known directories.

Resolves the user's home, the current working directory, and the
platform's caches, documents and library directories. On Linux the
XDG Base Directory and XDG user-dirs conventions are honoured:

- Caches: $XDG_CACHE_HOME or ~/.cache
- Documents: $XDG_DOCUMENTS_DIR, user-dirs.dirs, or ~/Documents
- Library: $XDG_DATA_HOME or ~/.local/share

On macOS the ~/Library tree is used instead.

The fileotter configuration lives in ~/.config/fileotter/
(or $XDG_CONFIG_HOME/fileotter/).
"""

import os
import sys
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "fileotter"

_USER_DIRS_FILE = "user-dirs.dirs"


def _is_macos() -> bool:
    return sys.platform == "darwin"


def _xdg_base(env_var: str, default_subdir: str) -> Path:
    """Get an XDG base directory respecting its environment override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CACHE_HOME").
        default_subdir: Default subdirectory under home (e.g., ".cache").

    Returns:
        The base directory (not application-specific).
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base)
    return Path.home() / default_subdir


def home() -> Path:
    """Get the current user's home directory."""
    return Path.home()


def current() -> Path:
    """Get the current working directory.

    Returns:
        Absolute path of the process working directory.
    """
    return Path.cwd()


# Ruby-style aliases
pwd = current
getwd = current


def caches() -> Path:
    """Get the user cache directory.

    Returns:
        ~/Library/Caches on macOS, $XDG_CACHE_HOME or ~/.cache elsewhere.
    """
    if _is_macos():
        return Path.home() / "Library" / "Caches"
    return _xdg_base("XDG_CACHE_HOME", ".cache")


def library() -> Path:
    """Get the user library (application data) directory.

    Returns:
        ~/Library on macOS, $XDG_DATA_HOME or ~/.local/share elsewhere.
    """
    if _is_macos():
        return Path.home() / "Library"
    return _xdg_base("XDG_DATA_HOME", ".local/share")


def documents() -> Path:
    """Get the user documents directory.

    Checks, in order, the XDG_DOCUMENTS_DIR environment variable, the
    XDG user-dirs file, and falls back to ~/Documents.

    Returns:
        Path to the documents directory (not guaranteed to exist).
    """
    env = os.environ.get("XDG_DOCUMENTS_DIR")
    if env:
        return Path(os.path.expandvars(env))

    if not _is_macos():
        configured = _read_user_dir("XDG_DOCUMENTS_DIR")
        if configured is not None:
            return configured

    return Path.home() / "Documents"


def _read_user_dir(key: str) -> Path | None:
    """Read a directory entry from the XDG user-dirs file.

    Lines look like ``XDG_DOCUMENTS_DIR="$HOME/Documents"``.

    Args:
        key: Variable name to look up.

    Returns:
        The configured path, or None if the file or key is missing.
    """
    path = _xdg_base("XDG_CONFIG_HOME", ".config") / _USER_DIRS_FILE
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return None

    for line in lines:
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        name, _, value = line.partition("=")
        if name.strip() != key:
            continue
        value = value.strip().strip('"')
        if not value:
            return None
        value = value.replace("$HOME", str(Path.home()))
        return Path(value)

    return None


# =============================================================================
# Application paths
# =============================================================================


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/fileotter/ (or XDG_CONFIG_HOME/fileotter/).
    """
    return _xdg_base("XDG_CONFIG_HOME", ".config") / APP_NAME


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/fileotter/config.toml.
    """
    return get_config_dir() / "config.toml"


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Returns:
        Path to the configuration directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create config directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create config directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


WELL_KNOWN_DIRS = {
    "home": home,
    "current": current,
    "caches": caches,
    "documents": documents,
    "library": library,
}
