"""Reading directory contents."""

import os
from collections.abc import Iterator
from pathlib import Path


def iter_children(path: Path | str) -> Iterator[Path]:
    """Lazily yield a directory's immediate children.

    Entries come in the order the operating system returns them; the
    directory is read only while the iterator is consumed.

    Args:
        path: Directory to list.

    Yields:
        Child paths (``path / name``), excluding ``.`` and ``..``.

    Raises:
        OSError: If the directory cannot be read.
    """
    yield from Path(path).iterdir()


def children(path: Path | str) -> list[Path]:
    """List a directory's immediate children sorted by name.

    Args:
        path: Directory to list.

    Returns:
        Child paths, excluding ``.`` and ``..``.

    Raises:
        OSError: If the directory cannot be read.
    """
    return sorted(Path(path).iterdir(), key=lambda p: p.name)


def entries(path: Path | str) -> list[str]:
    """List the raw entry names of a directory.

    Unlike :func:`children`, this returns bare names and includes the
    ``.`` and ``..`` entries.

    Args:
        path: Directory to list.

    Returns:
        Sorted entry names.

    Raises:
        OSError: If the directory cannot be read.
    """
    return [os.curdir, os.pardir, *sorted(os.listdir(path))]


def exists(path: Path | str) -> bool:
    """Check if a path exists and is a directory.

    Args:
        path: Path to check.

    Returns:
        True only for an existing directory (symlinks are followed).
    """
    return Path(path).is_dir()


def is_empty(path: Path | str) -> bool:
    """Check if a directory has no entries.

    Args:
        path: Directory to check.

    Returns:
        True if the directory has no children.

    Raises:
        OSError: If the directory cannot be read.
    """
    return next(iter_children(path), None) is None
