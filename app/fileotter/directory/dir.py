"""The Dir facade.

``Dir(path)`` is a read-only, random-access sequence of a directory's
immediate children. The children are read on first access, not at
construction, and cached until :meth:`Dir.refresh`.

The class also groups every directory operation as static methods, so
``Dir.home()``, ``Dir.glob("**/*.py")`` or ``Dir.rmdir(path)`` read the
same way as the instance API.
"""

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import overload

from fileotter.core import paths
from fileotter.directory import listing, workdir
from fileotter.directory.operator import DirectoryOperator
from fileotter.globbing.engine import glob, iglob

logger = logging.getLogger(__name__)


def unlink(path: Path | str) -> bool:
    """Remove a directory tree, file or symbolic link.

    Args:
        path: Path to remove.

    Returns:
        True if the path was removed, False otherwise (the reason is logged).
    """
    return DirectoryOperator().remove([path])[0].success


class Dir(Sequence[Path]):
    """A directory viewed as the sequence of its children.

    Args:
        path: Directory path. It is not read until the children are needed.
    """

    # Well-known directories
    home = staticmethod(paths.home)
    current = staticmethod(paths.current)
    pwd = staticmethod(paths.pwd)
    getwd = staticmethod(paths.getwd)
    caches = staticmethod(paths.caches)
    documents = staticmethod(paths.documents)
    library = staticmethod(paths.library)

    # Mutations
    chdir = staticmethod(workdir.chdir)
    working_directory = staticmethod(workdir.working_directory)
    rmdir = staticmethod(unlink)
    delete = staticmethod(unlink)
    unlink = staticmethod(unlink)

    # Reading contents
    children = staticmethod(listing.children)
    iter_children = staticmethod(listing.iter_children)
    entries = staticmethod(listing.entries)
    exists = staticmethod(listing.exists)
    is_empty = staticmethod(listing.is_empty)

    # Globbing
    glob = staticmethod(glob)
    iglob = staticmethod(iglob)

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._children: list[Path] | None = None

    @property
    def path(self) -> Path:
        """The directory this instance describes."""
        return self._path

    def refresh(self) -> None:
        """Drop the cached children so the next access re-reads the directory."""
        self._children = None

    def each_child(self) -> Iterator[Path]:
        """Stream the children straight from the filesystem, unsorted."""
        return listing.iter_children(self._path)

    def _loaded(self) -> list[Path]:
        if self._children is None:
            self._children = listing.children(self._path)
            logger.debug("Read %d children of %s", len(self._children), self._path)
        return self._children

    @overload
    def __getitem__(self, index: int) -> Path: ...

    @overload
    def __getitem__(self, index: slice) -> list[Path]: ...

    def __getitem__(self, index: int | slice) -> Path | list[Path]:
        return self._loaded()[index]

    def __len__(self) -> int:
        return len(self._loaded())

    def __iter__(self) -> Iterator[Path]:
        return iter(self._loaded())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            item = self._path / item
        return item in self._loaded()

    def __fspath__(self) -> str:
        return str(self._path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dir):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        return f"Dir({str(self._path)!r})"
