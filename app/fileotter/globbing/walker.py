"""Lazy directory traversal for the glob engine.

The walker streams :class:`Candidate` objects in pre-order depth-first
order: every immediate child of a directory is yielded before any of its
subdirectories is entered. Directories are only listed when the traversal
reaches them, so a consumer that stops iterating stops all filesystem I/O.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from fileotter.globbing.errors import CycleDetected, TraversalWarning

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Candidate:
    """A filesystem entry discovered during a walk.

    Attributes:
        path: Path of the entry (walk root joined with ``parts``).
        parts: Path segments relative to the walk root.
        is_dir: True if the entry is a directory (following symlinks).
        is_symlink: True if the entry itself is a symbolic link.
    """

    path: Path
    parts: tuple[str, ...]
    is_dir: bool
    is_symlink: bool = False

    @property
    def name(self) -> str:
        """Final path segment."""
        return self.parts[-1]

    @property
    def relative(self) -> Path:
        """Path relative to the walk root."""
        return Path(*self.parts)


def _list_directory(directory: Path) -> list[Path]:
    """List a directory's immediate children sorted by name.

    Raises:
        OSError: If the directory cannot be read.
    """
    return sorted(directory.iterdir(), key=lambda p: p.name)


class DirectoryWalker:
    """Pre-order depth-first walker over a directory tree.

    Each iteration is an independent traversal. A directory whose real
    path is already on the chain of directories leading to it is a cycle:
    it is skipped and recorded in :attr:`cycles`. Unreadable directories
    are skipped and recorded in :attr:`warnings`.

    Symbolic links to directories are entered when ``follow_symlinks`` is
    set, or when the ``named`` predicate accepts them. A named directory
    is one the caller asked for explicitly (for instance the ``link``
    segment of ``link/*``); it is entered even when its real path is an
    ancestor, since the caller bounds how deep such descents go.

    Args:
        root: Directory to walk. It is never yielded itself.
        follow_symlinks: If True, enter symbolic links to directories.
        descend: Optional predicate deciding whether a directory candidate
            is entered. Candidates are yielded regardless of it.
        named: Optional predicate marking directory candidates that were
            named explicitly.
    """

    def __init__(
        self,
        root: Path,
        *,
        follow_symlinks: bool = False,
        descend: Callable[[Candidate], bool] | None = None,
        named: Callable[[Candidate], bool] | None = None,
    ) -> None:
        self._root = Path(root)
        self._follow_symlinks = follow_symlinks
        self._descend = descend
        self._named = named
        self.warnings: list[TraversalWarning] = []
        self.cycles: list[CycleDetected] = []

    @property
    def root(self) -> Path:
        """Directory the walk starts from."""
        return self._root

    def __iter__(self) -> Iterator[Candidate]:
        return self.walk()

    def walk(self) -> Iterator[Candidate]:
        """Traverse the tree lazily.

        Yields:
            Candidate for every reachable entry below the root.
        """
        self.warnings = []
        self.cycles = []

        root_real = self._real_path(self._root)
        root_chain: frozenset[Path] = frozenset() if root_real is None else frozenset({root_real})

        # Each frame carries the real paths of the directories above it
        stack: list[tuple[Path, tuple[str, ...], frozenset[Path]]] = [
            (self._root, (), root_chain)
        ]
        while stack:
            directory, prefix, chain = stack.pop()

            try:
                entries = _list_directory(directory)
            except OSError as e:
                self._record_warning(directory, e)
                continue

            subdirs: list[tuple[Path, tuple[str, ...], frozenset[Path]]] = []
            for entry in entries:
                try:
                    is_symlink = entry.is_symlink()
                    is_dir = entry.is_dir()
                except OSError:
                    logger.warning("Cannot determine type of: %s", entry)
                    continue

                candidate = Candidate(
                    path=entry,
                    parts=(*prefix, entry.name),
                    is_dir=is_dir,
                    is_symlink=is_symlink,
                )
                yield candidate

                if not is_dir:
                    continue
                real = self._enter(candidate, chain)
                if real is not None:
                    subdirs.append((candidate.path, candidate.parts, chain | {real}))

            # Reversed so the first subdirectory is popped next
            stack.extend(reversed(subdirs))

    def _enter(self, candidate: Candidate, chain: frozenset[Path]) -> Path | None:
        """Return the real path of a directory candidate to traverse, or None."""
        if self._descend is not None and not self._descend(candidate):
            return None
        named = self._named is not None and self._named(candidate)
        if candidate.is_symlink and not (self._follow_symlinks or named):
            return None

        real = self._real_path(candidate.path)
        if real is None:
            return None
        if real in chain and not named:
            logger.debug("Cycle detected: %s -> %s", candidate.path, real)
            self.cycles.append(CycleDetected(path=str(candidate.path), real_path=str(real)))
            return None
        return real

    def _real_path(self, path: Path) -> Path | None:
        """Resolve a path to its canonical form, recording failures."""
        try:
            return path.resolve()
        except (OSError, RuntimeError) as e:
            self._record_warning(path, e)
            return None

    def _record_warning(self, path: Path, error: BaseException) -> None:
        reason = getattr(error, "strerror", None) or str(error)
        logger.warning("Skipping unreadable directory %s: %s", path, reason)
        self.warnings.append(TraversalWarning(path=str(path), reason=reason))


def walk(
    base: Path,
    *,
    follow_symlinks: bool = False,
    descend: Callable[[Candidate], bool] | None = None,
) -> Iterator[Candidate]:
    """Lazily walk the tree below ``base``.

    Convenience wrapper around :class:`DirectoryWalker` for callers that do
    not need the collected warnings.

    Args:
        base: Directory to walk.
        follow_symlinks: If True, enter symbolic links to directories.
        descend: Optional pruning predicate for directory candidates.

    Returns:
        Iterator over candidates in pre-order depth-first order.
    """
    return DirectoryWalker(base, follow_symlinks=follow_symlinks, descend=descend).walk()
