"""Glob engine: compile, walk, match and aggregate.

Patterns are compiled once per call. Patterns sharing a walk root (the
base directory for relative patterns, ``/`` for absolute ones) share a
single traversal, and every candidate is tested against all of them.
The walk is pruned: a directory is only entered if at least one pattern
could still match something beneath it.
"""

import logging
from collections.abc import Generator, Iterator, Sequence
from contextlib import closing
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from fileotter.core.paths import current
from fileotter.globbing.aggregator import aggregate, canonical_key
from fileotter.globbing.errors import CycleDetected, InvalidPatternError, TraversalWarning
from fileotter.globbing.matcher import could_match_below, matches, names_directory
from fileotter.globbing.options import GlobOptions
from fileotter.globbing.pattern import SEPARATOR, Pattern, compile_pattern
from fileotter.globbing.walker import Candidate, DirectoryWalker

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GlobResult:
    """Outcome of a glob run.

    Attributes:
        paths: Matched paths, de-duplicated and ordered.
        warnings: Directories that could not be read.
        cycles: Directories skipped because their real path was already walked.
    """

    paths: list[Path]
    warnings: tuple[TraversalWarning, ...] = ()
    cycles: tuple[CycleDetected, ...] = ()


def _could_match_any(group: Sequence[tuple[int, Pattern]], candidate: Candidate) -> bool:
    return any(could_match_below(candidate, pattern) for _, pattern in group)


def _names_any(group: Sequence[tuple[int, Pattern]], candidate: Candidate) -> bool:
    return any(names_directory(candidate, pattern) for _, pattern in group)


class Glob:
    """A single glob invocation over one base directory.

    Args:
        patterns: Glob pattern strings, OR'd together.
        base: Directory relative patterns are resolved against. Defaults
            to the current working directory.
        options: Matching options. Defaults to :class:`GlobOptions`.

    Raises:
        InvalidPatternError: If no pattern is given or any pattern is malformed.
    """

    def __init__(
        self,
        patterns: Sequence[str],
        base: Path | str | None = None,
        options: GlobOptions | None = None,
    ) -> None:
        if not patterns:
            raise InvalidPatternError("", "at least one pattern is required")
        self._options = options or GlobOptions()
        self._base = (Path(base) if base is not None else current()).absolute()
        self._patterns = tuple(
            compile_pattern(
                p,
                case_sensitive=self._options.case_sensitive,
                include_hidden=self._options.include_hidden,
            )
            for p in patterns
        )
        self.warnings: list[TraversalWarning] = []
        self.cycles: list[CycleDetected] = []

    @property
    def base(self) -> Path:
        """Absolute base directory."""
        return self._base

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        """Compiled patterns in the order given."""
        return self._patterns

    def run(self) -> GlobResult:
        """Walk the tree and collect all matches.

        Returns:
            GlobResult with aggregated paths and traversal records.
        """
        per_pattern: list[list[Path]] = [[] for _ in self._patterns]
        for path, index in self._walk_matches():
            per_pattern[index].append(path)

        return GlobResult(
            paths=aggregate(per_pattern, sort=self._options.sort),
            warnings=tuple(self.warnings),
            cycles=tuple(self.cycles),
        )

    def iter_matches(self) -> Generator[Path, None, None]:
        """Yield matches as they are discovered, without duplicates.

        Filesystem I/O only happens while the iterator is consumed.
        Closing the generator ends the walk and makes :attr:`warnings`
        and :attr:`cycles` reflect the part of the tree that was read.
        """
        seen: set[str] = set()
        with closing(self._walk_matches()) as found:
            for path, _ in found:
                key = canonical_key(path)
                if key in seen:
                    continue
                seen.add(key)
                yield path

    def _walk_matches(self) -> Generator[tuple[Path, int], None, None]:
        """Yield (path, pattern index) for every match of every pattern."""
        self.warnings = []
        self.cycles = []

        for root, group in self._group_by_root():
            if not root.is_dir():
                logger.debug("Glob root is not a directory: %s", root)
                continue

            walker = DirectoryWalker(
                root,
                follow_symlinks=self._options.follow_symlinks,
                descend=partial(_could_match_any, group),
                named=partial(_names_any, group),
            )
            try:
                for candidate in walker:
                    for index, pattern in group:
                        if matches(candidate, pattern):
                            yield self._result_path(candidate, pattern), index
            finally:
                self.warnings.extend(walker.warnings)
                self.cycles.extend(walker.cycles)

    def _group_by_root(self) -> list[tuple[Path, list[tuple[int, Pattern]]]]:
        """Group patterns by the directory their walk starts from."""
        groups: dict[Path, list[tuple[int, Pattern]]] = {}
        for index, pattern in enumerate(self._patterns):
            root = Path(SEPARATOR) if pattern.absolute else self._base
            groups.setdefault(root, []).append((index, pattern))
        return list(groups.items())

    def _result_path(self, candidate: Candidate, pattern: Pattern) -> Path:
        if self._options.relative and not pattern.absolute:
            return candidate.relative
        return candidate.path


def glob(
    *patterns: str,
    base: Path | str | None = None,
    options: GlobOptions | None = None,
) -> list[Path]:
    """Return the paths matching any of the given glob patterns.

    Args:
        *patterns: One or more glob patterns.
        base: Directory relative patterns are resolved against. Defaults
            to the current working directory.
        options: Matching options.

    Returns:
        De-duplicated matches, sorted by path string unless
        ``options.sort`` is False. An empty list when nothing matches.

    Raises:
        InvalidPatternError: If no pattern is given or any pattern is malformed.
    """
    return Glob(patterns, base=base, options=options).run().paths


def iglob(
    *patterns: str,
    base: Path | str | None = None,
    options: GlobOptions | None = None,
) -> Iterator[Path]:
    """Lazily yield the paths matching any of the given glob patterns.

    Matches come in discovery order. Patterns are compiled eagerly, so a
    malformed pattern raises before the first item is requested.

    Raises:
        InvalidPatternError: If no pattern is given or any pattern is malformed.
    """
    return Glob(patterns, base=base, options=options).iter_matches()
