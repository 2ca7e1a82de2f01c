"""Errors and traversal records for the glob engine.

Malformed patterns raise :class:`InvalidPatternError` at compile time.
Problems met while walking the tree are not raised: they are collected
as :class:`TraversalWarning` and :class:`CycleDetected` records so a
single unreadable directory never aborts a glob.
"""

from dataclasses import dataclass


class FileOtterError(Exception):
    """Base exception for fileotter errors."""


class InvalidPatternError(FileOtterError, ValueError):
    """Raised when a glob pattern cannot be compiled.

    Attributes:
        pattern: The offending pattern string.
        position: Index in the pattern where the problem was found, if known.
    """

    def __init__(self, pattern: str, reason: str, position: int | None = None) -> None:
        self.pattern = pattern
        self.reason = reason
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid glob pattern {pattern!r}{where}: {reason}")


@dataclass(frozen=True, slots=True)
class TraversalWarning:
    """A directory that could not be read during a walk.

    Attributes:
        path: Directory that was skipped.
        reason: Error message reported by the operating system.
    """

    path: str
    reason: str


@dataclass(frozen=True, slots=True)
class CycleDetected:
    """A directory that was not entered because its real path was already visited.

    Attributes:
        path: Path of the directory (usually a symbolic link) as discovered.
        real_path: Canonical path that had already been entered.
    """

    path: str
    real_path: str
