"""Merging of per-pattern match results."""

import os
from collections.abc import Iterable
from pathlib import Path


def canonical_key(path: Path) -> str:
    """Return the key under which two paths count as the same match.

    Paths are compared in lexically normalised absolute form. Symbolic
    links are not resolved, so a link and its target stay distinct matches.
    """
    return os.path.normpath(os.path.abspath(path))


def aggregate(
    matches_by_pattern: Iterable[Iterable[Path]],
    *,
    sort: bool = True,
) -> list[Path]:
    """Union the matches of several patterns.

    Args:
        matches_by_pattern: One iterable of matched paths per pattern.
        sort: If True, order the result by path string. If False, keep
            the order in which paths were first seen.

    Returns:
        De-duplicated list of matched paths.
    """
    seen: set[str] = set()
    result: list[Path] = []

    for matches in matches_by_pattern:
        for path in matches:
            key = canonical_key(path)
            if key in seen:
                continue
            seen.add(key)
            result.append(path)

    if sort:
        result.sort(key=str)
    return result
