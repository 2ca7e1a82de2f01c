"""Segment-by-segment matching of candidates against compiled patterns.

Hidden entries (names beginning with ``.``) are only matched by a segment
that itself begins with a literal dot, unless the pattern was compiled with
``include_hidden=True``. The ``**`` segment never spans a hidden name under
the same rule.
"""

from collections.abc import Sequence

from fileotter.globbing.pattern import Pattern, Segment, SegmentKind
from fileotter.globbing.walker import Candidate


def matches(candidate: Candidate, pattern: Pattern) -> bool:
    """Check if a candidate path matches a pattern.

    Args:
        candidate: Path discovered by the walker, relative to the walk root.
        pattern: Compiled pattern.

    Returns:
        True if every path segment is consumed by the pattern.
    """
    if pattern.dir_only and not candidate.is_dir:
        return False
    return match_parts(candidate.parts, pattern)


def could_match_below(candidate: Candidate, pattern: Pattern) -> bool:
    """Check if some descendant of a directory candidate could match a pattern.

    Used to prune the walk: a directory is only entered if the pattern
    still has segments left after consuming the directory's own path.

    Args:
        candidate: Directory candidate.
        pattern: Compiled pattern.

    Returns:
        True if the directory's path is a viable prefix of a match.
    """
    return _match(candidate.parts, pattern.segments, 0, 0, pattern, partial=True)


def names_directory(candidate: Candidate, pattern: Pattern) -> bool:
    """Check if a pattern names a directory candidate with a non-``**`` segment.

    ``link/*`` names ``link``; ``**/*.txt`` only reaches it by recursion.
    Symbolic links that a pattern names are entered even when links are
    not followed, the way a shell expands ``link/*``.

    Args:
        candidate: Directory candidate.
        pattern: Compiled pattern.

    Returns:
        True if the directory's last segment is consumed by a literal or
        wildcard segment and the pattern continues beneath it.
    """
    return _match(candidate.parts, pattern.segments, 0, 0, pattern, partial=True, pin_last=True)


def match_parts(parts: Sequence[str], pattern: Pattern) -> bool:
    """Match a sequence of path segments against a pattern.

    Args:
        parts: Path segments, e.g. ``("sub", "x.txt")``.
        pattern: Compiled pattern.

    Returns:
        True on a full match.
    """
    if not parts:
        return False
    return _match(parts, pattern.segments, 0, 0, pattern, partial=False)


def match_segment(name: str, segment: Segment, pattern: Pattern) -> bool:
    """Match a single path segment against a non-recursive pattern segment."""
    if _is_hidden(name) and not pattern.include_hidden and not segment.starts_with_dot:
        return False

    if segment.kind == SegmentKind.LITERAL:
        if pattern.case_sensitive:
            return name == segment.literal
        return name.casefold() == (segment.literal or "").casefold()

    if segment.regex is None:
        return False
    return segment.regex.fullmatch(name) is not None


def _match(
    parts: Sequence[str],
    segments: Sequence[Segment],
    i: int,
    j: int,
    pattern: Pattern,
    *,
    partial: bool,
    pin_last: bool = False,
) -> bool:
    """Backtracking matcher over path parts ``i:`` and pattern segments ``j:``."""
    while j < len(segments):
        segment = segments[j]

        if segment.is_recursive:
            # Try absorbing zero, one, two... path segments
            k = i
            while True:
                if partial and k == len(parts):
                    return True
                if _match(parts, segments, k, j + 1, pattern, partial=partial, pin_last=pin_last):
                    return True
                if k >= len(parts) or not _recursion_may_enter(parts[k], pattern):
                    return False
                if pin_last and k == len(parts) - 1:
                    return False
                k += 1

        if i >= len(parts):
            # Path exhausted with pattern left over
            return partial

        if not match_segment(parts[i], segment, pattern):
            return False
        i += 1
        j += 1

    if partial:
        # A directory whose path already consumed the whole pattern has
        # no descendants that could match.
        return False
    return i == len(parts)


def _recursion_may_enter(name: str, pattern: Pattern) -> bool:
    return pattern.include_hidden or not _is_hidden(name)


def _is_hidden(name: str) -> bool:
    return name.startswith(".")
