"""Glob pattern compiler.

Turns a shell-style glob string into an immutable :class:`Pattern`: an
ordered tuple of :class:`Segment` objects, one per path component.

Supported syntax:
- ``*`` matches any run of characters within one path segment.
- ``?`` matches exactly one character within one path segment.
- ``[...]`` matches one character from a POSIX-style class. ``!`` or ``^``
  right after the opening bracket negates it, ``a-z`` is a range, and a
  ``]`` in first position is literal.
- ``**`` as a whole segment matches zero or more path segments.
- ``\\`` makes the next character literal.

A leading ``/`` anchors the pattern at the filesystem root and a trailing
``/`` restricts it to directories. Empty and ``.`` segments are dropped.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from fileotter.globbing.errors import InvalidPatternError

SEPARATOR = "/"
_ESCAPE = "\\"
_NEGATION = "!^"


class TokenKind(str, Enum):
    """Kind of a token inside a single pattern segment.

    Attributes:
        LITERAL: Plain text compared verbatim.
        ANY_CHAR: ``?``, exactly one character.
        ANY_RUN: ``*``, zero or more characters.
        CHAR_CLASS: ``[...]``, one character from a set.
    """

    LITERAL = "literal"
    ANY_CHAR = "any_char"
    ANY_RUN = "any_run"
    CHAR_CLASS = "char_class"


class SegmentKind(str, Enum):
    """Kind of a pattern segment.

    Attributes:
        LITERAL: No metacharacters; matched by string equality.
        WILDCARD: Contains ``*``, ``?`` or a class; matched by a regex.
        RECURSIVE: The ``**`` segment, spanning zero or more path segments.
    """

    LITERAL = "literal"
    WILDCARD = "wildcard"
    RECURSIVE = "recursive"


@dataclass(frozen=True, slots=True)
class Token:
    """One element of a segment.

    Attributes:
        kind: Token kind.
        text: Literal text, or the class source (e.g. ``[!a-c]``).
        ranges: Inclusive character ranges of a class (single characters
            are stored as ``(c, c)``).
        negated: Whether a class is negated.
    """

    kind: TokenKind
    text: str = ""
    ranges: tuple[tuple[str, str], ...] = ()
    negated: bool = False


@dataclass(frozen=True, slots=True)
class Segment:
    """A compiled pattern segment.

    Attributes:
        kind: Segment kind.
        source: Segment text as written in the pattern.
        tokens: Parsed tokens (empty for ``**``).
        literal: Unescaped text of a literal segment, None otherwise.
        regex: Compiled full-match regex of a wildcard segment, None otherwise.
    """

    kind: SegmentKind
    source: str
    tokens: tuple[Token, ...] = ()
    literal: str | None = None
    regex: re.Pattern[str] | None = field(default=None, compare=False, repr=False)

    @property
    def is_recursive(self) -> bool:
        """Check if this is the ``**`` segment."""
        return self.kind == SegmentKind.RECURSIVE

    @property
    def starts_with_dot(self) -> bool:
        """Check if the segment explicitly begins with a literal dot."""
        if not self.tokens:
            return False
        first = self.tokens[0]
        return first.kind == TokenKind.LITERAL and first.text.startswith(".")


@dataclass(frozen=True, slots=True)
class Pattern:
    """An immutable compiled glob pattern.

    Attributes:
        source: The original pattern string, kept for diagnostics.
        segments: Compiled segments in path order.
        absolute: True if the pattern is anchored at the filesystem root.
        dir_only: True if the pattern ended with a separator.
        case_sensitive: Whether name comparison is case-sensitive.
        include_hidden: Whether wildcards may match names beginning with ``.``.
    """

    source: str
    segments: tuple[Segment, ...]
    absolute: bool = False
    dir_only: bool = False
    case_sensitive: bool = True
    include_hidden: bool = False

    def __str__(self) -> str:
        return self.source


def compile_pattern(
    pattern: str,
    *,
    case_sensitive: bool = True,
    include_hidden: bool = False,
) -> Pattern:
    """Compile a glob string into a :class:`Pattern`.

    Args:
        pattern: Shell-style glob pattern.
        case_sensitive: If False, names are compared case-insensitively.
        include_hidden: If True, wildcards and ``**`` also match names
            beginning with a dot.

    Returns:
        The compiled pattern.

    Raises:
        InvalidPatternError: If the pattern is empty, has an unterminated
            character class, a trailing escape, a ``..`` segment, or no
            segment left to match.
    """
    if not pattern:
        raise InvalidPatternError(pattern, "pattern is empty")

    raw_segments, dir_only = _split(pattern)

    segments: list[Segment] = []
    for source, tokens, star_only in raw_segments:
        if star_only and source.count("*") >= 2:
            # Consecutive ** segments are equivalent to one
            if segments and segments[-1].is_recursive:
                continue
            segments.append(Segment(kind=SegmentKind.RECURSIVE, source=source))
            continue

        literal = _literal_text(tokens)
        if literal == ".":
            continue
        if literal == "..":
            raise InvalidPatternError(pattern, "parent directory references are not supported")
        segments.append(_build_segment(source, tokens, literal, case_sensitive))

    if not segments:
        raise InvalidPatternError(pattern, "pattern has no segments to match")

    return Pattern(
        source=pattern,
        segments=tuple(segments),
        absolute=pattern.startswith(SEPARATOR),
        dir_only=dir_only,
        case_sensitive=case_sensitive,
        include_hidden=include_hidden,
    )


def _split(pattern: str) -> tuple[list[tuple[str, list[Token], bool]], bool]:
    """Scan a pattern left to right into raw segments.

    Returns:
        Tuple of (segments, dir_only). Each segment is a tuple of
        (source text, tokens, consists-only-of-stars). Empty segments
        are omitted.
    """
    segments: list[tuple[str, list[Token], bool]] = []
    tokens: list[Token] = []
    literal: list[str] = []
    star_only = True
    start = 0
    trailing_separator = False
    i = 0
    n = len(pattern)

    def flush_literal() -> None:
        if literal:
            tokens.append(Token(kind=TokenKind.LITERAL, text="".join(literal)))
            literal.clear()

    def close_segment(end: int) -> None:
        nonlocal tokens, star_only
        flush_literal()
        if tokens:
            segments.append((pattern[start:end], tokens, star_only))
        tokens = []
        star_only = True

    while i < n:
        char = pattern[i]

        if char == SEPARATOR:
            close_segment(i)
            start = i + 1
            trailing_separator = True
            i += 1
            continue

        trailing_separator = False

        if char == _ESCAPE:
            if i + 1 >= n:
                raise InvalidPatternError(pattern, "trailing escape character", i)
            escaped = pattern[i + 1]
            if escaped == SEPARATOR:
                close_segment(i)
                start = i + 2
                trailing_separator = True
            else:
                literal.append(escaped)
                star_only = False
            i += 2
            continue

        if char == "*":
            flush_literal()
            # Runs of * collapse into a single token
            if not tokens or tokens[-1].kind != TokenKind.ANY_RUN:
                tokens.append(Token(kind=TokenKind.ANY_RUN, text="*"))
        elif char == "?":
            flush_literal()
            tokens.append(Token(kind=TokenKind.ANY_CHAR, text="?"))
            star_only = False
        elif char == "[":
            flush_literal()
            token, i = _parse_class(pattern, i)
            tokens.append(token)
            star_only = False
            continue
        else:
            literal.append(char)
            star_only = False
        i += 1

    close_segment(n)
    return segments, trailing_separator


def _parse_class(pattern: str, start: int) -> tuple[Token, int]:
    """Parse a bracket expression beginning at ``pattern[start] == "["``.

    Returns:
        Tuple of (class token, index just past the closing bracket).

    Raises:
        InvalidPatternError: On an unterminated class, a separator inside
            the class, or a reversed range.
    """
    n = len(pattern)
    i = start + 1
    negated = False
    if i < n and pattern[i] in _NEGATION:
        negated = True
        i += 1

    ranges: list[tuple[str, str]] = []
    first = True

    def read_char(pos: int) -> tuple[str, int]:
        if pos >= n:
            raise InvalidPatternError(pattern, "unterminated character class", start)
        char = pattern[pos]
        if char == _ESCAPE:
            if pos + 1 >= n:
                raise InvalidPatternError(pattern, "unterminated character class", start)
            return pattern[pos + 1], pos + 2
        if char == SEPARATOR:
            raise InvalidPatternError(pattern, "path separator inside character class", pos)
        return char, pos + 1

    while True:
        if i >= n:
            raise InvalidPatternError(pattern, "unterminated character class", start)
        if pattern[i] == "]" and not first:
            i += 1
            break

        low, i = read_char(i)
        first = False

        if i + 1 < n and pattern[i] == "-" and pattern[i + 1] != "]":
            high, i = read_char(i + 1)
            if high < low:
                raise InvalidPatternError(pattern, f"reversed range {low}-{high}", start)
            ranges.append((low, high))
        else:
            ranges.append((low, low))

    token = Token(
        kind=TokenKind.CHAR_CLASS,
        text=pattern[start:i],
        ranges=tuple(ranges),
        negated=negated,
    )
    return token, i


def _literal_text(tokens: list[Token]) -> str | None:
    """Return the text of a segment made only of literal tokens."""
    if all(t.kind == TokenKind.LITERAL for t in tokens):
        return "".join(t.text for t in tokens)
    return None


def _build_segment(
    source: str,
    tokens: list[Token],
    literal: str | None,
    case_sensitive: bool,
) -> Segment:
    """Create a literal or wildcard segment from parsed tokens."""
    if literal is not None:
        return Segment(
            kind=SegmentKind.LITERAL,
            source=source,
            tokens=tuple(tokens),
            literal=literal,
        )

    flags = re.DOTALL if case_sensitive else re.DOTALL | re.IGNORECASE
    regex = re.compile("".join(_token_regex(t) for t in tokens), flags)
    return Segment(
        kind=SegmentKind.WILDCARD,
        source=source,
        tokens=tuple(tokens),
        regex=regex,
    )


def _token_regex(token: Token) -> str:
    """Translate a single token into a regular expression fragment."""
    if token.kind == TokenKind.LITERAL:
        return re.escape(token.text)
    if token.kind == TokenKind.ANY_CHAR:
        return "."
    if token.kind == TokenKind.ANY_RUN:
        return ".*"

    parts: list[str] = []
    for low, high in token.ranges:
        if low == high:
            parts.append(re.escape(low))
        else:
            parts.append(f"{re.escape(low)}-{re.escape(high)}")
    prefix = "^" if token.negated else ""
    return f"[{prefix}{''.join(parts)}]"
