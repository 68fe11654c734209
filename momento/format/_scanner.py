"""Longest-match scanner shared by the macro expander and token engine.

A pattern is split into pieces, left to right:

    bracket  ``[`` up to the last ``]`` before the next ``[``
    escape   a backslash plus the longest token (or single character)
             after it; a lone trailing backslash is an escape of nothing
    token    the longest vocabulary entry starting at this position
    char     any other single character

Both consumers run over the same grammar and differ only in their
vocabulary and in what they emit for each piece.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import AbstractSet, NamedTuple

BRACKET = "bracket"
ESCAPE = "escape"
TOKEN = "token"
CHAR = "char"


class Piece(NamedTuple):
    """One scanned piece: its kind and the raw text it covers."""

    kind: str
    text: str

    @property
    def literal(self) -> str:
        """Text to emit when the piece is copied as a literal.

        Brackets and escaping backslashes are removed.
        """
        if self.kind == BRACKET:
            return self.text[1:-1]
        if self.kind == ESCAPE:
            return self.text[1:]
        return self.text


def bracket_run_end(pattern: str, start: int) -> int:
    """Return the index just past the bracket run opening at ``start``.

    Returns -1 when no ``]`` closes the run before the next ``[``, in
    which case the ``[`` is an ordinary character.

    Examples:
        >>> bracket_run_end("[at] LT", 0)
        4
        >>> bracket_run_end("[a]b] [c]", 0)
        5
        >>> bracket_run_end("[a [b]", 0)
        -1
    """
    next_open = pattern.find("[", start + 1)
    limit = len(pattern) if next_open == -1 else next_open
    close = pattern.rfind("]", start + 1, limit)
    return -1 if close == -1 else close + 1


def match_token(pattern: str, pos: int, vocabulary: AbstractSet[str], longest: int) -> str | None:
    """Return the longest vocabulary entry starting at ``pos``, or None."""
    for length in range(min(longest, len(pattern) - pos), 0, -1):
        candidate = pattern[pos : pos + length]
        if candidate in vocabulary:
            return candidate
    return None


def scan(pattern: str, vocabulary: AbstractSet[str]) -> Iterator[Piece]:
    """Split ``pattern`` into pieces over ``vocabulary``.

    Examples:
        >>> [tuple(p) for p in scan("[Q]Q\\\\Qx", {"Q", "Qo"})]
        [('bracket', '[Q]'), ('token', 'Q'), ('escape', '\\\\Q'), ('char', 'x')]
    """
    longest = max((len(entry) for entry in vocabulary), default=0)
    pos = 0
    end = len(pattern)

    while pos < end:
        char = pattern[pos]

        if char == "[":
            stop = bracket_run_end(pattern, pos)
            if stop != -1:
                yield Piece(BRACKET, pattern[pos:stop])
                pos = stop
                continue

        elif char == "\\":
            escaped = match_token(pattern, pos + 1, vocabulary, longest)
            if escaped is not None:
                stop = pos + 1 + len(escaped)
            else:
                stop = min(pos + 2, end)
            yield Piece(ESCAPE, pattern[pos:stop])
            pos = stop
            continue

        token = match_token(pattern, pos, vocabulary, longest)
        if token is not None:
            yield Piece(TOKEN, token)
            pos += len(token)
            continue

        yield Piece(CHAR, char)
        pos += 1


__all__ = [
    "BRACKET",
    "CHAR",
    "ESCAPE",
    "TOKEN",
    "Piece",
    "bracket_run_end",
    "match_token",
    "scan",
]
