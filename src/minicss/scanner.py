"""Character-level scanning primitives.

Each primitive takes the source and a cursor and returns the new cursor.
Failures raise and carry the offending offset; nothing here reports.
"""
from __future__ import annotations

from minicss.errors import InvalidIdentifier, UnexpectedSyntax

__all__ = ["skip_whitespace", "scan_identifier", "expect_char"]

_WHITESPACE = frozenset(" \t\n\r\x0b\x0c")


def _is_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def skip_whitespace(source: str, pos: int) -> int:
    """Advance past any ASCII whitespace. May return ``len(source)``."""
    end = len(source)
    while pos < end and source[pos] in _WHITESPACE:
        pos += 1
    return pos


def scan_identifier(source: str, pos: int) -> tuple[str, int]:
    """Consume one or more ASCII letters starting at ``pos``.

    Returns the matched text and the position just after it.
    """
    end = len(source)
    start = pos
    while pos < end and _is_letter(source[pos]):
        pos += 1
    if pos == start:
        raise InvalidIdentifier(offset=start)
    return source[start:pos], pos


def expect_char(source: str, pos: int, expected: str) -> int:
    """Consume exactly ``expected`` at ``pos``."""
    if pos < len(source) and source[pos] == expected:
        return pos + 1
    raise UnexpectedSyntax(expected, offset=pos)
