"""NUL-terminated string helpers: length, copy, concatenation, comparison and search.

Every function treats the first ``"\\0"`` in a string as its end, as a
C-style string would.
"""

from __future__ import annotations

__all__ = ["length", "copy", "concat", "compare", "find"]

_NUL = "\0"


def _terminated(text: str) -> str:
    """Return the part of *text* before the first NUL character."""
    return text.split(_NUL, 1)[0]


def length(text: str) -> int:
    """Return the number of characters before the terminator."""
    return len(_terminated(text))


def copy(src: str) -> str:
    """Return a copy of *src* up to its terminator."""
    return _terminated(src)


def concat(dest: str, src: str) -> str:
    """Return *src* appended to *dest*, each cut at its terminator."""
    return _terminated(dest) + _terminated(src)


def compare(first: str, second: str) -> int:
    """Compare two strings code point by code point.

    Returns 0 when they are equal, a positive number when *first* sorts
    after *second* and a negative number when it sorts before.  The
    value is the difference of the first pair of characters that differ;
    the end of a string counts as code point 0.
    """
    a = _terminated(first)
    b = _terminated(second)
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) == len(b):
        return 0
    if len(a) > len(b):
        return ord(a[len(b)])
    return -ord(b[len(a)])


def find(text: str, sub: str) -> int | None:
    """Return the index of the first occurrence of *sub* in *text*.

    An empty *sub* matches at index 0.  Returns ``None`` when there is
    no match.
    """
    haystack = _terminated(text)
    needle = _terminated(sub)
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index