"""ASCII character classification and case conversion.

Each function takes either a code point (``int``) or a one-character
string.  Anything outside ASCII 0-127 belongs to no class.
"""

from __future__ import annotations

import enum

__all__ = [
    "isalnum",
    "isalpha",
    "isdigit",
    "islower",
    "isupper",
    "isspace",
    "isprint",
    "ispunct",
    "iscntrl",
    "isxdigit",
    "tolower",
    "toupper",
]


class _Class(enum.IntFlag):
    ALNUM = 0x01
    ALPHA = 0x02
    DIGIT = 0x04
    LOWER = 0x08
    UPPER = 0x10
    SPACE = 0x20
    PRINT = 0x40
    PUNCT = 0x80
    CTRL = 0x100
    XDIGIT = 0x200


_NONE = _Class(0)


def _classify(code: int) -> _Class:
    if code < 32:
        flags = _Class.CTRL
        if 9 <= code <= 13:
            flags |= _Class.SPACE
        return flags
    if code == 127:
        return _Class.CTRL
    if code == 32:
        return _Class.SPACE | _Class.PRINT
    if 48 <= code <= 57:
        return _Class.DIGIT | _Class.ALNUM | _Class.PRINT | _Class.XDIGIT
    if 65 <= code <= 90:
        flags = _Class.ALPHA | _Class.ALNUM | _Class.UPPER | _Class.PRINT
        return flags | _Class.XDIGIT if code <= 70 else flags
    if 97 <= code <= 122:
        flags = _Class.ALPHA | _Class.ALNUM | _Class.LOWER | _Class.PRINT
        return flags | _Class.XDIGIT if code <= 102 else flags
    return _Class.PUNCT | _Class.PRINT


_TABLE = tuple(_classify(code) for code in range(128))

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def _has(c: int | str, flag: _Class) -> bool:
    code = _code(c)
    flags = _TABLE[code] if 0 <= code < 128 else _NONE
    return bool(flags & flag)


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return _has(c, _Class.ALNUM)


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    return _has(c, _Class.ALPHA)


def isdigit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return _has(c, _Class.DIGIT)


def islower(c: int | str) -> bool:
    """True for an ASCII lower-case letter."""
    return _has(c, _Class.LOWER)


def isupper(c: int | str) -> bool:
    """True for an ASCII upper-case letter."""
    return _has(c, _Class.UPPER)


def isspace(c: int | str) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    return _has(c, _Class.SPACE)


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return _has(c, _Class.PRINT)


def ispunct(c: int | str) -> bool:
    """True for ASCII punctuation."""
    return _has(c, _Class.PUNCT)


def iscntrl(c: int | str) -> bool:
    """True for an ASCII control character."""
    return _has(c, _Class.CTRL)


def isxdigit(c: int | str) -> bool:
    """True for a hexadecimal digit."""
    return _has(c, _Class.XDIGIT)


def _shift(c: int | str, offset: int) -> int | str:
    code = _code(c) + offset
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Lower-case an upper-case ASCII letter; return anything else unchanged."""
    return _shift(c, _CASE_OFFSET) if isupper(c) else c


def toupper(c: int | str) -> int | str:
    """Upper-case a lower-case ASCII letter; return anything else unchanged."""
    return _shift(c, -_CASE_OFFSET) if islower(c) else c