"""Minimal formatted console output and input with ``%d`` and ``%s`` directives."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

__all__ = ["ScanResult", "Console", "format_int", "format_message"]

_WHITESPACE = " \t\n\r"
_MAX_TEXT = 99


@dataclass(frozen=True)
class ScanResult:
    """Outcome of :meth:`Console.scan`.

    ``count`` is the number of directives that read a value, ``number``
    the last integer read (``None`` if none) and ``text`` the last
    string read (``None`` if the format has no ``%s``).
    """

    count: int
    number: int | None = None
    text: str | None = None


def format_int(num: int) -> str:
    """Return the decimal representation of *num*."""
    return str(num)


def format_message(fmt: str, num: int, text: str) -> str:
    """Expand ``%d`` to *num* and ``%s`` to *text* in *fmt*.

    Any other character after ``%`` is kept together with the ``%``.
    """
    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, "")
        if spec == "d":
            parts.append(format_int(num))
        elif spec == "s":
            parts.append(text)
        else:
            parts.append("%" + spec)
    return "".join(parts)


class Console:
    """Character-level console bound to an output and an input text stream."""

    def __init__(self, stdout: TextIO | None = None, stdin: TextIO | None = None):
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stdin = stdin if stdin is not None else sys.stdin

    def print_char(self, c: str) -> None:
        """Write a single character."""
        if len(c) != 1:
            raise ValueError("expected a single character")
        self.stdout.write(c)

    def print_int(self, num: int) -> None:
        """Write *num* in decimal."""
        self.stdout.write(format_int(num))

    def print_str(self, text: str) -> None:
        """Write *text* as it is."""
        self.stdout.write(text)

    def print(self, fmt: str, num: int, text: str) -> None:
        """Write *fmt* with ``%d`` and ``%s`` expanded."""
        self.stdout.write(format_message(fmt, num, text))

    def getchar(self) -> str:
        """Read one character; return an empty string at end of input."""
        return self.stdin.read(1)

    def _skip_whitespace(self) -> str:
        c = self.getchar()
        while c and c in _WHITESPACE:
            c = self.getchar()
        return c

    def _scan_int(self) -> int | None:
        c = self._skip_whitespace()
        sign = 1
        if c == "-":
            sign = -1
            c = self.getchar()
        if not ("0" <= c <= "9" and c):
            return None
        digits = []
        while c and "0" <= c <= "9":
            digits.append(c)
            c = self.getchar()
        return sign * int("".join(digits))

    def _scan_str(self) -> str:
        c = self._skip_whitespace()
        chars: list[str] = []
        while c and c not in _WHITESPACE and len(chars) < _MAX_TEXT:
            chars.append(c)
            c = self.getchar()
        return "".join(chars)

    def scan(self, fmt: str) -> ScanResult:
        """Read values from input as directed by ``%d`` and ``%s`` in *fmt*.

        Other characters in *fmt* are ignored.  Each directive skips
        leading whitespace; the character that ends a value is consumed.
        A string holds at most 99 characters.
        """
        count = 0
        number: int | None = None
        text: str | None = None
        chars = iter(fmt)
        for ch in chars:
            if ch != "%":
                continue
            spec = next(chars, "")
            if spec == "d":
                value = self._scan_int()
                if value is not None:
                    number = value
                    count += 1
            elif spec == "s":
                text = self._scan_str()
                if text:
                    count += 1
        return ScanResult(count=count, number=number, text=text)