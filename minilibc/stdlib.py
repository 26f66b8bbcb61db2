"""Numeric string conversion, a linear congruential generator and a bump allocator."""

from __future__ import annotations

__all__ = [
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
    "RAND_MAX",
    "atoi",
    "atol",
    "atof",
    "Random",
    "MemoryPool",
]

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
RAND_MAX = 32767

_DIGITS = "0123456789"
_UINT_MASK = 0xFFFFFFFF
_DEFAULT_POOL_SIZE = 1024 * 1024


def _split_sign(text: str) -> tuple[int, str]:
    """Skip leading spaces and an optional sign; return the sign and the rest."""
    rest = text.lstrip(" ")
    if rest.startswith("-"):
        return -1, rest[1:]
    if rest.startswith("+"):
        return 1, rest[1:]
    return 1, rest


def _leading_digits(text: str) -> str:
    end = 0
    for ch in text:
        if ch not in _DIGITS:
            break
        end += 1
    return text[:end]


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring what follows.

    Only spaces are skipped before the optional sign.  Returns 0 when
    no digits are found.
    """
    sign, rest = _split_sign(text)
    digits = _leading_digits(rest)
    return sign * int(digits) if digits else 0


def atol(text: str) -> int:
    """Parse a leading decimal integer; same rules as :func:`atoi`."""
    return atoi(text)


def atof(text: str) -> float:
    """Parse a leading decimal number with an optional fractional part.

    Exponents are not recognised.  Returns 0.0 when nothing is parsed.
    """
    sign, rest = _split_sign(text)
    whole = _leading_digits(rest)
    rest = rest[len(whole):]
    result = 0.0
    for ch in whole:
        result = result * 10.0 + (ord(ch) - ord("0"))
    fraction = 0.0
    divisor = 1.0
    if rest.startswith("."):
        for ch in _leading_digits(rest[1:]):
            fraction = fraction * 10.0 + (ord(ch) - ord("0"))
            divisor *= 10.0
    return sign * (result + fraction / divisor)


class Random:
    """Linear congruential generator yielding values in ``[0, RAND_MAX]``."""

    def __init__(self, seed: int = 1):
        self._state = seed & _UINT_MASK

    def seed(self, seed: int) -> None:
        """Restart the sequence from *seed*."""
        self._state = seed & _UINT_MASK

    def rand(self) -> int:
        """Return the next pseudo-random number."""
        self._state = (self._state * 1103515245 + 12345) & _UINT_MASK
        return (self._state >> 16) & RAND_MAX


class MemoryPool:
    """Fixed-size arena handing out blocks in order; freed memory is never reused."""

    def __init__(self, size: int = _DEFAULT_POOL_SIZE):
        if size < 0:
            raise ValueError("pool size must not be negative")
        self._pool = bytearray(size)
        self._view = memoryview(self._pool)
        self.used = 0

    @property
    def size(self) -> int:
        """Total capacity of the pool in bytes."""
        return len(self._pool)

    @property
    def available(self) -> int:
        """Bytes not yet handed out."""
        return self.size - self.used

    def malloc(self, size: int) -> memoryview | None:
        """Return a writable block of *size* bytes.

        Returns ``None`` for a zero-sized request and raises
        :class:`MemoryError` when the pool cannot hold the block.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        if size == 0:
            return None
        if self.used + size > self.size:
            raise MemoryError(f"pool exhausted: {size} bytes requested, {self.available} left")
        block = self._view[self.used:self.used + size]
        self.used += size
        return block

    def calloc(self, count: int, size: int) -> memoryview | None:
        """Return a zero-filled block of *count* elements of *size* bytes."""
        if count < 0 or size < 0:
            raise ValueError("count and size must not be negative")
        block = self.malloc(count * size)
        if block is not None:
            block[:] = bytes(len(block))
        return block

    def realloc(self, block: memoryview | None, size: int) -> memoryview | None:
        """Return a new block of *size* bytes holding the start of *block*.

        With no *block* this is :meth:`malloc`; with a zero *size* the block
        is freed and ``None`` returned.
        """
        if block is None:
            return self.malloc(size)
        if size == 0:
            self.free(block)
            return None
        new_block = self.malloc(size)
        if new_block is not None:
            count = min(len(block), size)
            new_block[:count] = block[:count]
        return new_block

    def free(self, block: memoryview | None) -> None:
        """Release *block*; the arena does not reclaim space."""