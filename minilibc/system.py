"""Thin process and file-descriptor primitives: write, read, getpid and sleep."""

from __future__ import annotations

import os
import time

__all__ = ["write", "read", "getpid", "sleep"]


def write(fd: int, data: bytes | str) -> int:
    """Write *data* to file descriptor *fd* and return the number of bytes written.

    Text is encoded as UTF-8.
    """
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return os.write(fd, payload)


def read(fd: int, count: int) -> bytes:
    """Read up to *count* bytes from file descriptor *fd*.

    Returns an empty bytes object at end of file.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    return os.read(fd, count)


def getpid() -> int:
    """Return the current process id."""
    return os.getpid()


def sleep(seconds: float) -> None:
    """Pause the calling thread for *seconds* seconds."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    time.sleep(seconds)