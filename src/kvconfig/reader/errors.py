"""Exceptions raised while loading and querying a key-value store.

Exception hierarchy::

    LoadError
        OpenFailedError
        SeekFailedError
        AllocFailedError
        ReadFailedError
        IncompleteReadError
        ParseAllocFailedError
        StoreClosedError
"""

from __future__ import annotations

import os


class LoadError(RuntimeError):
    """Base exception for every reader failure."""


class _PathOSError(LoadError):
    """Failure carrying the OS error code of a file operation."""

    action: str = "access"

    def __init__(self, path: str | os.PathLike[str], errno: int | None, reason: str) -> None:
        super().__init__(f"Cannot {self.action} '{os.fspath(path)}': {reason}")
        self.path = os.fspath(path)
        self.errno = errno
        self.reason = reason


class OpenFailedError(_PathOSError):
    """File could not be opened (missing, unreadable, not a file)."""

    action = "open"


class SeekFailedError(_PathOSError):
    """File size could not be measured by seeking."""

    action = "measure size of"


class ReadFailedError(_PathOSError):
    """Bulk read failed with an OS error."""

    action = "read"


class AllocFailedError(LoadError):
    """Buffer for the file contents could not be obtained.

    Attributes:
        size: Number of bytes that were requested.
    """

    def __init__(self, size: int, reason: str = "out of memory") -> None:
        super().__init__(f"Cannot allocate {size} bytes: {reason}")
        self.size = size
        self.reason = reason


class IncompleteReadError(LoadError):
    """End of stream was reached before the measured size was read.

    Attributes:
        expected: Size measured before reading.
        actual: Bytes actually read.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Incomplete read: got {actual} of {expected} bytes")
        self.expected = expected
        self.actual = actual


class ParseAllocFailedError(LoadError):
    """Entry table could not be allocated while parsing."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Cannot allocate entry table for {size} bytes of input")
        self.size = size


class StoreClosedError(LoadError):
    """Store was used after ``close()``."""

    def __init__(self) -> None:
        super().__init__("Store is closed")


__all__ = [
    "AllocFailedError",
    "IncompleteReadError",
    "LoadError",
    "OpenFailedError",
    "ParseAllocFailedError",
    "ReadFailedError",
    "SeekFailedError",
    "StoreClosedError",
]
