"""Read a key-value file into a :class:`Store`."""

from __future__ import annotations

import io
import logging
import os

from kvconfig.config.schema import DEFAULT_CONFIG, ReaderConfig

from .errors import (
    AllocFailedError,
    IncompleteReadError,
    OpenFailedError,
    ReadFailedError,
    SeekFailedError,
)
from .parser import load_bytes
from .store import Store

logger = logging.getLogger(__name__)


def load_file(path: str | os.PathLike[str], config: ReaderConfig | None = None) -> Store:
    """Load ``path`` in one bulk read and parse it with :func:`load_bytes`.

    The file handle is closed before returning, whether loading succeeds or
    raises.
    """
    if config is None:
        config = DEFAULT_CONFIG
    try:
        handle = open(path, "rb", buffering=0)
    except OSError as exc:
        raise OpenFailedError(path, exc.errno, exc.strerror or str(exc)) from exc

    with handle:
        data = read_all(handle, path, max_size=config.max_size)

    logger.debug("Read %d bytes from %s", len(data), os.fspath(path))
    return load_bytes(data, config)


def read_all(handle: io.RawIOBase, path: str | os.PathLike[str], max_size: int | None = None) -> bytes:
    """Measure ``handle`` by seeking, then fill an exact-size buffer in one read."""
    size = measure_size(handle, path)
    if max_size is not None and size > max_size:
        raise AllocFailedError(size, f"exceeds max_size of {max_size} bytes")

    try:
        buffer = bytearray(size)
    except MemoryError as exc:
        raise AllocFailedError(size) from exc

    try:
        count = handle.readinto(buffer) or 0
        at_eof = count >= size or not handle.read(1)
    except OSError as exc:
        raise ReadFailedError(path, exc.errno, exc.strerror or str(exc)) from exc

    if count < size:
        if not at_eof:
            raise ReadFailedError(path, None, f"short read of {count} bytes")
        raise IncompleteReadError(size, count)
    return bytes(buffer)


def measure_size(handle: io.RawIOBase, path: str | os.PathLike[str]) -> int:
    """Return the byte length of ``handle`` and rewind it to the start."""
    try:
        size = handle.seek(0, io.SEEK_END)
        handle.seek(0, io.SEEK_SET)
    except (OSError, ValueError) as exc:
        errno = getattr(exc, "errno", None)
        raise SeekFailedError(path, errno, getattr(exc, "strerror", None) or str(exc)) from exc
    return size
