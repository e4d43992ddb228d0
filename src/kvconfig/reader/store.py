"""Read-only store of ``name=value`` entries backed by a single buffer."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

from .errors import StoreClosedError

# (name_start, name_end, value_start, value_end); value_start is None when
# the line had no key separator.
Span = tuple[int, int, int | None, int]


class LookupStatus(Enum):
    """Outcome of a store lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    NO_VALUE = "no_value"


@dataclass(frozen=True)
class Lookup:
    """Lookup result; ``value`` is set only when ``status`` is FOUND."""

    status: LookupStatus
    value: bytes | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    def __bool__(self) -> bool:
        return self.found


NOT_FOUND = Lookup(LookupStatus.NOT_FOUND)
NO_VALUE = Lookup(LookupStatus.NO_VALUE)


@dataclass(frozen=True)
class Entry:
    """One parsed line: ``name`` and its value, or ``None`` without a separator."""

    name: bytes
    value: bytes | None


def as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    """Return ``data`` as immutable bytes, encoding text as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class Store:
    """Ordered, immutable collection of entries sharing one owned buffer.

    Instances are produced by :func:`load_bytes` and :func:`load_file`.
    Entries are spans into the buffer, so no per-entry strings exist until a
    value is handed out. Lookups return the first entry whose name matches
    exactly. Use as a context manager, or call :meth:`close` once when done.
    """

    def __init__(self, buffer: bytes, spans: Sequence[Span]) -> None:
        self._buffer: bytes | None = buffer
        self._spans: tuple[Span, ...] | None = tuple(spans)

    def __enter__(self) -> Store:
        self._check_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.closed:
            self.close()

    def __len__(self) -> int:
        return len(self._check_open()[1])

    def __iter__(self) -> Iterator[Entry]:
        buffer, spans = self._check_open()
        for name_start, name_end, value_start, value_end in spans:
            value = None if value_start is None else buffer[value_start:value_end]
            yield Entry(buffer[name_start:name_end], value)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (bytes, bytearray, memoryview, str)):
            return False
        return self.get(name).status is not LookupStatus.NOT_FOUND

    def __repr__(self) -> str:
        if self.closed:
            return "<Store closed>"
        return f"<Store entries={len(self)} bytes={len(self._buffer)}>"

    @property
    def closed(self) -> bool:
        return self._buffer is None

    def get(self, name: bytes | bytearray | memoryview | str) -> Lookup:
        """Look up ``name`` byte-for-byte; the first matching entry wins."""
        buffer, spans = self._check_open()
        key = as_bytes(name)
        size = len(key)
        for name_start, name_end, value_start, value_end in spans:
            if name_end - name_start != size or not buffer.startswith(key, name_start):
                continue
            if value_start is None:
                return NO_VALUE
            return Lookup(LookupStatus.FOUND, buffer[value_start:value_end])
        return NOT_FOUND

    def names(self) -> list[bytes]:
        """Return entry names in buffer order, duplicates included."""
        return [entry.name for entry in self]

    def close(self) -> None:
        """Release the owned buffer; the store is unusable afterwards."""
        self._check_open()
        self._buffer = None
        self._spans = None

    def _check_open(self) -> tuple[bytes, tuple[Span, ...]]:
        if self._buffer is None or self._spans is None:
            raise StoreClosedError()
        return self._buffer, self._spans
