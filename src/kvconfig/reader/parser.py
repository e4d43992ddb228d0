"""Split a raw buffer into ``name=value`` entries."""

from __future__ import annotations

import logging

from kvconfig.config.schema import DEFAULT_CONFIG, ReaderConfig

from .errors import ParseAllocFailedError
from .store import Span, Store, as_bytes

logger = logging.getLogger(__name__)


def load_bytes(
    buffer: bytes | bytearray | memoryview | str,
    config: ReaderConfig | None = None,
) -> Store:
    """Parse ``buffer`` into a :class:`Store`.

    Lines are split on ``config.line_separator``; empty lines yield nothing.
    Each line is split once on ``config.key_separator``. Whitespace and NUL
    bytes are kept verbatim.
    """
    if config is None:
        config = DEFAULT_CONFIG
    try:
        data = as_bytes(buffer)
        spans = split_entries(data, config.line_separator_bytes, config.key_separator_bytes)
        store = Store(data, spans)
    except MemoryError as exc:
        raise ParseAllocFailedError(len(buffer)) from exc

    logger.debug("Parsed %d entries from %d bytes", len(spans), len(data))
    return store


def split_entries(data: bytes, line_separator: bytes, key_separator: bytes) -> list[Span]:
    """Return entry spans for ``data`` in buffer order."""
    spans: list[Span] = []
    end = len(data)
    start = 0
    while start < end:
        stop = data.find(line_separator, start)
        if stop == -1:
            stop = end
        if stop > start:
            split = data.find(key_separator, start, stop)
            if split == -1:
                spans.append((start, stop, None, stop))
            else:
                spans.append((start, split, split + len(key_separator), stop))
        start = stop + len(line_separator)
    return spans
