"""Key-value file reader and lookup store."""

from .errors import (
    AllocFailedError,
    IncompleteReadError,
    LoadError,
    OpenFailedError,
    ParseAllocFailedError,
    ReadFailedError,
    SeekFailedError,
    StoreClosedError,
)
from .loader import load_file
from .parser import load_bytes
from .store import Entry, Lookup, LookupStatus, Store

__all__ = [
    "AllocFailedError",
    "Entry",
    "IncompleteReadError",
    "LoadError",
    "Lookup",
    "LookupStatus",
    "OpenFailedError",
    "ParseAllocFailedError",
    "ReadFailedError",
    "SeekFailedError",
    "Store",
    "StoreClosedError",
    "load_bytes",
    "load_file",
]
