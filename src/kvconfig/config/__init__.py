"""Reader config loading and schema."""

from .loader import ConfigLoadError, load_config
from .schema import DEFAULT_CONFIG, ReaderConfig

__all__ = ["ConfigLoadError", "DEFAULT_CONFIG", "ReaderConfig", "load_config"]
