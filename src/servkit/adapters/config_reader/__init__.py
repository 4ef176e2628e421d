"""Configuration property reader adapters."""

from .ini import IniConfigReader
from .memory import MemoryConfigReader

__all__ = ["IniConfigReader", "MemoryConfigReader"]
