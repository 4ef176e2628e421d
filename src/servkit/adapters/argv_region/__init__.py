"""Argv region adapters."""

from .memory import MemoryArgvRegion
from .procfs import ProcfsArgvRegion

__all__ = ["MemoryArgvRegion", "ProcfsArgvRegion"]
