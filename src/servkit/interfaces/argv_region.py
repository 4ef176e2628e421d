"""Interface for the process argument-vector region.

The argv region is the contiguous block of memory the loader fills with the
NUL-terminated command-line arguments of a process. Tools such as ``ps`` and
``/proc/<pid>/cmdline`` read it directly, so rewriting it in place changes how
the process is displayed. Slot boundaries are fixed when the process starts:
an implementation may only overwrite bytes inside an existing slot.
"""

import abc


class ArgvRegion(abc.ABC):
    """Contract for reading and overwriting argv slots in place."""

    @abc.abstractmethod
    def slots(self) -> list[bytes]:
        """Return the current content of every argument slot.

        Returns:
            list[bytes]: One entry per argument, without the terminating NUL.
        """

    @abc.abstractmethod
    def write(self, index: int, data: bytes) -> None:
        """Overwrite slot ``index`` starting at its first byte.

        Args:
            index: Zero-based slot index.
            data: Bytes to copy; never longer than the slot plus its NUL.

        Raises:
            IndexError: If ``index`` does not name a slot.
        """


class ArgvRegionUnavailableError(Exception):
    """Raised when the argv region cannot be located on this platform."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Process argv region is unavailable: {reason}")
        self.reason = reason
