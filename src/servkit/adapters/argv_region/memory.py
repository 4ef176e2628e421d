"""In-memory argv region adapter.

Mirrors the layout of a real argv region (NUL-terminated arguments packed
into one buffer) without touching process memory. Primarily for tests.
"""

from collections.abc import Sequence

from servkit.interfaces.argv_region import ArgvRegion


class MemoryArgvRegion(ArgvRegion):
    """ArgvRegion backed by a bytearray."""

    def __init__(self, args: Sequence[str | bytes]) -> None:
        encoded = [a.encode("utf-8") if isinstance(a, str) else bytes(a) for a in args]
        self._buffer = bytearray(b"\0".join(encoded) + b"\0")
        self._layout: list[tuple[int, int]] = []
        offset = 0
        for arg in encoded:
            self._layout.append((offset, len(arg)))
            offset += len(arg) + 1

    @property
    def buffer(self) -> bytes:
        """Raw region content, NUL separators included."""
        return bytes(self._buffer)

    def slots(self) -> list[bytes]:
        return [bytes(self._buffer[o : o + n]) for o, n in self._layout]

    def write(self, index: int, data: bytes) -> None:
        offset, length = self._layout[index]
        if len(data) > length + 1:
            raise ValueError(f"{len(data)} bytes do not fit slot {index} ({length})")
        self._buffer[offset : offset + len(data)] = data
