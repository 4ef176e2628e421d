"""Linux argv region adapter.

Locates the argv block of the current process through the ``arg_start`` and
``arg_end`` fields of ``/proc/self/stat`` (fields 48 and 49, Linux >= 3.5) and
reads/writes it with ``ctypes``. This is raw access to loader-owned memory:
writes never cross a slot boundary, and the layout is captured once because
it cannot change for the lifetime of the process.
"""

from __future__ import annotations

import ctypes
import sys
import threading
from pathlib import Path

from servkit.interfaces.argv_region import ArgvRegion, ArgvRegionUnavailableError

STAT_PATH = Path("/proc/self/stat")
ARG_START_FIELD = 48
ARG_END_FIELD = 49
# fields after the ")" closing the command name start at field 3
_FIRST_FIELD_AFTER_COMM = 3


def read_arg_bounds(stat_text: str) -> tuple[int, int]:
    """Extract ``(arg_start, arg_end)`` from the text of ``/proc/<pid>/stat``.

    Raises:
        ArgvRegionUnavailableError: If the fields are missing or malformed.
    """
    _, sep, rest = stat_text.rpartition(")")
    fields = rest.split()
    if not sep or len(fields) <= ARG_END_FIELD - _FIRST_FIELD_AFTER_COMM:
        raise ArgvRegionUnavailableError("stat has no arg_start/arg_end fields")
    try:
        start = int(fields[ARG_START_FIELD - _FIRST_FIELD_AFTER_COMM])
        end = int(fields[ARG_END_FIELD - _FIRST_FIELD_AFTER_COMM])
    except ValueError as e:
        raise ArgvRegionUnavailableError("malformed arg_start/arg_end") from e
    if start <= 0 or end <= start:
        raise ArgvRegionUnavailableError(f"empty region {start:#x}-{end:#x}")
    return start, end


class ProcfsArgvRegion(ArgvRegion):
    """ArgvRegion for the running process on Linux."""

    def __init__(self, stat_path: Path = STAT_PATH) -> None:
        self._stat_path = stat_path
        self._lock = threading.Lock()
        self._start = 0
        self._layout: list[tuple[int, int]] | None = None

    def _ensure_layout(self) -> list[tuple[int, int]]:
        with self._lock:
            if self._layout is not None:
                return self._layout
            if not sys.platform.startswith("linux"):
                raise ArgvRegionUnavailableError(f"unsupported platform {sys.platform}")
            try:
                stat_text = self._stat_path.read_text(encoding="utf-8")
            except OSError as e:
                raise ArgvRegionUnavailableError(str(e)) from e

            start, end = read_arg_bounds(stat_text)
            raw = ctypes.string_at(start, end - start)

            if raw.endswith(b"\0"):
                raw = raw[:-1]

            layout = []
            offset = 0
            for arg in raw.split(b"\0"):
                layout.append((offset, len(arg)))
                offset += len(arg) + 1

            self._start = start
            self._layout = layout
            return layout

    def slots(self) -> list[bytes]:
        layout = self._ensure_layout()
        return [ctypes.string_at(self._start + o, n) for o, n in layout]

    def write(self, index: int, data: bytes) -> None:
        offset, length = self._ensure_layout()[index]
        if len(data) > length + 1:
            raise ValueError(f"{len(data)} bytes do not fit slot {index} ({length})")
        ctypes.memmove(self._start + offset, data, len(data))
