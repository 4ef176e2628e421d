"""Rewrite how the current process appears in ``ps`` and ``/proc``.

The command line shown by process listings is read straight from the argv
region of the process. `set_args` and `replace` overwrite its slots in place.
A slot can never grow: longer values are truncated to the slot length and
shorter ones are right-padded with spaces.

Typical use is masking secrets passed on the command line::

    procname.replace(password, "*" * len(password))

Writes are not synchronized with anything else reading the region.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence

from servkit.adapters.argv_region import ProcfsArgvRegion
from servkit.interfaces.argv_region import ArgvRegion, ArgvRegionUnavailableError

PAD = b" "


class ProcNameError(Exception):
    """Base class for process-name errors."""


class WrongSizeError(ProcNameError):
    """Raised when the new argument list length differs from argv's."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            "Given arguments must have the same size as process argv "
            f"({actual} != {expected})"
        )
        self.expected = expected
        self.actual = actual


class WrongArgumentsError(ProcNameError):
    """Raised when `replace` gets an empty argument."""

    def __init__(self) -> None:
        super().__init__("Arguments can't be empty")


class UnsupportedPlatformError(ProcNameError):
    """Raised when the argv region can't be reached on this platform."""


def fit(value: str | bytes, length: int) -> bytes:
    """Fit ``value`` into a slot of ``length`` bytes.

    Returns:
        bytes: The UTF-8 bytes of ``value`` truncated or space-padded to
        exactly ``length`` bytes. The slot keeps its own NUL terminator.
    """
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    if len(data) > length:
        data = data[:length]
    elif len(data) < length:
        data = data + PAD * (length - len(data))
    return data


class ProcessName:
    """Safe operations over an `ArgvRegion`."""

    def __init__(self, region: ArgvRegion) -> None:
        self._region = region

    def _slots(self) -> list[bytes]:
        try:
            return self._region.slots()
        except ArgvRegionUnavailableError as e:
            raise UnsupportedPlatformError(str(e)) from e

    def args(self) -> list[str]:
        """Return the arguments as currently shown by process listings."""
        return [s.decode("utf-8", errors="replace") for s in self._slots()]

    def set(self, args: Sequence[str]) -> None:
        """Overwrite every slot whose content differs from ``args[i]``.

        Raises:
            WrongSizeError: ``len(args)`` differs from the number of slots.
            UnsupportedPlatformError: The region is unavailable.
        """
        slots = self._slots()
        if len(args) != len(slots):
            raise WrongSizeError(len(slots), len(args))

        for i, (current, new) in enumerate(zip(slots, args)):
            if current == new.encode("utf-8"):
                continue
            self._region.write(i, fit(new, len(current)))

    def replace(self, old: str, new: str) -> None:
        """Overwrite every slot equal to ``old`` with ``new``.

        Raises:
            WrongArgumentsError: ``old`` or ``new`` is empty.
            UnsupportedPlatformError: The region is unavailable.
        """
        if not old or not new:
            raise WrongArgumentsError

        target = old.encode("utf-8")
        for i, current in enumerate(self._slots()):
            if current == target:
                self._region.write(i, fit(new, len(current)))


_lock = threading.Lock()
_default: ProcessName | None = None


def _get_default() -> ProcessName:
    global _default  # pylint: disable=global-statement
    with _lock:
        if _default is None:
            _default = ProcessName(ProcfsArgvRegion())
        return _default


def set_args(args: Sequence[str]) -> None:
    """Rewrite the current process' argv; see `ProcessName.set`."""
    _get_default().set(args)


def replace(old: str, new: str) -> None:
    """Replace matching arguments of the current process; see `ProcessName.replace`."""
    _get_default().replace(old, new)
