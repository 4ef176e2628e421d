"""LS_COLORS parsing and file-name colorizing.

Parses the GNU ``dircolors`` format found in ``LS_COLORS``
(``key=SGR:key=SGR:...``) and wraps file names in the matching ANSI SGR
sequence. Keys are either literal tokens (``di``, ``ex``, ``rs``...) or
shell-style globs (``*.txt``). Glob keys are tried in the order they appear in
``LS_COLORS``, so the first matching rule wins.

The module keeps one process-wide `ColorMap` built lazily from the
environment on first use; `reset` drops it so the next call rebuilds it.

Examples:
    ```py
    >>> cmap = ColorMap.from_string("*.txt=38;5;178")
    >>> cmap.colorize("notes.txt")
    '\\x1b[38;5;178mnotes.txt\\x1b[0m'
    ```
"""

from __future__ import annotations

import posixpath
import threading
from fnmatch import fnmatchcase

from servkit import config

# Reserved keys understood by dircolors
RESET = "rs"
DIR = "di"
LINK = "ln"
FIFO = "pi"
SOCK = "so"
BLK = "bd"
CHR = "cd"
STICKY = "st"
EXEC = "ex"

SGR_START = "\x1b["
SGR_END = "m"
SGR_RESET = "\x1b[0m"

ENTRY_SEPARATOR = ":"
VALUE_SEPARATOR = "="
PARAM_SEPARATOR = ";"


class ColorMap:
    """Ordered mapping of LS_COLORS keys to SGR parameter strings."""

    def __init__(self, entries: dict[str, str] | None = None, disabled: bool = False) -> None:
        self._entries = dict(entries or {})
        self._disabled = disabled

    @classmethod
    def from_string(cls, ls_colors: str, disabled: bool = False) -> ColorMap:
        """Build a map from a raw ``LS_COLORS`` value.

        Only entries holding both ``=`` and ``;`` are kept, so single-code
        entries such as ``di=01`` or ``rs=0`` are ignored. Each kept entry is
        split at its first ``=``. A non-empty value always carries ``rs=0``.
        """
        if disabled or not ls_colors:
            return cls(disabled=disabled)

        entries = {RESET: "0"}
        for item in ls_colors.split(ENTRY_SEPARATOR):
            if VALUE_SEPARATOR not in item or PARAM_SEPARATOR not in item:
                continue
            key, _, value = item.partition(VALUE_SEPARATOR)
            entries[key] = value

        return cls(entries)

    @classmethod
    def from_env(cls) -> ColorMap:
        """Build a map from ``LS_COLORS``, honoring ``NO_COLOR``."""
        return cls.from_string(config.get_ls_colors(), disabled=config.colors_disabled())

    @property
    def disabled(self) -> bool:
        """Whether colors are disabled altogether."""
        return self._disabled

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def items(self) -> list[tuple[str, str]]:
        """Return ``(key, value)`` pairs in LS_COLORS order."""
        return list(self._entries.items())

    def get_color(self, name: str) -> str:
        """Return the SGR sequence for a file name, or ``""`` if none applies."""
        if self._disabled or not self._entries:
            return ""

        if value := self._entries.get(name):
            return SGR_START + value + SGR_END

        for glob, value in self._entries.items():
            if fnmatchcase(name, glob):
                return SGR_START + value + SGR_END

        return ""

    def colorize(self, name: str) -> str:
        """Wrap ``name`` in its color sequence and a reset."""
        color = self.get_color(name)
        if not color:
            return name
        return color + name + SGR_RESET

    def colorize_path(self, path: str) -> str:
        """Color a full path by the rules for its base name."""
        color = self.get_color(posixpath.basename(path))
        if not color:
            return path
        return color + path + SGR_RESET


_lock = threading.Lock()
_default: ColorMap | None = None


def get_map() -> ColorMap:
    """Return the process-wide map, building it from the environment once."""
    global _default  # pylint: disable=global-statement
    if _default is None:
        with _lock:
            if _default is None:
                _default = ColorMap.from_env()
    return _default


def reset() -> None:
    """Forget the process-wide map; the next lookup re-reads the environment."""
    global _default  # pylint: disable=global-statement
    with _lock:
        _default = None


def get_color(name: str) -> str:
    """Return the SGR sequence for ``name`` from the process-wide map."""
    return get_map().get_color(name)


def colorize(name: str) -> str:
    """Colorize ``name`` with the process-wide map."""
    return get_map().colorize(name)


def colorize_path(path: str) -> str:
    """Colorize ``path`` (by its base name) with the process-wide map."""
    return get_map().colorize_path(path)
