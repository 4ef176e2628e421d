"""Emoji alias dictionary.

Look up glyphs by their Markdown shortcode alias and back, search aliases, and
expand ``:alias:`` shortcodes in text.

Examples:
    ```py
    >>> get("zap")
    '⚡️'
    >>> emojize("Hi :smile:!")
    'Hi 😄!'
    ```
"""

from __future__ import annotations

import re
from types import MappingProxyType

from servkit.emoji.aliases import ALIASES

__all__ = ["emojize", "find", "get", "get_name"]

_SHORTCODE = re.compile(r":([a-z0-9_+\-]+):")


def _build_reverse() -> dict[str, str]:
    names: dict[str, str] = {}
    for alias, glyph in ALIASES:
        names.setdefault(glyph, alias)
    return names


_BY_ALIAS = MappingProxyType(dict(ALIASES))
_BY_GLYPH = MappingProxyType(_build_reverse())


def get(alias: str) -> str:
    """Return the glyph for ``alias``, or ``""`` if it is unknown."""
    return _BY_ALIAS.get(alias, "")


def get_name(glyph: str) -> str:
    """Return the canonical alias for ``glyph``, or ``""`` if it is unknown."""
    return _BY_GLYPH.get(glyph, "")


def find(substr: str) -> list[str]:
    """Return every alias containing ``substr``, in table order."""
    return [alias for alias, _ in ALIASES if substr in alias]


def emojize(text: str) -> str:
    """Replace every known ``:alias:`` shortcode in ``text`` with its glyph.

    Unknown shortcodes are left as they are. The closing colon of an unknown
    shortcode may still open the next one, so ``":nope:zap:"`` keeps ``":nope"``
    and expands ``":zap:"``.
    """
    parts: list[str] = []
    pos = 0

    while True:
        m = _SHORTCODE.search(text, pos)
        if m is None:
            break

        glyph = _BY_ALIAS.get(m.group(1))
        if glyph is None:
            parts.append(text[pos : m.end() - 1])
            pos = m.end() - 1
            continue

        parts.append(text[pos : m.start()])
        parts.append(glyph)
        pos = m.end()

    parts.append(text[pos:])
    return "".join(parts)
