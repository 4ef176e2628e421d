"""Parse ``NAME=LEVEL`` logger-level options.

Values come either from repeated ``-L`` flags or from one environment
variable holding a comma/space separated list. Both forms are flattened into
items and merged over `DEFAULT_LIB_LEVELS`, later items winning.
"""

import logging
import re

import click

# Libraries that are noisy at DEBUG and rarely interesting to servkit users.
DEFAULT_LIB_LEVELS = {"asyncio": logging.WARNING, "markdown_it": logging.WARNING}

_ITEM_SPLIT = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a Click option value into non-empty ``NAME=LEVEL`` items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _ITEM_SPLIT.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a name → level mapping.

    Level names are standard `logging` names, case-insensitive.

    Returns:
        dict[str, int]: `DEFAULT_LIB_LEVELS` updated with the given items.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or the level is
            unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelNamesMapping().get(level_name.strip().upper())
        if level is None:
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
