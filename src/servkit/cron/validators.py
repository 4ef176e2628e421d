"""Configuration validators for cron expressions.

Validators share the ``(config, prop, value)`` calling convention: they read
``prop`` from ``config`` themselves, return None when the property is fine and
raise otherwise. ``value`` is accepted for signature compatibility and unused.

Examples:
    ```py
    reader = IniConfigReader.from_path("/etc/myapp.knf")
    for prop in ("cron:cleanup", "cron:report"):
        validators.expression(reader, prop)
    ```
"""

from __future__ import annotations

from servkit.interfaces.config_reader import ConfigReader

from .errors import CronParseError, InvalidCronPropertyError
from .expr import parse


def expression(config: ConfigReader, prop: str, value: object = None) -> None:
    """Check that ``prop`` holds a valid cron expression; empty is valid.

    Raises:
        InvalidCronPropertyError: If the expression can't be parsed.
    """
    del value

    raw = config.get_str(prop)
    if not raw:
        return

    try:
        parse(raw)
    except CronParseError as e:
        raise InvalidCronPropertyError(prop, e) from e
