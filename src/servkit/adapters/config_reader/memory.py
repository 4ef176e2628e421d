"""In-memory configuration reader."""

from collections.abc import Mapping

from servkit.interfaces.config_reader import ConfigReader

# pylint: disable=too-few-public-methods


class MemoryConfigReader(ConfigReader):
    """ConfigReader over a plain mapping of property name to value.

    Non-string values are rendered with `str`; `None` counts as unset.
    """

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values = dict(values or {})

    def get_str(self, prop: str, default: str = "") -> str:
        value = self._values.get(prop)
        if value is None:
            return default
        return str(value)
