"""INI/KNF-style configuration reader.

Reads files made of ``[section]`` headers followed by ``key: value`` (or
``key = value``) properties, indented or not::

    [cron]
      cleanup: 0 3 * * *
      report: @daily

Properties are addressed as ``section:key``. Values are returned verbatim
(no interpolation); keys are case-sensitive.
"""

from __future__ import annotations

import configparser
from pathlib import Path

from servkit.interfaces.config_reader import ConfigReader

# pylint: disable=too-few-public-methods

PROPERTY_SEPARATOR = ":"


class IniConfigReader(ConfigReader):
    """ConfigReader backed by `configparser`."""

    def __init__(self, text: str) -> None:
        self._parser = configparser.ConfigParser(
            interpolation=None,
            delimiters=(":", "="),
            comment_prefixes=("#", ";"),
            inline_comment_prefixes=None,
            strict=True,
        )
        self._parser.optionxform = str  # type: ignore[assignment,method-assign]
        self._parser.read_string(text)

    @classmethod
    def from_path(cls, path: str | Path) -> IniConfigReader:
        """Read and parse a configuration file."""
        return cls(Path(path).read_text(encoding="utf-8"))

    def get_str(self, prop: str, default: str = "") -> str:
        section, sep, key = prop.partition(PROPERTY_SEPARATOR)
        if not sep:
            return default
        value = self._parser.get(section, key, fallback=None)
        if value is None or value == "":
            return default
        return value
