"""Fixtures for config_reader contract tests."""

from collections.abc import Callable, Iterable, Mapping

import pytest

from servkit.adapters.config_reader import IniConfigReader, MemoryConfigReader
from servkit.interfaces.config_reader import ConfigReader

ReaderFactory = Callable[[Mapping[str, str]], ConfigReader]


def _ini_reader(values: Mapping[str, str]) -> ConfigReader:
    sections: dict[str, list[str]] = {}
    for prop, value in values.items():
        section, _, key = prop.partition(":")
        sections.setdefault(section, []).append(f"  {key}: {value}")
    text = "\n".join(
        f"[{section}]\n" + "\n".join(lines) for section, lines in sections.items()
    )
    return IniConfigReader(text)


@pytest.fixture(params=["memory", "ini"])
def reader_factory(request: pytest.FixtureRequest) -> Iterable[ReaderFactory]:
    """Return a factory building a ConfigReader over ``section:key`` values.

    Supported params:
      - `"memory"` → MemoryConfigReader
      - `"ini"` → IniConfigReader over a generated KNF document
    """
    match request.param:
        case "memory":
            yield MemoryConfigReader
        case "ini":
            yield _ini_reader
        case _:
            raise ValueError(f"unknown config reader type: {request.param}")
