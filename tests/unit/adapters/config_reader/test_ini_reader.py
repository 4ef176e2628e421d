"""Unit tests for the INI/KNF configuration reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from servkit.adapters.config_reader import IniConfigReader

KNF = """
[cron]
  test1: 0 */6 * * *
  test2: @daily
  Mixed_Case = 1 2 3 4 5
  empty:

[other]
  url: http://example.org/a:b
"""


@pytest.fixture
def reader() -> IniConfigReader:
    """A reader over a small KNF document."""
    return IniConfigReader(KNF)


def test_indented_properties(reader: IniConfigReader):
    """Indented properties belong to the preceding section."""
    assert reader.get_str("cron:test1") == "0 */6 * * *"
    assert reader.get_str("cron:test2") == "@daily"


def test_keys_are_case_sensitive(reader: IniConfigReader):
    """Keys are returned as written."""
    assert reader.get_str("cron:Mixed_Case") == "1 2 3 4 5"
    assert reader.get_str("cron:mixed_case", "unset") == "unset"


def test_value_keeps_later_colons(reader: IniConfigReader):
    """Only the first delimiter separates key and value."""
    assert reader.get_str("other:url") == "http://example.org/a:b"


@pytest.mark.parametrize("prop", ["cron:empty", "cron:missing", "missing:test1", "test1"])
def test_default(reader: IniConfigReader, prop: str):
    """Empty, missing or unaddressable properties yield the default."""
    assert reader.get_str(prop) == ""
    assert reader.get_str(prop, "fallback") == "fallback"


def test_from_path(tmp_path: Path):
    """Files are read as UTF-8."""
    path = tmp_path / "app.knf"
    path.write_text("[main]\n  name: sérvice\n", encoding="utf-8")
    assert IniConfigReader.from_path(path).get_str("main:name") == "sérvice"
