"""Unit tests for the ``-L NAME=LEVEL`` option callback."""

import logging
import types

import click
import pytest

from servkit.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)

# The callback ignores its context; Click always passes one.
CTX = types.SimpleNamespace()


def test_no_items_gives_defaults():
    """Without items the library defaults are returned (as a copy)."""
    out = parse_log_level(CTX, None, ())
    assert out == DEFAULT_LIB_LEVELS
    out["asyncio"] = logging.DEBUG
    assert DEFAULT_LIB_LEVELS["asyncio"] == logging.WARNING


def test_items_override_defaults_and_each_other():
    """Later items win over earlier ones and over the defaults."""
    out = parse_log_level(
        CTX, None, ("asyncio=DEBUG", "servkit.sdnotify=INFO", "asyncio=ERROR")
    )
    assert out["asyncio"] == logging.ERROR
    assert out["servkit.sdnotify"] == logging.INFO
    assert out["markdown_it"] == logging.WARNING


@pytest.mark.parametrize(
    "value",
    [
        "servkit=INFO,  asyncio=ERROR urllib3=warning",
        ("servkit=INFO,asyncio=ERROR", "urllib3=warning"),
    ],
    ids=["envvar-string", "mixed-flags"],
)
def test_separators(value):
    """Commas and whitespace both separate items, in strings and flags alike."""
    out = parse_log_level(CTX, None, value)
    assert out["servkit"] == logging.INFO
    assert out["asyncio"] == logging.ERROR
    assert out["urllib3"] == logging.WARNING


def test_levels_are_case_insensitive():
    """Level names may use any case."""
    out = parse_log_level(CTX, None, ("a=debug", "b=CrItIcAl"))
    assert (out["a"], out["b"]) == (logging.DEBUG, logging.CRITICAL)


@pytest.mark.parametrize("item", ["servkit", "=INFO", "servkit:INFO"])
def test_malformed_item(item: str):
    """Items must look like NAME=LEVEL."""
    with pytest.raises(click.BadParameter, match="Expected NAME=LEVEL"):
        parse_log_level(CTX, None, (item,))


def test_unknown_level():
    """Unknown level names are rejected."""
    with pytest.raises(click.BadParameter, match="Invalid log level: LOUD"):
        parse_log_level(CTX, None, ("servkit=LOUD",))
