"""Unit tests for the CLI logging setup helpers."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from servkit.logging import (
    CONSOLE_FORMAT,
    DEBUG_CONSOLE_FORMAT,
    StartupInfo,
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)


def make_record(name: str, level: int = logging.INFO, msg: str = "hello") -> logging.LogRecord:
    """Build a bare log record."""
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


class TestThirdPartyPrefixFilter:
    """Tagging records from other libraries."""

    @pytest.mark.parametrize(
        ("name", "prefix"),
        [
            ("servkit", ""),
            ("servkit.sdnotify", ""),
            ("urllib3.connectionpool", "[urllib3]"),
            ("asyncio", "[asyncio]"),
        ],
    )
    def test_prefix(self, name: str, prefix: str):
        """Own records get no prefix; others get their top-level name."""
        record = make_record(name)
        assert ThirdPartyPrefixFilter().filter(record) is True
        assert record.prefix == prefix  # type: ignore[attr-defined]


class TestConsoleHandler:
    """config_console_handler()."""

    def test_normal_mode(self):
        """Normal mode keeps the level and tags third-party records."""
        handler = config_console_handler(logging.WARNING, debug_mode=False, color=False)
        assert isinstance(handler, RichHandler)
        assert handler.level == logging.WARNING
        assert handler.formatter._fmt == CONSOLE_FORMAT  # pylint: disable=protected-access
        assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)

    def test_debug_mode(self):
        """Debug mode forces DEBUG and uses the detailed format."""
        handler = config_console_handler(logging.ERROR, debug_mode=True)
        assert handler.level == logging.DEBUG
        assert handler.formatter._fmt == DEBUG_CONSOLE_FORMAT  # pylint: disable=protected-access
        assert not handler.filters

    def test_no_color(self):
        """Disabling color disables Rich's color system."""
        handler = config_console_handler(color=False)
        assert handler.console.color_system is None


class TestFlightRecorder:
    """config_flight_recorder()."""

    def test_buffers_until_warning(self, tmp_path: Path):
        """Records are held in memory until a WARNING arrives."""
        path = tmp_path / "latest.log"
        handler = config_flight_recorder(path, capacity=100)
        target = handler.target
        try:
            handler.handle(make_record("servkit", logging.DEBUG, "buffered"))
            assert path.read_text(encoding="utf-8") == ""

            handler.handle(make_record("servkit", logging.WARNING, "trigger"))
            text = path.read_text(encoding="utf-8")
            assert "DEBUG servkit:1: buffered" in text
            assert "WARNING servkit:1: trigger" in text
        finally:
            handler.close()
            target.close()  # type: ignore[union-attr]

    def test_flush_on_close(self, tmp_path: Path):
        """With flush_on_close, pending records are written at close."""
        path = tmp_path / "latest.log"
        handler = config_flight_recorder(path, flush_on_close=True)
        target = handler.target
        handler.handle(make_record("servkit", logging.INFO, "pending"))
        handler.close()
        target.close()  # type: ignore[union-attr]
        assert "pending" in path.read_text(encoding="utf-8")

    def test_truncates_previous_log(self, tmp_path: Path):
        """Each run starts with an empty file."""
        path = tmp_path / "latest.log"
        path.write_text("old run\n", encoding="utf-8")
        handler = config_flight_recorder(path)
        target = handler.target
        handler.close()
        target.close()  # type: ignore[union-attr]
        assert path.read_text(encoding="utf-8") == ""


def test_log_startup(caplog: pytest.LogCaptureFixture):
    """The summary goes out at INFO, the details at DEBUG."""
    logger = logging.getLogger("servkit.test")
    info = StartupInfo(
        app_version="1.2.3",
        level=logging.WARNING,
        handlers=(logging.NullHandler(),),
        log_path=Path("/tmp/latest.log"),
        flight_recorder=True,
        flight_capacity=50,
        logger_levels={"asyncio": logging.ERROR},
    )

    with caplog.at_level(logging.DEBUG, logger="servkit.test"):
        log_startup(logger, info)

    info_lines = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    debug_text = "\n".join(r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG)

    assert info_lines == ["SERVKIT 1.2.3: console=WARNING, flight-recorder=ON"]
    assert "Handlers: ['NullHandler']" in debug_text
    assert "capacity=50" in debug_text
    assert "Per-logger overrides: {'asyncio': 'ERROR'}" in debug_text
    assert "rich: " in debug_text
