"""Logging setup for the servkit command-line tool.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
attached here, by the CLI:

- a Rich console handler on stderr, which tags records from other libraries
  with a short ``[name]`` prefix;
- an optional flight recorder: a `MemoryHandler` that keeps recent records in
  memory and writes them to a file once something at WARNING or above shows
  up.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from servkit.config import APP_NAME

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = APP_NAME  # pragma: no mutate

CONSOLE_FORMAT = "%(prefix)s %(message)s"  # pragma: no mutate
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"  # pragma: no mutate
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)  # pragma: no mutate

# Distributions whose versions are reported by `log_startup`.
REPORTED_DISTRIBUTIONS = ("click", "click-extra", "rich")  # pragma: no mutate

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[top-level name]`` for non-servkit loggers.

    Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            # "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown; forced to DEBUG in ``debug_mode``.
        debug_mode: Show timestamps, logger names and source locations.
        color: Follow click-extra's ``--color/--no-color``.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a memory-buffered handler that writes to ``path`` on flush.

    The buffer holds up to ``capacity`` records and is flushed when it is full,
    when a record at ``flush_level`` or above arrives, and on close if
    ``flush_on_close`` is set. The file is truncated when the handler is
    created.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


@dataclass(frozen=True)
class StartupInfo:
    """What `log_startup` reports about the logging setup."""

    app_version: str
    level: int
    handlers: tuple[logging.Handler, ...]
    log_path: Path | None = None
    flight_recorder: bool = False
    flight_capacity: int | None = None
    flush_on_close: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(logger: logging.Logger, info: StartupInfo) -> None:
    """Log a one-line summary at INFO and environment details at DEBUG."""
    logger.info(
        "SERVKIT %s: console=%s, flight-recorder=%s",
        info.app_version,
        logging.getLevelName(info.level),
        "ON" if info.flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for name in REPORTED_DISTRIBUTIONS:
        logger.debug("%s: %s", name, _distribution_version(name))
    logger.debug("Handlers: %s", [type(h).__name__ for h in info.handlers])

    if info.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            info.log_path if info.log_path else "<none>",
            info.flight_capacity,
            info.flush_on_close,
        )

    if info.logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in info.logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")
