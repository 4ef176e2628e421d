"""SERVKIT CLI entry point.

Defines the top-level ``servkit`` command (via Click-Extra), sets up logging
for every subcommand and registers the subcommands.

Available commands
- ``servkit uuid`` / ``servkit decode``: generate UUIDs, decode prefixed ones.
- ``servkit hash`` / ``servkit jump``: file digests and jump consistent hash.
- ``servkit colorize``: color file names according to ``LS_COLORS``.
- ``servkit emoji``: look up, search and expand emoji aliases.
- ``servkit notify``: send sd_notify messages to systemd.
- ``servkit cron``: check cron expressions and cron properties in config files.
- ``servkit csv``: split delimiter-separated lines.

Examples
    $ servkit --version
    $ servkit uuid --prefix user
    $ servkit -v cron check "*/15 * * * mon-fri"
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from servkit import __version__
from servkit.config import APP_NAME
from servkit.logging import (
    StartupInfo,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .colors import colorize
from .cron import cron
from .emoji import emoji_group
from .hashing import hash_files, jump
from .helpers import parse_log_level
from .ids import decode, uuid
from .notify import notify
from .records import csv_records

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """SERVKIT command-line interface.

    SERVKIT bundles the small utilities that daemons and services keep needing:
    identifiers, file digests and consistent hashing, terminal colors, emoji
    shortcodes, systemd readiness notification and cron schedules.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  sd_notify(3), dircolors(1), crontab(5)",
    ]
)

DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source locations).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the flight recorder log file.",
    default=DEFAULT_LOG_PATH,
    envvar="SERVKIT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="SERVKIT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING or ERROR occurs, or on exit "
        "with --force-flush."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L servkit.sdnotify=DEBUG)."
    ),
    default=("asyncio=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def servkit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """SERVKIT command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]

    if flight_recorder:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # Root captures everything; handlers filter.
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        StartupInfo(
            app_version=__version__,
            level=level,
            handlers=tuple(handlers),
            log_path=log_path if flight_recorder else None,
            flight_recorder=flight_recorder,
            flight_capacity=flight_recorder_capacity if flight_recorder else None,
            flush_on_close=force_flush_flight_recorder,
            logger_levels=logger_levels,
        ),
    )

    ctx.call_on_close(logging.shutdown)


servkit.add_command(uuid)
servkit.add_command(decode)
servkit.add_command(hash_files)
servkit.add_command(jump)
servkit.add_command(colorize)
servkit.add_command(emoji_group)
servkit.add_command(notify)
servkit.add_command(cron)
servkit.add_command(csv_records)
