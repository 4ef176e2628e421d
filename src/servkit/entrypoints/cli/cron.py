"""SERVKIT ``cron`` commands.

- ``servkit cron check EXPR``: parse an expression, show its expanded fields
  and upcoming runs.
- ``servkit cron validate FILE PROP...``: validate cron properties of a
  KNF/INI configuration file, addressed as ``section:key``.
"""

from __future__ import annotations

import configparser
import logging
from datetime import datetime
from pathlib import Path

import click
import click_extra as clickx

from servkit import cron as cronexpr
from servkit.adapters.config_reader import IniConfigReader

from .helpers import error, success

logger = logging.getLogger(__name__)

FIELD_LABELS = ("minutes", "hours", "days", "months", "weekdays")


def _format_values(values: tuple[int, ...]) -> str:
    return ",".join(str(v) for v in values)


@click.group(cls=clickx.ExtraGroup)
def cron() -> None:
    """Cron expression tools."""


@cron.command()
@click.argument("expression")
@click.option(
    "--runs",
    "-n",
    type=click.IntRange(min=0),
    default=3,
    show_default=True,
    help="Number of upcoming runs to show.",
)
def check(expression: str, runs: int) -> None:
    """Parse EXPRESSION and show when it fires."""
    try:
        expr = cronexpr.parse(expression)
    except cronexpr.CronParseError as e:
        logger.debug("Can't parse %r", expression, exc_info=True)
        raise click.ClickException(str(e)) from e

    click.echo(f"expression: {expr}")
    for label in FIELD_LABELS:
        click.echo(f"{label}: {_format_values(getattr(expr, label))}")

    when = datetime.now().replace(second=0, microsecond=0)
    for _ in range(runs):
        when = expr.next(when)
        if when.timestamp() == 0:
            break
        click.echo(f"next: {when:%Y-%m-%d %H:%M}")


@cron.command()
@click.argument(
    "config_path",
    metavar="FILE",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument("props", metavar="SECTION:KEY...", nargs=-1, required=True)
def validate(config_path: Path, props: tuple[str, ...]) -> None:
    """Validate cron expression properties of a configuration FILE.

    Empty properties are valid. Exits with status 1 if any property is
    invalid.
    """
    try:
        reader = IniConfigReader.from_path(config_path)
    except (configparser.Error, OSError, UnicodeDecodeError) as e:
        logger.debug("Can't read %s", config_path, exc_info=True)
        raise click.ClickException(f"Can't read {config_path}: {e}") from e

    invalid = 0
    for prop in props:
        try:
            cronexpr.validators.expression(reader, prop)
        except cronexpr.InvalidCronPropertyError as e:
            error(str(e))
            invalid += 1

    if invalid:
        raise click.exceptions.Exit(1)

    success(f"{len(props)} propert{'y' if len(props) == 1 else 'ies'} valid.")
