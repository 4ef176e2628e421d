"""SERVKIT ``csv`` command."""

from __future__ import annotations

from typing import BinaryIO

import click

from servkit.csv import DEFAULT_COMMA, DEFAULT_ERRORS, Reader


@click.command(name="csv")
@click.argument("source", metavar="FILE", type=click.File("rb"), default="-")
@click.option(
    "--comma",
    "-d",
    default=DEFAULT_COMMA,
    show_default=True,
    help="Field delimiter (a single character).",
)
@click.option(
    "--output-separator",
    "-s",
    default="\t",
    help="String placed between fields on output (default: TAB).",
)
def csv_records(source: BinaryIO, comma: str, output_separator: str) -> None:
    """Split each line of FILE (or standard input) on the delimiter.

    There is no quoting: every delimiter splits. Reading stops at the first
    empty line.
    """
    try:
        reader = Reader(source, comma=comma)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--comma") from e

    for record in reader:
        line = output_separator.join(record)
        click.echo(line.encode(reader.encoding, DEFAULT_ERRORS))
