"""SERVKIT hashing commands: ``hash`` and ``jump``."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from servkit.hashing import file_hash, jump_hash

from .helpers import error

logger = logging.getLogger(__name__)

U64_MAX = (1 << 64) - 1


@click.command(name="hash")
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
def hash_files(paths: tuple[Path, ...]) -> None:
    """Print the SHA-256 of each file, ``sha256sum`` style.

    Files that can't be read are reported on stderr and make the command exit
    with status 1 once every file has been processed.
    """
    failed = 0
    for path in paths:
        digest = file_hash(path)
        if not digest:
            logger.debug("No digest for %s", path)
            error(f"{path}: can't read file")
            failed += 1
            continue
        click.echo(f"{digest}  {path}")

    if failed:
        raise click.exceptions.Exit(1)


@click.command()
@click.argument("key", type=click.IntRange(0, U64_MAX))
@click.argument("buckets", type=int)
def jump(key: int, buckets: int) -> None:
    """Print the bucket in [0, BUCKETS) that KEY maps to."""
    click.echo(jump_hash(key, buckets))
