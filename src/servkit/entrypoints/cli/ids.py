"""SERVKIT identifier commands: ``uuid`` and ``decode``."""

from __future__ import annotations

import logging

import click

from servkit.ids import NS_DNS, NS_OID, NS_URL, NS_X500, PrefixedUUIDError, uuids
from servkit.ids import prefixed as prefixed_codec

logger = logging.getLogger(__name__)

NAMESPACES = {"dns": NS_DNS, "url": NS_URL, "oid": NS_OID, "x500": NS_X500}

NAME_REQUIRED_MSG = "--name is required for version 5 UUIDs."


def _generate(kind: str, namespace: str, name: str | None) -> uuids.UUID:
    match kind:
        case "4":
            return uuids.uuid4()
        case "5":
            if name is None:
                raise click.UsageError(NAME_REQUIRED_MSG)
            return uuids.uuid5(NAMESPACES[namespace], name)
        case "7":
            return uuids.uuid7()
        case _:  # pragma: no cover
            raise click.BadParameter(f"unsupported UUID version: {kind}")


@click.command()
@click.option(
    "--kind",
    "-k",
    type=click.Choice(["4", "5", "7"]),
    default="4",
    show_default=True,
    help="UUID version: random (4), name-based (5) or time-ordered (7).",
)
@click.option(
    "--namespace",
    type=click.Choice(sorted(NAMESPACES), case_sensitive=False),
    default="dns",
    show_default=True,
    help="Namespace for version 5 UUIDs.",
)
@click.option("--name", help="Name for version 5 UUIDs.")
@click.option(
    "--prefix",
    "-p",
    help="Print as PREFIX.<base64> instead of the canonical form.",
)
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of UUIDs to print.",
)
def uuid(
    kind: str, namespace: str, name: str | None, prefix: str | None, count: int
) -> None:
    """Generate UUIDs, one per line."""
    if prefix == "":
        raise click.BadParameter("prefix can't be empty", param_hint="--prefix")

    for _ in range(count):
        value = _generate(kind, namespace.lower(), name)
        click.echo(prefixed_codec.encode(prefix, value) if prefix else str(value))


@click.command()
@click.argument("values", nargs=-1, required=True)
def decode(values: tuple[str, ...]) -> None:
    """Decode prefixed UUIDs into PREFIX and canonical UUID."""
    for value in values:
        try:
            prefix, decoded = prefixed_codec.decode(value)
        except PrefixedUUIDError as e:
            logger.debug("Failed to decode %r", value, exc_info=True)
            raise click.ClickException(f"{value}: {e}") from e
        click.echo(f"{prefix}\t{decoded}")
