"""SERVKIT ``emoji`` commands."""

from __future__ import annotations

import click
import click_extra as clickx

from servkit.emoji import emojize, find, get, get_name


@click.group(name="emoji", cls=clickx.ExtraGroup)
def emoji_group() -> None:
    """Emoji alias lookup and shortcode expansion."""


@emoji_group.command(name="get")
@click.argument("alias")
def get_cmd(alias: str) -> None:
    """Print the glyph for ALIAS (without colons)."""
    glyph = get(alias.strip(":"))
    if not glyph:
        raise click.ClickException(f"Unknown emoji alias: {alias}")
    click.echo(glyph)


@emoji_group.command(name="name")
@click.argument("glyph")
def name_cmd(glyph: str) -> None:
    """Print the alias of GLYPH."""
    alias = get_name(glyph)
    if not alias:
        raise click.ClickException(f"Unknown emoji: {glyph}")
    click.echo(alias)


@emoji_group.command(name="find")
@click.argument("substr")
def find_cmd(substr: str) -> None:
    """List aliases containing SUBSTR, with their glyphs."""
    for alias in find(substr):
        click.echo(f"{get(alias)}  {alias}")


@emoji_group.command(name="emojize")
@click.argument("text", required=False)
def emojize_cmd(text: str | None) -> None:
    """Expand :alias: shortcodes in TEXT, or in standard input."""
    if text is not None:
        click.echo(emojize(text))
        return

    for line in click.get_text_stream("stdin"):
        click.echo(emojize(line), nl=False)
