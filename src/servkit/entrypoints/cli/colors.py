"""SERVKIT ``colorize`` command."""

import click

from servkit import lscolors


@click.command()
@click.argument("paths", nargs=-1, required=True)
@click.pass_context
def colorize(ctx: click.Context, paths: tuple[str, ...]) -> None:
    """Print each path colored by the LS_COLORS rule for its file name.

    Set NO_COLOR to print paths unchanged.
    """
    for path in paths:
        click.echo(lscolors.colorize_path(path), color=ctx.color)
