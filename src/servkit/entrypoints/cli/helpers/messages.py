"""Terminal message helpers for the servkit CLI.

Each helper prints one styled line to stderr, led by an emoji glyph when the
stream's encoding can represent it and an ASCII marker otherwise. Stdout stays
reserved for command output.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if ``character`` can be encoded on the current stderr.

    The stream is looked up on every call so redirected or replaced streams
    are honored.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" or "[!]"."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Return "✅" or "[OK]"."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Return "❌" or "[X]"."""
    return _glyph(ERROR)


def warn(msg: str) -> None:
    """Print a bold yellow warning line to stderr.

    Example:
        ``⚠️  NOTIFY_SOCKET is not set; nothing was sent.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Print a bold green success line to stderr."""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Print a bold red error line to stderr.

    Example:
        ``❌  Property cron:report contains invalid cron expression: ...``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
