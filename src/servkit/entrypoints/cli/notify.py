"""SERVKIT ``notify`` command: send sd_notify messages.

Meant for shell-script services started with ``Type=notify``; systemd sets
``NOTIFY_SOCKET`` in their environment. Outside systemd the command fails
with a clear message instead of silently doing nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

import click

from servkit import sdnotify

from .helpers import success

logger = logging.getLogger(__name__)


@click.command()
@click.argument("raw", metavar="[KEY=VALUE]...", nargs=-1)
@click.option("--ready", is_flag=True, help="Send READY=1.")
@click.option("--reloading", is_flag=True, help="Send RELOADING=1.")
@click.option("--stopping", is_flag=True, help="Send STOPPING=1.")
@click.option("--status", help="Send STATUS=<TEXT>.")
@click.option("--main-pid", type=click.IntRange(min=1), help="Send MAINPID=<PID>.")
@click.option(
    "--extend-timeout",
    type=click.FloatRange(min=0),
    help="Send EXTEND_TIMEOUT_USEC for the given number of seconds.",
)
@click.option(
    "--socket",
    "socket_path",
    help="Socket path; defaults to NOTIFY_SOCKET. A leading @ is abstract.",
)
def notify(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    raw: tuple[str, ...],
    ready: bool,
    reloading: bool,
    stopping: bool,
    status: str | None,
    main_pid: int | None,
    extend_timeout: float | None,
    socket_path: str | None,
) -> None:
    """Send state notifications to systemd, one datagram each."""
    notifier = sdnotify.Notifier()

    sends: list[Callable[[], None]] = [partial(notifier.notify, msg) for msg in raw]
    if status is not None:
        sends.append(partial(notifier.status, "STATUS=%s", status))
    if main_pid is not None:
        sends.append(partial(notifier.main_pid, main_pid))
    if extend_timeout is not None:
        sends.append(partial(notifier.extend_timeout, extend_timeout))
    if reloading:
        sends.append(notifier.reloading)
    if ready:
        sends.append(notifier.ready)
    if stopping:
        sends.append(notifier.stopping)

    if not sends:
        raise click.UsageError("Nothing to send.")

    try:
        notifier.connect(socket_path)
        for send in sends:
            send()
    except sdnotify.SdNotifyError as e:
        logger.debug("Notification failed", exc_info=True)
        raise click.ClickException(str(e)) from e
    finally:
        notifier.close()

    success(f"Sent {len(sends)} notification(s).")
