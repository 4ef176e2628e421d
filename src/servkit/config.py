"""Configuration utilities for SERVKIT.

This module centralizes the environment variables the toolkit consumes and
small helpers to read them. Values are read at call time so tests can patch
the environment with ``monkeypatch.setenv``.
"""

import os

LS_COLORS_ENV = "LS_COLORS"  # pragma: no mutate
NO_COLOR_ENV = "NO_COLOR"  # pragma: no mutate
NOTIFY_SOCKET_ENV = "NOTIFY_SOCKET"  # pragma: no mutate

APP_NAME = "servkit"  # pragma: no mutate


class NotifySocketNotSetError(Exception):
    """Raised when the NOTIFY_SOCKET environment variable is not set."""


def get_ls_colors() -> str:
    """Get the raw dircolors database from the environment.

    Returns:
        The value of `LS_COLORS`, or an empty string if it is not set.
    """
    return os.environ.get(LS_COLORS_ENV, "")


def colors_disabled() -> bool:
    """Return True if `NO_COLOR` is set to a non-empty value."""
    return bool(os.environ.get(NO_COLOR_ENV))


def get_notify_socket() -> str:
    """Get the systemd notification socket path from the environment.

    Returns:
        The value of the `NOTIFY_SOCKET` environment variable.

    Raises:
        NotifySocketNotSetError: If `NOTIFY_SOCKET` is unset or empty.
    """
    if not (path := os.environ.get(NOTIFY_SOCKET_ENV)):
        raise NotifySocketNotSetError
    return path
