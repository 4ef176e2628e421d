"""systemd ``sd_notify`` client.

Services started by systemd with ``Type=notify`` report their state by
sending datagrams of newline-separated ``KEY=VALUE`` pairs to the Unix socket
named in ``NOTIFY_SOCKET``. Paths starting with ``@`` name sockets in the
Linux abstract namespace.

Two ways to use it:

- an explicit `Notifier` handle, created at startup and passed around;
- the module-level functions, which share one process-wide notifier.

Either way the connection is made once by `connect` and reused for every
message; it is never re-established.

Examples:
    ```py
    sdnotify.connect()
    sdnotify.status("STATUS=Loading %d items", 42)
    sdnotify.ready()
    ```
"""

from __future__ import annotations

import logging
import math
import socket
import sys
import threading

from servkit import config

logger = logging.getLogger(__name__)

READY = "READY=1"
RELOADING = "RELOADING=1"
STOPPING = "STOPPING=1"
ABSTRACT_PREFIX = "@"


# ============================================================================
#                                   Errors
# ============================================================================


class SdNotifyError(Exception):
    """Base class for sd_notify errors."""


class NoSocketError(SdNotifyError):
    """Raised by `connect` when NOTIFY_SOCKET is empty."""

    def __init__(self) -> None:
        super().__init__("NOTIFY_SOCKET is empty")


class ConnectError(SdNotifyError):
    """Raised when the notification socket can't be dialed."""

    def __init__(self, path: str, reason: OSError) -> None:
        super().__init__(f"Can't connect to socket: {reason}")
        self.path = path
        self.reason = reason


class NotConnectedError(SdNotifyError):
    """Raised when sending before a successful `connect`."""

    def __init__(self) -> None:
        super().__init__("Not connected to socket")


class WriteError(SdNotifyError):
    """Raised when a notification can't be sent."""

    def __init__(self, reason: OSError) -> None:
        super().__init__(f"Can't send notification: {reason}")
        self.reason = reason


class UnsupportedPlatformError(SdNotifyError):
    """Raised on platforms without systemd notification support."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"sd_notify is not supported on {platform}")
        self.platform = platform


# ============================================================================
#                                  Notifier
# ============================================================================


def _socket_address(path: str) -> str | bytes:
    if path.startswith(ABSTRACT_PREFIX):
        return b"\0" + path[1:].encode("utf-8")
    return path


def _is_supported(platform: str) -> bool:
    return platform.startswith("linux")


class Notifier:
    """Connection to the systemd notification socket."""

    def __init__(self, platform: str = sys.platform) -> None:
        self._platform = platform
        self._sock: socket.socket | None = None
        self._lock = threading.Lock()

    def _check_platform(self) -> None:
        if not _is_supported(self._platform):
            raise UnsupportedPlatformError(self._platform)

    @property
    def connected(self) -> bool:
        """Whether `connect` succeeded."""
        return self._sock is not None

    def connect(self, path: str | None = None) -> None:
        """Dial the notification socket.

        Args:
            path: Socket path; defaults to ``NOTIFY_SOCKET``.

        Raises:
            UnsupportedPlatformError: Not on Linux.
            NoSocketError: ``NOTIFY_SOCKET`` is unset or empty.
            ConnectError: The socket can't be dialed.
        """
        self._check_platform()

        if path is None:
            try:
                path = config.get_notify_socket()
            except config.NotifySocketNotSetError as e:
                raise NoSocketError from e
        elif not path:
            raise NoSocketError

        with self._lock:
            if self._sock is not None:
                return

            sock = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
            try:
                sock.connect(_socket_address(path))
            except OSError as e:
                sock.close()
                raise ConnectError(path, e) from e

            logger.debug("Connected to notification socket %s", path)
            self._sock = sock

    def close(self) -> None:
        """Close the socket; mainly for tests since it lives until exit."""
        with self._lock:
            if self._sock is not None:
                self._sock.close()
                self._sock = None

    def notify(self, msg: str) -> None:
        """Send ``msg`` verbatim as one datagram.

        Raises:
            UnsupportedPlatformError: Not on Linux.
            NotConnectedError: `connect` was never called or failed.
            WriteError: The datagram couldn't be sent.
        """
        self._check_platform()

        sock = self._sock
        if sock is None:
            raise NotConnectedError

        try:
            sock.send(msg.encode("utf-8"))
        except OSError as e:
            raise WriteError(e) from e

    def ready(self) -> None:
        """Tell systemd that startup is finished."""
        self.notify(READY)

    def reloading(self) -> None:
        """Tell systemd that the service is reloading its configuration."""
        self.notify(RELOADING)

    def stopping(self) -> None:
        """Tell systemd that the service is shutting down."""
        self.notify(STOPPING)

    def main_pid(self, pid: int) -> None:
        """Tell systemd the main process id of the service."""
        self.notify(f"MAINPID={pid}")

    def extend_timeout(self, sec: float) -> None:
        """Ask systemd to extend the current start/stop timeout by ``sec``."""
        self.notify(f"EXTEND_TIMEOUT_USEC={math.floor(sec * 1_000_000)}")

    def status(self, fmt: str, *args: object) -> None:
        """Send a caller-formatted payload (``fmt % args`` when args are given)."""
        self.notify(fmt % args if args else fmt)


_default = Notifier()


def get_notifier() -> Notifier:
    """Return the process-wide notifier."""
    return _default


def connect() -> None:
    """Connect the process-wide notifier to ``NOTIFY_SOCKET``."""
    _default.connect()


def notify(msg: str) -> None:
    """Send ``msg`` verbatim."""
    _default.notify(msg)


def ready() -> None:
    """Send ``READY=1``."""
    _default.ready()


def reloading() -> None:
    """Send ``RELOADING=1``."""
    _default.reloading()


def stopping() -> None:
    """Send ``STOPPING=1``."""
    _default.stopping()


def main_pid(pid: int) -> None:
    """Send ``MAINPID=<pid>``."""
    _default.main_pid(pid)


def extend_timeout(sec: float) -> None:
    """Send ``EXTEND_TIMEOUT_USEC=<sec in microseconds>``."""
    _default.extend_timeout(sec)


def status(fmt: str, *args: object) -> None:
    """Send a formatted payload."""
    _default.status(fmt, *args)
