"""Minimal delimiter-separated line reader.

Splits each line of a stream on a single delimiter character. There is no
quoting and no escaping: a field can't contain the delimiter, and a trailing
delimiter yields a trailing empty field. Lines end with LF or CRLF.

Byte streams are decoded as UTF-8 with ``surrogateescape`` by default, so
bytes in any other encoding survive as lone surrogates and can be written back
unchanged with the same error handler.

Examples:
    ```py
    >>> import io
    >>> reader = Reader(io.StringIO("123,ABC,\\n"), comma=",")
    >>> reader.read()
    ['123', 'ABC', '']
    ```
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO

DEFAULT_COMMA = ";"
DEFAULT_ENCODING = "utf-8"
DEFAULT_ERRORS = "surrogateescape"


class EmptyDestinationError(ValueError):
    """Raised by `Reader.read_to` when given an empty destination list."""

    def __init__(self) -> None:
        super().__init__("Destination slice length must be greater than 0")


class Reader:
    """Read delimiter-separated records line by line.

    Attributes:
        comma: Field delimiter; a single character, ``;`` by default.
        encoding: Codec for byte streams.
        errors: Decode error handler for byte streams.
    """

    def __init__(
        self,
        stream: IO[str] | IO[bytes],
        comma: str = DEFAULT_COMMA,
        encoding: str = DEFAULT_ENCODING,
        errors: str = DEFAULT_ERRORS,
    ) -> None:
        self._stream = stream
        self.comma = comma
        self.encoding = encoding
        self.errors = errors

    @property
    def comma(self) -> str:
        """Field delimiter."""
        return self._comma

    @comma.setter
    def comma(self, value: str) -> None:
        if len(value) != 1:
            raise ValueError(f"Delimiter must be a single character, got {value!r}")
        self._comma = value

    def _read_line(self) -> str:
        """Read one line without its terminator.

        Raises:
            EOFError: At end of input.
        """
        line = self._stream.readline()
        if isinstance(line, bytes):
            line = line.decode(self.encoding, self.errors)
        if not line:
            raise EOFError
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line

    def read(self) -> list[str]:
        """Read the next record.

        Returns:
            list[str]: The fields of the next line, in order.

        Raises:
            EOFError: At end of input or on an empty line.
        """
        line = self._read_line()
        if not line:
            raise EOFError
        return line.split(self._comma)

    def read_to(self, dst: list[str]) -> None:
        """Read the next record into ``dst``.

        Fills ``dst[i]`` with field ``i`` for as many fields as both hold, and
        resets every remaining slot to ``""``. Extra fields are dropped. An
        empty line clears ``dst``.

        Raises:
            EmptyDestinationError: If ``dst`` is empty.
            EOFError: At end of input.
        """
        if not dst:
            raise EmptyDestinationError

        line = self._read_line()
        fields = line.split(self._comma) if line else []
        size = len(dst)

        for i in range(size):
            dst[i] = fields[i] if i < len(fields) else ""

    def __iter__(self) -> Iterator[list[str]]:
        while True:
            try:
                yield self.read()
            except EOFError:
                return

