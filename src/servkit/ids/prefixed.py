"""Prefixed UUID codec.

A prefixed UUID is an opaque, URL-safe-ish identifier made of a short type
prefix and the UUID bytes in standard base64 without padding::

    user.AZS1hVj0dsmYCA3uQVQ9qw

`encode` returns an empty string (not an error) when there is nothing to
encode; `decode` raises a `PrefixedUUIDError` subclass describing what is
wrong with the input.
"""

from __future__ import annotations

import base64
import binascii

from .errors import (
    EmptyPrefixError,
    NoDataError,
    NoPrefixError,
    UUIDDataDecodeError,
)
from .uuids import UUID, UUID_SIZE

SEPARATOR = "."


def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def _b64decode(data: str) -> bytes:
    """Strict standard-alphabet base64 decoding without padding.

    ``=`` is not part of the payload alphabet, so padded input is rejected.
    """
    for i, char in enumerate(data):
        if not (char.isascii() and (char.isalnum() or char in "+/")):
            raise UUIDDataDecodeError(f"illegal base64 data at input byte {i}")
    if len(data) % 4 == 1:
        raise UUIDDataDecodeError(f"illegal base64 data at input byte {len(data) - 1}")
    padded = data + "=" * (-len(data) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except binascii.Error as e:
        raise UUIDDataDecodeError(str(e)) from e


def encode(prefix: str, uuid: UUID) -> str:
    """Encode ``uuid`` with ``prefix``.

    Args:
        prefix: Non-empty type prefix.
        uuid: Non-zero UUID.

    Returns:
        str: ``prefix + "." + base64(uuid)``, or ``""`` if the prefix is empty
        or the UUID is zero.
    """
    if not prefix or uuid.is_zero():
        return ""
    return prefix + SEPARATOR + _b64encode(bytes(uuid))


def decode(prefixed_uuid: str) -> tuple[str, UUID]:
    """Decode a prefixed UUID into its prefix and UUID.

    Raises:
        NoPrefixError: No ``.`` separator.
        EmptyPrefixError: Nothing before the separator.
        NoDataError: Nothing after the separator.
        UUIDDataDecodeError: Payload is not base64 or is not 16 bytes long.
    """
    prefix, sep, data = prefixed_uuid.partition(SEPARATOR)

    if not sep:
        raise NoPrefixError
    if not prefix:
        raise EmptyPrefixError
    if not data:
        raise NoDataError

    raw = _b64decode(data)
    if len(raw) != UUID_SIZE:
        raise UUIDDataDecodeError(
            f"expected {UUID_SIZE} bytes of UUID data, got {len(raw)}"
        )

    return prefix, UUID(raw)
