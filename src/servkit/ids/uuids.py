"""UUID value type and generators.

Implements random (v4), name-based SHA-1 (v5) and time-ordered (v7) UUIDs as
described by RFC 4122 and RFC 9562. Generators return a small immutable
`UUID` value object; the ``gen_*`` helpers return its canonical text form
(36 lowercase characters, grouped 8-4-4-4-12).

Examples:
    ```py
    >>> uuid5(NS_URL, "TEST").version
    5
    >>> len(gen_uuid4())
    36
    ```
"""

from __future__ import annotations

import hashlib
import re
import secrets
import time
from dataclasses import dataclass

from .errors import InvalidUUIDError

UUID_SIZE = 16
CANONICAL_LENGTH = 36
GROUP_WIDTHS = (4, 2, 2, 2, 6)

_CANONICAL_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


@dataclass(frozen=True)
class UUID:
    """Opaque 16-byte universally unique identifier.

    Attributes:
        data: The raw 16 bytes.
    """

    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray)):
            raise InvalidUUIDError(self.data, "expected bytes")
        if len(self.data) != UUID_SIZE:
            raise InvalidUUIDError(
                self.data, f"expected {UUID_SIZE} bytes, got {len(self.data)}"
            )
        object.__setattr__(self, "data", bytes(self.data))

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        groups = []
        offset = 0
        for width in GROUP_WIDTHS:
            groups.append(self.data[offset : offset + width].hex())
            offset += width
        return "-".join(groups)

    @property
    def version(self) -> int:
        """Version nibble (high four bits of byte 6)."""
        return self.data[6] >> 4

    def is_zero(self) -> bool:
        """Return True if every byte is zero."""
        return not any(self.data)


ZERO = UUID(bytes(UUID_SIZE))

# Predefined namespaces (RFC 4122, Appendix C).
NS_DNS = UUID(bytes([107, 167, 184, 16, 157, 173, 17, 209, 128, 180, 0, 192, 79, 212, 48, 200]))  # fmt: skip # pylint: disable=line-too-long
NS_URL = UUID(bytes([107, 167, 184, 17, 157, 173, 17, 209, 128, 180, 0, 192, 79, 212, 48, 200]))  # fmt: skip # pylint: disable=line-too-long
NS_OID = UUID(bytes([107, 167, 184, 18, 157, 173, 17, 209, 128, 180, 0, 192, 79, 212, 48, 200]))  # fmt: skip # pylint: disable=line-too-long
NS_X500 = UUID(bytes([107, 167, 184, 20, 157, 173, 17, 209, 128, 180, 0, 192, 79, 212, 48, 200]))  # fmt: skip # pylint: disable=line-too-long


def _stamp(raw: bytearray, version: int) -> UUID:
    """Set the version nibble and the RFC 4122 variant bits."""
    raw[6] = (raw[6] & 0x0F) | (version << 4)
    raw[8] = (raw[8] & 0x3F) | 0x80
    return UUID(bytes(raw))


def uuid4() -> UUID:
    """Generate a random (version 4) UUID from the OS CSPRNG."""
    return _stamp(bytearray(secrets.token_bytes(UUID_SIZE)), 4)


def uuid5(namespace: UUID | bytes, name: str | bytes) -> UUID:
    """Generate a name-based (version 5) UUID.

    Args:
        namespace: Namespace UUID (or its 16 raw bytes).
        name: Name within the namespace; text is encoded as UTF-8.

    Returns:
        UUID: The first 16 bytes of ``SHA-1(namespace + name)`` with version
        and variant bits applied.
    """
    if isinstance(name, str):
        name = name.encode("utf-8")
    hasher = hashlib.sha1(usedforsecurity=False)
    hasher.update(bytes(namespace))
    hasher.update(name)
    return _stamp(bytearray(hasher.digest()[:UUID_SIZE]), 5)


def uuid7(timestamp_ms: int | None = None) -> UUID:
    """Generate a time-ordered (version 7) UUID.

    Args:
        timestamp_ms: Unix time in milliseconds; defaults to the current time.
    """
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    raw = bytearray((timestamp_ms & 0xFFFF_FFFF_FFFF).to_bytes(6, "big"))
    raw += secrets.token_bytes(UUID_SIZE - 6)
    return _stamp(raw, 7)


def gen_uuid4() -> str:
    """Return a random UUID in canonical text form."""
    return str(uuid4())


def gen_uuid5(namespace: UUID | bytes, name: str | bytes) -> str:
    """Return a name-based UUID in canonical text form."""
    return str(uuid5(namespace, name))


def parse(text: str) -> UUID:
    """Parse the canonical 36-character text form.

    Raises:
        InvalidUUIDError: If ``text`` is not a dashed 8-4-4-4-12 hex string.
    """
    if len(text) != CANONICAL_LENGTH or not _CANONICAL_PATTERN.match(text):
        raise InvalidUUIDError(text, "expected canonical 8-4-4-4-12 hex form")
    return UUID(bytes.fromhex(text.replace("-", "")))
