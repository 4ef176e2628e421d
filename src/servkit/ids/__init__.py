"""Identifier helpers: UUID generation and the prefixed UUID codec."""

from .errors import (
    EmptyPrefixError,
    InvalidUUIDError,
    NoDataError,
    NoPrefixError,
    PrefixedUUIDError,
    UUIDDataDecodeError,
)
from .uuids import (
    NS_DNS,
    NS_OID,
    NS_URL,
    NS_X500,
    UUID,
    ZERO,
    gen_uuid4,
    gen_uuid5,
    uuid4,
    uuid5,
    uuid7,
)

__all__ = [
    "NS_DNS",
    "NS_OID",
    "NS_URL",
    "NS_X500",
    "UUID",
    "ZERO",
    "EmptyPrefixError",
    "InvalidUUIDError",
    "NoDataError",
    "NoPrefixError",
    "PrefixedUUIDError",
    "UUIDDataDecodeError",
    "gen_uuid4",
    "gen_uuid5",
    "uuid4",
    "uuid5",
    "uuid7",
]
