"""Unit tests for the UUID value type and generators."""

import re

import pytest

from servkit.ids import NS_DNS, NS_OID, NS_URL, NS_X500, ZERO, InvalidUUIDError
from servkit.ids.uuids import UUID, gen_uuid4, gen_uuid5, parse, uuid4, uuid5, uuid7

CANONICAL_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")


def _variant_bits(u: UUID) -> int:
    return bytes(u)[8] >> 6


class TestUUIDValue:
    """Construction and formatting of the UUID value object."""

    def test_rejects_wrong_length(self):
        """Only exactly 16 bytes make a UUID."""
        with pytest.raises(InvalidUUIDError, match="expected 16 bytes, got 15"):
            UUID(bytes(15))

    def test_rejects_non_bytes(self):
        """Text is not silently accepted as raw bytes."""
        with pytest.raises(InvalidUUIDError):
            UUID("0123456789abcdef")  # type: ignore[arg-type]

    def test_bytearray_is_frozen_to_bytes(self):
        """A mutable input can't change the UUID afterwards."""
        raw = bytearray(range(16))
        u = UUID(raw)
        raw[0] = 0xFF
        assert bytes(u)[0] == 0

    def test_canonical_text(self):
        """Groups are 4-2-2-2-6 bytes, lowercase hex."""
        u = UUID(bytes(range(16)))
        assert str(u) == "00010203-0405-0607-0809-0a0b0c0d0e0f"

    def test_zero(self):
        """ZERO is all zero bytes and reports itself as such."""
        assert ZERO.is_zero()
        assert str(ZERO) == "00000000-0000-0000-0000-000000000000"
        assert not UUID(b"\0" * 15 + b"\1").is_zero()

    def test_equality_and_hash(self):
        """Equal bytes mean equal, hashable UUIDs."""
        assert UUID(bytes(range(16))) == UUID(bytes(range(16)))
        assert len({UUID(bytes(range(16))), UUID(bytes(range(16)))}) == 1


class TestGenerators:
    """Version and variant bits of generated UUIDs."""

    def test_v4_bits(self):
        """Every v4 UUID has version 0100 and variant 10."""
        for _ in range(200):
            u = uuid4()
            assert u.version == 4
            assert _variant_bits(u) == 0b10

    def test_v4_is_random(self):
        """Two v4 UUIDs differ."""
        assert uuid4() != uuid4()

    def test_gen_uuid4_is_canonical(self):
        """The text helper returns the 36-character canonical form."""
        value = gen_uuid4()
        assert len(value) == 36
        assert CANONICAL_RE.match(value)

    def test_v5_known_value(self):
        """SHA-1 name-based UUIDs match the published vector."""
        assert gen_uuid5(NS_DNS, "www.example.com") == "2ed6657d-e927-568b-95e1-2665a8aea6a2"

    def test_v5_bits_and_determinism(self):
        """v5 UUIDs are stable per (namespace, name) and have version 0101."""
        u = uuid5(NS_URL, "TEST")
        assert u == uuid5(NS_URL, "TEST")
        assert u.version == 5
        assert _variant_bits(u) == 0b10

    def test_v5_namespaces_differ(self):
        """The same name in different namespaces gives different UUIDs."""
        names = {str(uuid5(ns, "name")) for ns in (NS_DNS, NS_URL, NS_OID, NS_X500)}
        assert len(names) == 4

    def test_v5_accepts_bytes(self):
        """Text names are hashed as their UTF-8 bytes."""
        assert uuid5(NS_DNS, "ünïcode") == uuid5(bytes(NS_DNS), "ünïcode".encode())

    def test_v7_bits_and_timestamp(self):
        """v7 UUIDs carry version 0111, variant 10 and the ms timestamp."""
        u = uuid7(0x0123_4567_89AB)
        assert u.version == 7
        assert _variant_bits(u) == 0b10
        assert bytes(u)[:6] == bytes.fromhex("0123456789ab")

    def test_v7_sorts_by_time(self):
        """Later milliseconds sort after earlier ones."""
        assert bytes(uuid7(1_000)) < bytes(uuid7(1_001))


class TestNamespaces:
    """Predefined namespace values."""

    @pytest.mark.parametrize(
        ("namespace", "expected"),
        [
            (NS_DNS, "6ba7b810-9dad-11d1-80b4-00c04fd430c8"),
            (NS_URL, "6ba7b811-9dad-11d1-80b4-00c04fd430c8"),
            (NS_OID, "6ba7b812-9dad-11d1-80b4-00c04fd430c8"),
            (NS_X500, "6ba7b814-9dad-11d1-80b4-00c04fd430c8"),
        ],
    )
    def test_rfc_values(self, namespace: UUID, expected: str):
        """Namespaces match RFC 4122 Appendix C."""
        assert str(namespace) == expected


class TestParse:
    """Parsing the canonical text form."""

    def test_roundtrip(self):
        """str() and parse() are inverse."""
        u = uuid4()
        assert parse(str(u)) == u

    def test_accepts_uppercase(self):
        """Hex digits are case-insensitive."""
        assert parse("6BA7B810-9DAD-11D1-80B4-00C04FD430C8") == NS_DNS

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "6ba7b8109dad11d180b400c04fd430c8",
            "6ba7b810-9dad-11d1-80b4-00c04fd430c",
            "6ba7b810-9dad-11d1-80b4-00c04fd430cg",
            "{6ba7b810-9dad-11d1-80b4-00c04fd430c8}",
        ],
    )
    def test_rejects_non_canonical(self, text: str):
        """Anything but the dashed 8-4-4-4-12 form is rejected."""
        with pytest.raises(InvalidUUIDError):
            parse(text)
