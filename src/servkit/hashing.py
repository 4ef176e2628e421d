"""Hashing helpers.

- `file_hash`: SHA-256 of a file's content as 64 lowercase hex digits.
- `hash_file`, `hash_bytes`, `hash_string`: the same over any `hashlib` hasher.
- `jump_hash`: Lamping-Jenkins jump consistent hash for bucket assignment.

The file helpers treat a file that can't be read as "no hash" and return an
empty string instead of raising; callers compare against ``""``.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from pathlib import Path
from typing import Protocol, TypeAlias

CHUNK_SIZE = 1024 * 1024

_JUMP_MULTIPLIER = 2862933555777941757
_U64_MASK = (1 << 64) - 1
_JUMP_SCALE = float(1 << 31)


class Hasher(Protocol):
    """The subset of the `hashlib` hash object API used here."""

    @property
    def digest_size(self) -> int: ...  # pylint: disable=missing-function-docstring

    def update(self, data: bytes, /) -> None: ...  # pylint: disable=missing-function-docstring

    def hexdigest(self) -> str: ...  # pylint: disable=missing-function-docstring


HasherSpec: TypeAlias = "Hasher | Callable[[], Hasher] | str | None"


def _new_hasher(spec: HasherSpec) -> Hasher | None:
    """Return a fresh hasher for ``spec``.

    ``spec`` may be an algorithm name (``"sha256"``), a zero-argument factory
    (``hashlib.md5``), or a hasher instance, which is copied so callers can
    reuse it as a template.
    """
    if spec is None:
        return None
    if isinstance(spec, str):
        return hashlib.new(spec)
    if hasattr(spec, "hexdigest"):
        return spec.copy()  # type: ignore[union-attr]
    return spec()  # type: ignore[operator]


def _sum(hasher: Hasher) -> str:
    return hasher.hexdigest().zfill(hasher.digest_size * 2)


def hash_file(path: str | Path, hasher: HasherSpec) -> str:
    """Hash the content of ``path`` with ``hasher``.

    Returns:
        str: The lowercase hex digest, or ``""`` if ``hasher`` is None or the
        file can't be read.
    """
    h = _new_hasher(hasher)
    if h is None:
        return ""

    try:
        with open(path, "rb") as fd:
            for chunk in iter(lambda: fd.read(CHUNK_SIZE), b""):
                h.update(chunk)
    except OSError:
        return ""

    return _sum(h)


def hash_bytes(data: bytes, hasher: HasherSpec) -> str:
    """Hash ``data``; empty data or a missing hasher yields ``""``."""
    if not data:
        return ""
    h = _new_hasher(hasher)
    if h is None:
        return ""
    h.update(data)
    return _sum(h)


def hash_string(data: str, hasher: HasherSpec) -> str:
    """Hash the UTF-8 encoding of ``data``; empty text yields ``""``."""
    return hash_bytes(data.encode("utf-8"), hasher)


def file_hash(path: str | Path) -> str:
    """Return the SHA-256 of a file as 64 lowercase hex digits, or ``""``."""
    return hash_file(path, hashlib.sha256)


def jump_hash(key: int, buckets: int) -> int:
    """Map ``key`` to a bucket in ``[0, buckets)`` with jump consistent hashing.

    Args:
        key: Unsigned 64-bit key; larger or negative values are reduced
            modulo 2**64.
        buckets: Number of buckets.

    Returns:
        int: The bucket index, or 0 if ``buckets <= 0``.

    Notes:
        Growing ``buckets`` by one moves only about ``1/buckets`` of the keys.
        ``j`` is computed in double precision like the reference algorithm so
        results match other implementations bit for bit.
    """
    if buckets <= 0:
        return 0

    key &= _U64_MASK
    b, j = -1, 0

    while j < buckets:
        b = j
        key = (key * _JUMP_MULTIPLIER + 1) & _U64_MASK
        j = int(float(b + 1) * (_JUMP_SCALE / float((key >> 33) + 1)))

    return b
