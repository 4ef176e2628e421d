"""Key-value pairs with a tagged value.

A `KV` holds a text key and a value that is exactly one of `Text`, `Int` or
`Float`. Accessors return the payload of the matching variant and raise
`WrongValueTypeError` for any other, so callers never guess at types.

Examples:
    ```py
    >>> pairs = [KV("b", 2), KV("a", "x")]
    >>> sort(pairs)
    >>> [p.key for p in pairs]
    ['a', 'b']
    >>> pairs[1].as_int()
    2
    ```
"""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import TypeAlias


class WrongValueTypeError(TypeError):
    """Raised when a KV value is read as a variant it does not hold."""

    def __init__(self, key: str, expected: str, actual: str) -> None:
        super().__init__(f"Value of {key!r} is {actual}, not {expected}")
        self.key = key
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class Text:
    """Text value."""

    value: str


@dataclass(frozen=True)
class Int:
    """Integer value."""

    value: int


@dataclass(frozen=True)
class Float:
    """Floating-point value."""

    value: float


KVValue: TypeAlias = Text | Int | Float


def wrap(value: KVValue | str | int | float) -> KVValue:
    """Wrap a plain Python value into its variant.

    Raises:
        TypeError: For any other type (``bool`` included).
    """
    match value:
        case Text() | Int() | Float():
            return value
        case bool():
            raise TypeError("bool is not a supported KV value")
        case str():
            return Text(value)
        case int():
            return Int(value)
        case float():
            return Float(value)
        case _:
            raise TypeError(f"Unsupported KV value type: {type(value).__name__}")


@dataclass(frozen=True, init=False)
class KV:
    """Key-value pair.

    Attributes:
        key: Text key; pairs sort by it.
        value: Tagged value.
    """

    key: str
    value: KVValue

    def __init__(self, key: str, value: KVValue | str | int | float) -> None:
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "value", wrap(value))

    def _expect(self, variant: type[Text] | type[Int] | type[Float]) -> object:
        if not isinstance(self.value, variant):
            raise WrongValueTypeError(
                self.key, variant.__name__, type(self.value).__name__
            )
        return self.value.value

    def as_str(self) -> str:
        """Return the value of a `Text` pair."""
        return self._expect(Text)  # type: ignore[return-value]

    def as_int(self) -> int:
        """Return the value of an `Int` pair."""
        return self._expect(Int)  # type: ignore[return-value]

    def as_float(self) -> float:
        """Return the value of a `Float` pair."""
        return self._expect(Float)  # type: ignore[return-value]


def sort(pairs: MutableSequence[KV]) -> None:
    """Sort ``pairs`` in place by key, ascending.

    Python compares strings by code point, which matches byte order of their
    UTF-8 encodings.
    """
    pairs[:] = sorted(pairs, key=lambda kv: kv.key)
