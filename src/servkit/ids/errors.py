"""Errors raised by identifier helpers."""


class InvalidUUIDError(ValueError):
    """Raised when a value cannot be interpreted as a UUID."""

    def __init__(self, value: object, reason: str) -> None:
        super().__init__(f"Invalid UUID {value!r}: {reason}")
        self.value = value
        self.reason = reason


# ============================================================================
#                           Prefixed UUID errors
# ============================================================================


class PrefixedUUIDError(ValueError):
    """Base class for prefixed UUID decoding errors."""


class NoPrefixError(PrefixedUUIDError):
    """Raised when the encoded value has no prefix separator."""

    def __init__(self) -> None:
        super().__init__("Prefixed UUID has no prefix")


class EmptyPrefixError(PrefixedUUIDError):
    """Raised when the prefix before the separator is empty."""

    def __init__(self) -> None:
        super().__init__("Prefixed UUID has empty prefix")


class NoDataError(PrefixedUUIDError):
    """Raised when nothing follows the prefix separator."""

    def __init__(self) -> None:
        super().__init__("Prefixed UUID has no UUID data")


class UUIDDataDecodeError(PrefixedUUIDError):
    """Raised when the UUID payload is not valid base64 or not 16 bytes long."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Can't decode UUID data: {reason}")
        self.reason = reason
