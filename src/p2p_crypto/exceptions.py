"""Exception hierarchy for key encoding and key operations."""

from __future__ import annotations


class KeyCodecError(Exception):
    """
    Base exception for all key codec errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class BadChecksumError(KeyCodecError):
    """Raised when a base58check string fails checksum validation."""

    def __init__(self, detail: str = "checksum mismatch") -> None:
        super().__init__(f"Bad base58check checksum: {detail}")


class BadNetworkError(KeyCodecError):
    """
    Raised when a decoded key is tagged for a different network.

    Attributes:
        actual: The network nibble found in the tag byte.
    """

    def __init__(self, actual: int) -> None:
        self.actual = actual
        super().__init__(f"Key is tagged for network {actual}")


class NotCompactError(KeyCodecError):
    """Raised when serializing an elliptic-curve public key that is not compact."""

    def __init__(self) -> None:
        super().__init__("Public key is not compact and cannot be encoded in 32 bytes")


class MalformedBinaryError(KeyCodecError):
    """
    Raised when a byte sequence matches no recognized key layout.

    Attributes:
        detail: Description of what went wrong.
        length: Length of the rejected input (if known).
    """

    def __init__(self, detail: str, *, length: int | None = None) -> None:
        self.detail = detail
        self.length = length

        msg = f"Malformed key binary: {detail}"
        if length is not None:
            msg = f"{msg} (length {length})"

        super().__init__(msg)


class MalformedAddressError(KeyCodecError):
    """
    Raised when an address string cannot be parsed.

    Attributes:
        address: The rejected address string.
        detail: Description of what went wrong.
    """

    def __init__(self, address: str, detail: str) -> None:
        self.address = address
        self.detail = detail
        super().__init__(f"Malformed address {address!r}: {detail}")


class KeyTypeMismatchError(KeyCodecError):
    """
    Raised when a key agreement peer does not match the local key.

    Attributes:
        expected: Description of the key the local side requires.
        actual: Description of the key that was supplied.
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} peer key, got {actual}")
