"""
Base58check encoding.

A base58check string carries a version byte, a payload and a checksum:

    base58( version (1) || payload || checksum (4) )

    checksum = sha256(sha256(version || payload))[:4]

Base58 excludes visually ambiguous characters (0, O, I, l), and the
checksum catches typos when the string is copied by hand.
"""

from __future__ import annotations

import hashlib
from typing import Final

import base58

from .exceptions import BadChecksumError, MalformedAddressError

__all__ = [
    "DEFAULT_VERSION",
    "checksum",
    "encode",
    "decode",
    "decode_with_version",
]

DEFAULT_VERSION: Final = 0x00
"""Version byte used for public key addresses."""

CHECKSUM_LENGTH: Final = 4
"""Number of double-SHA256 bytes appended to the payload."""

_MAX_VERSION: Final = 0xFF


def checksum(data: bytes) -> bytes:
    """Return the first four bytes of sha256(sha256(data))."""
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()[:CHECKSUM_LENGTH]


def encode(version: int, payload: bytes) -> str:
    """
    Encode a payload as a base58check string.

    Args:
        version: Version byte (0-255).
        payload: Data to encode.

    Returns:
        Base58check string.

    Raises:
        ValueError: If the version does not fit in a byte.
    """
    if not 0 <= version <= _MAX_VERSION:
        raise ValueError(f"Version must be in [0, {_MAX_VERSION}], got {version}")

    versioned = bytes([version]) + payload
    return base58.b58encode(versioned + checksum(versioned)).decode("ascii")


def decode_with_version(text: str) -> tuple[int, bytes]:
    """
    Decode a base58check string into its version and payload.

    Args:
        text: Base58check string.

    Returns:
        (version, payload) tuple.

    Raises:
        MalformedAddressError: If the text is not valid base58.
        BadChecksumError: If the checksum is missing or does not match.
    """
    try:
        raw = base58.b58decode(text)
    except ValueError as e:
        raise MalformedAddressError(text, str(e)) from e

    if len(raw) < 1 + CHECKSUM_LENGTH:
        raise BadChecksumError(f"decoded data too short ({len(raw)} bytes)")

    versioned, expected = raw[:-CHECKSUM_LENGTH], raw[-CHECKSUM_LENGTH:]
    if checksum(versioned) != expected:
        raise BadChecksumError()

    return versioned[0], versioned[1:]


def decode(text: str) -> bytes:
    """Decode a base58check string, discarding the version byte."""
    _, payload = decode_with_version(text)
    return payload
