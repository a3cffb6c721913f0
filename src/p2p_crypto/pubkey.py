"""
Binary encoding of public keys.

A public key binary is a tag byte followed by 32 bytes of key material:

    [tag][key (32)]

For ecc_compact the 32 bytes are the x coordinate of a compact point; the
full point is rebuilt on decode. For ed25519 they are the public key itself.

This is the value shared with peers, so decoding checks that the key is
tagged for the network the caller expects.
"""

from __future__ import annotations

from typing import Final

from . import curve as p256
from .exceptions import BadNetworkError, MalformedBinaryError, NotCompactError
from .keys import EccCompactPublicKey, Ed25519PublicKey, PublicKey
from .types import KeyType, Network, make_tag, split_tag

__all__ = [
    "PUBKEY_BIN_LENGTH",
    "pubkey_to_bin",
    "bin_to_pubkey",
]

PUBKEY_BIN_LENGTH: Final = 1 + 32
"""Tag byte plus 32 bytes of key material."""


def pubkey_to_bin(network: Network, public_key: PublicKey) -> bytes:
    """
    Encode a public key for the given network.

    Args:
        network: Network to tag the key with.
        public_key: Key to encode.

    Returns:
        33-byte public key binary.

    Raises:
        NotCompactError: If an ecc_compact point is not compact.
    """
    tag = bytes([make_tag(network, public_key.key_type)])

    if isinstance(public_key, EccCompactPublicKey):
        compact = public_key.compact_bytes
        if compact is None:
            raise NotCompactError()
        return tag + compact

    return tag + public_key.key


def bin_to_pubkey(network: Network, data: bytes) -> PublicKey:
    """
    Decode a public key binary, asserting its network.

    Args:
        network: Network the key must be tagged for.
        data: 33-byte public key binary.

    Returns:
        The decoded public key.

    Raises:
        MalformedBinaryError: If the length or tag is invalid, or the
            compact point is not on the curve.
        BadNetworkError: If the key is tagged for another network.
    """
    if len(data) != PUBKEY_BIN_LENGTH:
        raise MalformedBinaryError("public key binary must be 33 bytes", length=len(data))

    actual, key_type = split_tag(data[0])
    if actual != network:
        raise BadNetworkError(int(actual))

    key = data[1:]

    if key_type is KeyType.ECC_COMPACT:
        try:
            return EccCompactPublicKey(point=p256.recover_point(key))
        except ValueError as e:
            raise MalformedBinaryError(f"invalid compact public key: {e}") from e

    return Ed25519PublicKey(key=key)
