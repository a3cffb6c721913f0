"""
Network and key type identifiers.

Every binary key starts with a single tag byte split into two nibbles:

    [network (4 bits)][key type (4 bits)]

The high nibble selects the network the key belongs to (mainnet or testnet),
the low nibble selects the key family of the material that follows.

Examples:
    0x00 = mainnet, ecc_compact
    0x01 = mainnet, ed25519
    0x10 = testnet, ecc_compact
    0x11 = testnet, ed25519
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

from .exceptions import MalformedBinaryError

__all__ = [
    "KeyType",
    "Network",
    "make_tag",
    "split_tag",
]


class KeyType(IntEnum):
    """Key family codes stored in the low nibble of the tag byte."""

    ECC_COMPACT = 0
    """NIST P-256 key whose public point is recoverable from its x coordinate."""

    ED25519 = 1
    """Ed25519 key (64-byte libsodium secret, 32-byte public key)."""


class Network(IntEnum):
    """Network codes stored in the high nibble of the tag byte."""

    MAINNET = 0
    """Production network."""

    TESTNET = 1
    """Test network."""

    @classmethod
    def from_name(cls, name: str) -> Network:
        """
        Parse a network from its lowercase name.

        Args:
            name: "mainnet" or "testnet" (case-insensitive).

        Returns:
            The matching network.

        Raises:
            ValueError: If the name is unknown.
        """
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown network: {name!r}") from None


_NIBBLE_MASK: Final = 0x0F
"""Mask selecting the low four bits of a byte."""


def make_tag(network: Network, key_type: KeyType) -> int:
    """Combine a network and key type into a tag byte."""
    return (int(network) << 4) | int(key_type)


def split_tag(tag: int) -> tuple[Network, KeyType]:
    """
    Split a tag byte into its network and key type.

    Args:
        tag: The leading byte of a binary key.

    Returns:
        (network, key_type) tuple.

    Raises:
        MalformedBinaryError: If either nibble holds an unknown value.
    """
    net_nibble = (tag >> 4) & _NIBBLE_MASK
    type_nibble = tag & _NIBBLE_MASK

    try:
        network = Network(net_nibble)
    except ValueError:
        raise MalformedBinaryError(f"unknown network nibble {net_nibble:#x}") from None

    try:
        key_type = KeyType(type_nibble)
    except ValueError:
        raise MalformedBinaryError(f"unknown key type nibble {type_nibble:#x}") from None

    return network, key_type
