"""
Human-shareable public key addresses.

A public key address is the base58check encoding (version 0) of the public
key binary. Peers additionally use the multiaddr form:

    /p2p/<base58check address>
"""

from __future__ import annotations

from typing import Final

from . import checksum
from .exceptions import MalformedAddressError
from .keys import PublicKey
from .pubkey import bin_to_pubkey, pubkey_to_bin
from .types import Network

__all__ = [
    "P2P_PROTOCOL",
    "bin_to_b58",
    "b58_to_bin",
    "b58_to_version_bin",
    "pubkey_to_b58",
    "b58_to_pubkey",
    "pubkey_bin_to_p2p",
    "p2p_to_pubkey_bin",
]

P2P_PROTOCOL: Final = "p2p"
"""Multiaddr protocol name for peer identities."""


def bin_to_b58(data: bytes, version: int = checksum.DEFAULT_VERSION) -> str:
    """Encode bytes as a base58check string (version 0 unless given)."""
    return checksum.encode(version, data)


def b58_to_bin(text: str) -> bytes:
    """Decode a base58check string, ignoring its version."""
    return checksum.decode(text)


def b58_to_version_bin(text: str) -> tuple[int, bytes]:
    """Decode a base58check string into (version, payload)."""
    return checksum.decode_with_version(text)


def pubkey_to_b58(network: Network, public_key: PublicKey) -> str:
    """Encode a public key as a base58check address on the given network."""
    return bin_to_b58(pubkey_to_bin(network, public_key))


def b58_to_pubkey(network: Network, text: str) -> PublicKey:
    """
    Decode a base58check address into a public key.

    Args:
        network: Network the key must be tagged for.
        text: Base58check address.

    Returns:
        The decoded public key.

    Raises:
        BadChecksumError: If the address checksum is wrong.
        BadNetworkError: If the key is tagged for another network.
    """
    return bin_to_pubkey(network, b58_to_bin(text))


def pubkey_bin_to_p2p(pubkey_bin: bytes) -> str:
    """Convert a public key binary to a "/p2p/..." multiaddr."""
    return f"/{P2P_PROTOCOL}/{bin_to_b58(pubkey_bin)}"


def p2p_to_pubkey_bin(address: str) -> bytes:
    """
    Extract the public key binary from a "/p2p/..." multiaddr.

    Args:
        address: Multiaddr holding exactly one p2p component.

    Returns:
        The public key binary.

    Raises:
        MalformedAddressError: If the multiaddr has any other shape.
        BadChecksumError: If the address checksum is wrong.
    """
    # "/p2p/abc" splits into ["", "p2p", "abc"].
    parts = address.split("/")
    if len(parts) != 3 or parts[0] != "" or parts[1] != P2P_PROTOCOL or not parts[2]:
        raise MalformedAddressError(address, "expected a single /p2p/<address> component")

    return b58_to_bin(parts[2])
