"""Tests for public key binaries."""

from __future__ import annotations

import pytest

from p2p_crypto import (
    BadNetworkError,
    EccCompactPublicKey,
    Ed25519PublicKey,
    KeyBundle,
    KeyType,
    MalformedBinaryError,
    Network,
    NotCompactError,
    bin_to_pubkey,
    generate_keys,
    pubkey_to_bin,
)
from p2p_crypto.curve import P256_PRIME


def _other(network: Network) -> Network:
    return Network.TESTNET if network is Network.MAINNET else Network.MAINNET


class TestPubkeyToBin:
    """Tests for pubkey_to_bin."""

    def test_layout(self, bundle: KeyBundle, network: Network, key_type: KeyType) -> None:
        """Tag byte followed by 32 bytes of key material."""
        data = pubkey_to_bin(network, bundle.public)

        assert len(data) == 33
        assert data[0] == (network << 4) | key_type

    def test_ecc_compact_uses_x_coordinate(self) -> None:
        """ecc_compact keys are stored as their x coordinate."""
        public = generate_keys(KeyType.ECC_COMPACT).public
        assert isinstance(public, EccCompactPublicKey)

        assert pubkey_to_bin(Network.MAINNET, public)[1:] == public.point[1:33]

    def test_ed25519_uses_raw_key(self) -> None:
        """ed25519 keys are stored as-is."""
        public = generate_keys(KeyType.ED25519).public
        assert isinstance(public, Ed25519PublicKey)

        assert pubkey_to_bin(Network.TESTNET, public) == b"\x11" + public.key

    def test_not_compact(self) -> None:
        """A point with the larger y cannot be encoded."""
        public = generate_keys(KeyType.ECC_COMPACT).public
        assert isinstance(public, EccCompactPublicKey)

        y = int.from_bytes(public.point[33:], "big")
        flipped_y = (P256_PRIME - y).to_bytes(32, "big")
        negated = EccCompactPublicKey(point=public.point[:33] + flipped_y)

        assert not negated.is_compact
        with pytest.raises(NotCompactError):
            pubkey_to_bin(Network.MAINNET, negated)


class TestBinToPubkey:
    """Tests for bin_to_pubkey."""

    def test_roundtrip(self, bundle: KeyBundle, network: Network) -> None:
        """Decoding an encoded key returns the same key."""
        assert bin_to_pubkey(network, pubkey_to_bin(network, bundle.public)) == bundle.public

    def test_wrong_network(self, bundle: KeyBundle, network: Network) -> None:
        """Decoding on the other network reports the actual network."""
        data = pubkey_to_bin(network, bundle.public)

        with pytest.raises(BadNetworkError) as exc_info:
            bin_to_pubkey(_other(network), data)

        assert exc_info.value.actual == network

    @pytest.mark.parametrize("length", [0, 1, 32, 34, 65])
    def test_wrong_length(self, length: int) -> None:
        """Only 33-byte binaries are accepted."""
        with pytest.raises(MalformedBinaryError, match="33 bytes"):
            bin_to_pubkey(Network.MAINNET, b"\x01" * length)

    def test_unknown_key_type(self) -> None:
        """Unknown key type nibbles are rejected."""
        with pytest.raises(MalformedBinaryError, match="key type nibble"):
            bin_to_pubkey(Network.MAINNET, b"\x05" + bytes(32))

    def test_unknown_network(self) -> None:
        """Unknown network nibbles are rejected before the network comparison."""
        with pytest.raises(MalformedBinaryError, match="network nibble"):
            bin_to_pubkey(Network.MAINNET, b"\x31" + bytes(32))

    def test_point_off_curve(self) -> None:
        """An ecc_compact key that is not on the curve is rejected."""
        with pytest.raises(MalformedBinaryError, match="invalid compact public key"):
            bin_to_pubkey(Network.MAINNET, b"\x00" + b"\xff" * 32)
