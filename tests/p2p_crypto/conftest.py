"""
Shared pytest fixtures for key tests.

Provides freshly generated bundles and the fixed vectors produced by other
implementations of the key format.
"""

from __future__ import annotations

import pytest

from p2p_crypto import (
    EccCompactPrivateKey,
    Ed25519PrivateKey,
    Ed25519PublicKey,
    KeyBundle,
    KeyType,
    Network,
    NetworkRegistry,
    generate_keys,
)

# -----------------------------------------------------------------------------
# Generated Keys
# -----------------------------------------------------------------------------


@pytest.fixture(params=list(KeyType), ids=lambda key_type: key_type.name.lower())
def key_type(request: pytest.FixtureRequest) -> KeyType:
    """Each supported key family."""
    return request.param


@pytest.fixture(params=list(Network), ids=lambda network: network.name.lower())
def network(request: pytest.FixtureRequest) -> Network:
    """Each supported network."""
    return request.param


@pytest.fixture
def bundle(key_type: KeyType, network: Network) -> KeyBundle:
    """Fresh bundle for every key type and network combination."""
    return generate_keys(key_type, network)


@pytest.fixture
def registry() -> NetworkRegistry:
    """Unset network registry."""
    return NetworkRegistry()


# -----------------------------------------------------------------------------
# Fixed Vectors
# -----------------------------------------------------------------------------

SHORT_SCALAR = bytes(
    [
        49, 94, 129, 63, 91, 89, 3, 86, 29, 23, 158, 86, 76, 180, 129, 140,
        194, 25, 52, 94, 141, 36, 222, 112, 234, 227, 33, 172, 94, 168, 123,
    ]
)  # fmt: skip
"""A naturally occurring 31-byte P-256 scalar."""

SHORT_SCALAR_POINT = bytes(
    [
        4, 2, 151, 174, 89, 188, 129, 160, 76, 74, 234, 246, 22, 24, 16,
        96, 70, 219, 183, 246, 235, 40, 90, 107, 29, 126, 74, 14, 11,
        201, 75, 2, 168, 74, 18, 165, 99, 26, 32, 161, 195, 100, 232,
        40, 130, 76, 231, 85, 239, 255, 213, 129, 210, 184, 181, 233,
        79, 154, 11, 229, 103, 160, 213, 105, 208,
    ]
)  # fmt: skip
"""Public point belonging to SHORT_SCALAR."""

WALLET_ECC_SCALAR = bytes(
    [
        87, 144, 91, 38, 220, 189, 67, 111, 253, 122, 45, 167, 249, 160, 253, 73,
        145, 93, 208, 112, 65, 69, 89, 175, 98, 89, 59, 222, 68, 178, 37, 176,
    ]
)  # fmt: skip

WALLET_ECC_POINT = bytes(
    [
        4,
        35, 41, 75, 130, 51, 74, 141, 42, 34, 140, 61, 222, 93, 12, 114, 10,
        238, 142, 214, 23, 56, 70, 82, 128, 107, 100, 190, 75, 80, 92, 66, 106,
        47, 99, 220, 162, 215, 185, 130, 211, 86, 56, 165, 149, 80, 98, 123, 196,
        188, 218, 249, 171, 170, 182, 108, 247, 184, 233, 199, 14, 216, 41, 209, 36,
    ]
)  # fmt: skip

WALLET_ECC_BIN = (
    bytes([0x10])  # testnet, ecc_compact
    + WALLET_ECC_SCALAR
    + bytes([0x10])  # repeated tag
    + WALLET_ECC_POINT[1:33]  # compact public key
)
"""Wallet-format testnet ecc_compact bundle."""

WALLET_ED25519_SECRET = bytes(
    [
        192, 147, 19, 139, 114, 76, 92, 18, 67, 206, 210, 241, 21, 18, 84, 12,
        26, 171, 160, 255, 6, 17, 227, 18, 78, 255, 182, 94, 202, 62, 125, 50,
        75, 192, 49, 183, 242, 203, 231, 180, 84, 235, 178, 8, 57, 34, 132, 195,
        107, 140, 155, 85, 133, 58, 131, 188, 94, 234, 216, 101, 241, 12, 231, 107,
    ]
)  # fmt: skip

WALLET_ED25519_PUBLIC = bytes(
    [
        87, 246, 67, 78, 245, 59, 166, 216, 236, 17, 195, 144, 101, 96, 188, 112,
        178, 183, 80, 75, 195, 218, 46, 184, 175, 181, 131, 207, 236, 146, 18, 237,
    ]
)  # fmt: skip

WALLET_ED25519_BIN = (
    bytes([0x11])  # testnet, ed25519
    + WALLET_ED25519_SECRET
    + bytes([0x11])  # repeated tag
    + WALLET_ED25519_PUBLIC
)
"""Wallet-format testnet ed25519 bundle."""


@pytest.fixture
def short_scalar_bundle() -> KeyBundle:
    """Mainnet ecc_compact bundle with a 31-byte scalar."""
    secret = EccCompactPrivateKey(scalar=SHORT_SCALAR, public_point=SHORT_SCALAR_POINT)
    return KeyBundle(secret=secret, public=secret.public_key(), network=Network.MAINNET)


@pytest.fixture
def wallet_ecc_bundle() -> KeyBundle:
    """Expected decoding of WALLET_ECC_BIN."""
    secret = EccCompactPrivateKey(scalar=WALLET_ECC_SCALAR, public_point=WALLET_ECC_POINT)
    return KeyBundle(secret=secret, public=secret.public_key(), network=Network.TESTNET)


@pytest.fixture
def wallet_ed25519_bundle() -> KeyBundle:
    """Expected decoding of WALLET_ED25519_BIN."""
    return KeyBundle(
        secret=Ed25519PrivateKey(secret=WALLET_ED25519_SECRET),
        public=Ed25519PublicKey(key=WALLET_ED25519_PUBLIC),
        network=Network.TESTNET,
    )


@pytest.fixture
def wallet_ecc_bin() -> bytes:
    """Wallet-format testnet ecc_compact bundle bytes."""
    return WALLET_ECC_BIN


@pytest.fixture
def wallet_ed25519_bin() -> bytes:
    """Wallet-format testnet ed25519 bundle bytes."""
    return WALLET_ED25519_BIN
