"""
Binary encoding of key bundles.

A key bundle is stored as a tag byte followed by the private and public key
material. The layouts written by this module are:

    ecc_compact, 32-byte scalar:  [tag][scalar (32)][point (65)]
    ecc_compact, 31-byte scalar:  [tag][0x00][scalar (31)][point (65)]
    ed25519:                      [tag][secret (64)][public (32)]

Small P-256 scalars come out of key generation as 31 bytes. The explicit
zero pads them to the same 32-byte slot so the layout stays fixed.

Reading also accepts the wallet format, which repeats the tag byte in front
of the public key and stores P-256 public keys in compact form:

    ecc_compact:  [tag][scalar (32)][tag][compact point (32)]
    ed25519:      [tag][secret (64)][tag][public (32)]

DECODING ORDER
--------------
Decoding walks a fixed list of rules and the first matching rule wins.
Lengths alone do not tell the layouts apart (the wallet ed25519 layout and
the canonical ecc_compact layouts are all 98 bytes), so the wallet rules
come first and also check the repeated tag.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Final

from . import curve as p256
from . import ed25519
from .exceptions import MalformedBinaryError
from .keys import (
    EccCompactPrivateKey,
    Ed25519PrivateKey,
    Ed25519PublicKey,
    KeyBundle,
)
from .types import KeyType, Network, make_tag, split_tag

__all__ = [
    "keys_to_bin",
    "keys_from_bin",
]

logger = logging.getLogger(__name__)

_SCALAR_LENGTH: Final = 32
"""Slot size of a P-256 private scalar."""

_SHORT_SCALAR_LENGTH: Final = 31
"""Size of a small P-256 scalar stored behind a zero pad byte."""

_ECC_COMPACT_LENGTH: Final = 1 + _SCALAR_LENGTH + p256.UNCOMPRESSED_POINT_LENGTH
"""Canonical ecc_compact bundle size (98 bytes), padded or not."""

_ECC_WALLET_LENGTH: Final = 1 + _SCALAR_LENGTH + 1 + p256.COMPACT_POINT_LENGTH
"""Wallet ecc_compact bundle size (66 bytes)."""

_ED25519_LENGTH: Final = 1 + ed25519.SECRET_KEY_LENGTH + ed25519.PUBLIC_KEY_LENGTH
"""Canonical ed25519 bundle size (97 bytes)."""

_ED25519_WALLET_LENGTH: Final = _ED25519_LENGTH + 1
"""Wallet ed25519 bundle size (98 bytes)."""


def _is_uncompressed(point: bytes) -> bool:
    return len(point) == p256.UNCOMPRESSED_POINT_LENGTH and point[0] == 0x04


def keys_to_bin(bundle: KeyBundle) -> bytes:
    """
    Serialize a key bundle.

    Args:
        bundle: Keys to serialize.

    Returns:
        Binary bundle suitable for `keys_from_bin`.

    Raises:
        ValueError: If the keys do not fit the fixed layout (see module
            docstring). P-256 scalars must be 31 or 32 bytes and points
            uncompressed.
    """
    secret, public = bundle.secret, bundle.public
    tag = bytes([make_tag(bundle.network, bundle.key_type)])

    if isinstance(secret, EccCompactPrivateKey):
        scalar = secret.scalar
        if not _is_uncompressed(secret.public_point):
            raise ValueError("Public point must be a 65-byte uncompressed SEC1 point")
        if len(scalar) == _SCALAR_LENGTH:
            return tag + scalar + secret.public_point
        if len(scalar) == _SHORT_SCALAR_LENGTH:
            return tag + b"\x00" + scalar + secret.public_point
        raise ValueError(f"Unsupported private scalar length: {len(scalar)}")

    if not isinstance(public, Ed25519PublicKey):
        raise ValueError(f"Public key type {public.key_type.name} does not match secret key")
    if (
        len(secret.secret) != ed25519.SECRET_KEY_LENGTH
        or len(public.key) != ed25519.PUBLIC_KEY_LENGTH
    ):
        raise ValueError("Ed25519 keys must be 64-byte secret and 32-byte public key")
    return tag + secret.secret + public.key


# =============================================================================
# Decoding rules
# =============================================================================
#
# Each rule pairs a predicate over the raw bytes with a builder. The builder
# runs only when the predicate matched, so it may rely on the length and
# tag checks the predicate made.


_KEY_TYPE_CODES: Final = frozenset(int(key_type) for key_type in KeyType)


def _key_type_of(data: bytes) -> KeyType | None:
    if not data or (data[0] & 0x0F) not in _KEY_TYPE_CODES:
        return None
    return KeyType(data[0] & 0x0F)


def _is_ecc_wallet(data: bytes) -> bool:
    return (
        len(data) == _ECC_WALLET_LENGTH
        and _key_type_of(data) is KeyType.ECC_COMPACT
        and data[1 + _SCALAR_LENGTH] == data[0]
    )


def _from_ecc_wallet(data: bytes) -> KeyBundle:
    tag, scalar = data[:1], data[1 : 1 + _SCALAR_LENGTH]
    compact = data[2 + _SCALAR_LENGTH :]

    try:
        point = p256.recover_point(compact)
    except ValueError as e:
        raise MalformedBinaryError(f"invalid compact public key: {e}", length=len(data)) from e

    return keys_from_bin(tag + scalar + point)


def _is_ed25519_wallet(data: bytes) -> bool:
    return (
        len(data) == _ED25519_WALLET_LENGTH
        and _key_type_of(data) is KeyType.ED25519
        and data[1 + ed25519.SECRET_KEY_LENGTH] == data[0]
    )


def _from_ed25519_wallet(data: bytes) -> KeyBundle:
    split = 1 + ed25519.SECRET_KEY_LENGTH
    return keys_from_bin(data[:split] + data[split + 1 :])


def _is_ecc_canonical(data: bytes) -> bool:
    return (
        len(data) == _ECC_COMPACT_LENGTH
        and _key_type_of(data) is KeyType.ECC_COMPACT
        and data[1 + _SCALAR_LENGTH] == 0x04
    )


def _is_ecc_padded(data: bytes) -> bool:
    return _is_ecc_canonical(data) and data[1] == 0x00


def _ecc_bundle(network: Network, scalar: bytes, point: bytes) -> KeyBundle:
    try:
        p256.load_public_key(point)
    except ValueError as e:
        raise MalformedBinaryError(
            f"invalid public point: {e}", length=_ECC_COMPACT_LENGTH
        ) from e

    secret = EccCompactPrivateKey(scalar=scalar, public_point=point)
    return KeyBundle(secret=secret, public=secret.public_key(), network=network)


def _from_ecc_padded(data: bytes) -> KeyBundle:
    network, _ = split_tag(data[0])
    return _ecc_bundle(network, data[2 : 1 + _SCALAR_LENGTH], data[1 + _SCALAR_LENGTH :])


def _from_ecc_canonical(data: bytes) -> KeyBundle:
    network, _ = split_tag(data[0])
    return _ecc_bundle(network, data[1 : 1 + _SCALAR_LENGTH], data[1 + _SCALAR_LENGTH :])


def _is_ed25519_canonical(data: bytes) -> bool:
    return len(data) == _ED25519_LENGTH and _key_type_of(data) is KeyType.ED25519


def _from_ed25519_canonical(data: bytes) -> KeyBundle:
    network, _ = split_tag(data[0])
    split = 1 + ed25519.SECRET_KEY_LENGTH
    return KeyBundle(
        secret=Ed25519PrivateKey(secret=data[1:split]),
        public=Ed25519PublicKey(key=data[split:]),
        network=network,
    )


_Rule = tuple[str, Callable[[bytes], bool], Callable[[bytes], KeyBundle]]

_DECODE_RULES: Final[tuple[_Rule, ...]] = (
    ("ecc_compact wallet", _is_ecc_wallet, _from_ecc_wallet),
    ("ed25519 wallet", _is_ed25519_wallet, _from_ed25519_wallet),
    ("ecc_compact padded", _is_ecc_padded, _from_ecc_padded),
    ("ecc_compact", _is_ecc_canonical, _from_ecc_canonical),
    ("ed25519", _is_ed25519_canonical, _from_ed25519_canonical),
)
"""Decoding rules in priority order. Do not reorder."""


def keys_from_bin(data: bytes) -> KeyBundle:
    """
    Deserialize a key bundle.

    Args:
        data: Bundle bytes in canonical or wallet layout.

    Returns:
        The decoded key bundle.

    Raises:
        MalformedBinaryError: If the bytes match no known layout, or the
            public key they carry is not a point on the curve.
    """
    for name, matches, build in _DECODE_RULES:
        if matches(data):
            logger.debug("Decoding %d-byte key bundle as %s", len(data), name)
            return build(data)

    raise MalformedBinaryError("no matching key layout", length=len(data))
