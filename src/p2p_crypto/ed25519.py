"""
Ed25519 primitives backed by libsodium (PyNaCl).

Secrets use the libsodium layout: a 64-byte value made of the 32-byte seed
followed by the 32-byte public key.

Key agreement converts both keys to their Curve25519 (Montgomery) form and
runs `crypto_box_beforenm`, which hashes the X25519 result with HSalsa20.
"""

from __future__ import annotations

from typing import Final

from nacl import bindings
from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey

__all__ = [
    "PUBLIC_KEY_LENGTH",
    "SECRET_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "generate_keypair",
    "sign_detached",
    "verify_detached",
    "agree",
]

PUBLIC_KEY_LENGTH: Final = bindings.crypto_sign_PUBLICKEYBYTES
"""Ed25519 public key size (32 bytes)."""

SECRET_KEY_LENGTH: Final = bindings.crypto_sign_SECRETKEYBYTES
"""libsodium Ed25519 secret size (64 bytes)."""

SIGNATURE_LENGTH: Final = bindings.crypto_sign_BYTES
"""Detached signature size (64 bytes)."""

_SEED_LENGTH: Final = bindings.crypto_sign_SEEDBYTES


def generate_keypair() -> tuple[bytes, bytes]:
    """
    Generate a random Ed25519 keypair.

    Returns:
        (secret, public) tuple: 64-byte secret and 32-byte public key.
    """
    public, secret = bindings.crypto_sign_keypair()
    return secret, public


def sign_detached(message: bytes, secret: bytes) -> bytes:
    """Sign `message`, returning the 64-byte detached signature."""
    return SigningKey(secret[:_SEED_LENGTH]).sign(message).signature


def verify_detached(message: bytes, signature: bytes, public: bytes) -> bool:
    """
    Verify a detached Ed25519 signature.

    Returns:
        True if the signature is valid, False otherwise.
    """
    if len(signature) != SIGNATURE_LENGTH or len(public) != PUBLIC_KEY_LENGTH:
        return False

    try:
        VerifyKey(public).verify(message, signature)
    except BadSignatureError:
        return False
    return True


def agree(secret: bytes, peer_public: bytes) -> bytes:
    """
    Compute the shared key between our secret and a peer's public key.

    Args:
        secret: Our 64-byte Ed25519 secret.
        peer_public: The peer's 32-byte Ed25519 public key.

    Returns:
        32-byte precomputed box key.
    """
    return bindings.crypto_box_beforenm(
        bindings.crypto_sign_ed25519_pk_to_curve25519(peer_public),
        bindings.crypto_sign_ed25519_sk_to_curve25519(secret),
    )
