"""
Signing, verification and key agreement.

Callers never hand raw private keys to the code that signs or derives shared
secrets. Instead they build a `Signer` or `KeyAgreement` once and pass that
around. The object owns the private key and exposes only its one operation,
so other signing back ends (for example a hardware module) can stand in for
it.

ecc_compact:
    ECDSA over SHA-256 on P-256 (DER signatures), and raw ECDH.

ed25519:
    Detached Ed25519 signatures, and X25519 after converting both keys to
    Curve25519.

A KDF should be applied to agreed secrets before use.
"""

from __future__ import annotations

from typing import NoReturn

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from . import curve as p256
from . import ed25519
from .exceptions import KeyTypeMismatchError
from .keys import (
    EccCompactPrivateKey,
    EccCompactPublicKey,
    Ed25519PublicKey,
    PrivateKey,
    PublicKey,
)
from .types import KeyType

__all__ = [
    "Signer",
    "KeyAgreement",
    "make_signer",
    "make_key_agreement",
    "verify",
]


class _SecretHolder:
    """Base for objects that own a private key and must not leak it."""

    __slots__ = ("__key",)

    def __init__(self, private_key: PrivateKey) -> None:
        self.__key = private_key

    @property
    def key_type(self) -> KeyType:
        return self.__key.key_type

    def _private_key(self) -> PrivateKey:
        return self.__key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.key_type.name})"

    def __reduce__(self) -> NoReturn:
        raise TypeError(f"{self.__class__.__name__} cannot be pickled")


class Signer(_SecretHolder):
    """Signs messages with a private key it owns."""

    __slots__ = ()

    def sign(self, message: bytes) -> bytes:
        """
        Sign a message.

        Returns:
            DER-encoded ECDSA signature for ecc_compact keys, or a 64-byte
            detached signature for ed25519 keys.
        """
        key = self._private_key()

        if isinstance(key, EccCompactPrivateKey):
            private_key = p256.load_private_key(key.scalar, key.curve)
            return private_key.sign(message, ec.ECDSA(hashes.SHA256()))

        return ed25519.sign_detached(message, key.secret)

    __call__ = sign


class KeyAgreement(_SecretHolder):
    """Derives shared secrets from a private key it owns."""

    __slots__ = ()

    def agree(self, peer: PublicKey) -> bytes:
        """
        Compute the shared secret with a peer.

        Args:
            peer: The peer's public key, of the same family and curve.

        Returns:
            32-byte shared secret.

        Raises:
            KeyTypeMismatchError: If the peer key does not match our key.
            ValueError: If the peer key is not a valid point on our curve.
        """
        key = self._private_key()

        if isinstance(key, EccCompactPrivateKey):
            if not isinstance(peer, EccCompactPublicKey) or peer.curve != key.curve:
                raise KeyTypeMismatchError(f"ecc_compact/{key.curve}", _describe(peer))
            private_key = p256.load_private_key(key.scalar, key.curve)
            return private_key.exchange(ec.ECDH(), p256.load_public_key(peer.point, peer.curve))

        if not isinstance(peer, Ed25519PublicKey):
            raise KeyTypeMismatchError("ed25519", _describe(peer))
        return ed25519.agree(key.secret, peer.key)

    __call__ = agree


def _describe(public_key: PublicKey) -> str:
    if isinstance(public_key, EccCompactPublicKey):
        return f"ecc_compact/{public_key.curve}"
    return public_key.key_type.name.lower()


def make_signer(private_key: PrivateKey) -> Signer:
    """Wrap a private key in a signer."""
    return Signer(private_key)


def make_key_agreement(private_key: PrivateKey) -> KeyAgreement:
    """Wrap a private key in a key agreement function."""
    return KeyAgreement(private_key)


def verify(message: bytes, signature: bytes, public_key: PublicKey) -> bool:
    """
    Verify a signature.

    Args:
        message: Original message that was signed.
        signature: Signature produced by a `Signer`.
        public_key: Key of the claimed signer.

    Returns:
        True if the signature is valid, False otherwise.
    """
    if isinstance(public_key, Ed25519PublicKey):
        return ed25519.verify_detached(message, signature, public_key.key)

    try:
        verifier = p256.load_public_key(public_key.point, public_key.curve)
    except ValueError:
        return False

    try:
        verifier.verify(signature, message, ec.ECDSA(hashes.SHA256()))
        return True
    except InvalidSignature:
        return False
