"""
Key records for the two supported key families.

ecc_compact:
    NIST P-256 key. The private record carries the raw scalar together with
    the uncompressed public point, so it can be written out without
    recomputing the point. The public point is always compact (see
    `curve`), which lets it travel as a 32-byte x coordinate.

ed25519:
    libsodium Ed25519 key. The secret is 64 bytes (seed || public), the
    public key 32 bytes.

A `KeyBundle` pairs a private key with its public key and the network both
are tagged for.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from . import curve as p256
from . import ed25519
from .types import KeyType, Network

__all__ = [
    "EccCompactPrivateKey",
    "EccCompactPublicKey",
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
    "PrivateKey",
    "PublicKey",
    "KeyBundle",
    "generate_keys",
]


@dataclass(frozen=True, slots=True)
class EccCompactPrivateKey:
    """
    P-256 private key record.

    Attributes:
        scalar: Big-endian private scalar (32 bytes, or 31 for small scalars).
        public_point: Uncompressed SEC1 public point.
        curve: Named curve.
    """

    scalar: bytes = field(repr=False)
    public_point: bytes
    curve: str = p256.DEFAULT_CURVE

    @property
    def key_type(self) -> KeyType:
        return KeyType.ECC_COMPACT

    def public_key(self) -> EccCompactPublicKey:
        """Return the public key held in this record."""
        return EccCompactPublicKey(point=self.public_point, curve=self.curve)


@dataclass(frozen=True, slots=True)
class EccCompactPublicKey:
    """
    P-256 public key.

    Attributes:
        point: Uncompressed SEC1 point (0x04 || x || y).
        curve: Named curve.
    """

    point: bytes
    curve: str = p256.DEFAULT_CURVE

    @property
    def key_type(self) -> KeyType:
        return KeyType.ECC_COMPACT

    @property
    def is_compact(self) -> bool:
        """True if the point can be rebuilt from its x coordinate alone."""
        return p256.is_compact(self.point)

    @property
    def compact_bytes(self) -> bytes | None:
        """The 32-byte compact form, or None if the point is not compact."""
        return p256.compact_x(self.point)

    @classmethod
    def from_compact(
        cls, compact: bytes, curve_name: str = p256.DEFAULT_CURVE
    ) -> EccCompactPublicKey:
        """Rebuild a public key from its 32-byte x coordinate."""
        return cls(point=p256.recover_point(compact, curve_name), curve=curve_name)


@dataclass(frozen=True, slots=True)
class Ed25519PrivateKey:
    """Ed25519 secret in libsodium layout (64 bytes)."""

    secret: bytes = field(repr=False)

    @property
    def key_type(self) -> KeyType:
        return KeyType.ED25519


@dataclass(frozen=True, slots=True)
class Ed25519PublicKey:
    """Ed25519 public key (32 bytes)."""

    key: bytes

    @property
    def key_type(self) -> KeyType:
        return KeyType.ED25519


PrivateKey = EccCompactPrivateKey | Ed25519PrivateKey
"""Private key of either family."""

PublicKey = EccCompactPublicKey | Ed25519PublicKey
"""Public key of either family."""


@dataclass(frozen=True, slots=True)
class KeyBundle:
    """
    A private key, its public key, and the network they are tagged for.

    Attributes:
        secret: Private key.
        public: Matching public key.
        network: Network the keys belong to.
    """

    secret: PrivateKey
    public: PublicKey
    network: Network = Network.MAINNET

    def __post_init__(self) -> None:
        if self.secret.key_type != self.public.key_type:
            raise ValueError(
                f"Key type mismatch: secret is {self.secret.key_type.name}, "
                f"public is {self.public.key_type.name}"
            )

    @property
    def key_type(self) -> KeyType:
        return self.secret.key_type


def generate_keys(key_type: KeyType, network: Network = Network.MAINNET) -> KeyBundle:
    """
    Generate a fresh key bundle.

    ecc_compact keys always have a compact public point, so their public
    key can be encoded with `pubkey_to_bin`.

    Args:
        key_type: Key family to generate.
        network: Network to tag the keys with.

    Returns:
        A new key bundle.
    """
    match key_type:
        case KeyType.ECC_COMPACT:
            scalar, point = p256.generate_compact_key()
            secret = EccCompactPrivateKey(scalar=scalar, public_point=point)
            return KeyBundle(secret=secret, public=secret.public_key(), network=network)
        case KeyType.ED25519:
            secret_bytes, public_bytes = ed25519.generate_keypair()
            return KeyBundle(
                secret=Ed25519PrivateKey(secret=secret_bytes),
                public=Ed25519PublicKey(key=public_bytes),
                network=network,
            )
    raise ValueError(f"Unsupported key type: {key_type!r}")
