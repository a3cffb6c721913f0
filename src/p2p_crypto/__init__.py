"""
Peer identity keys.

Manages ecc_compact (NIST P-256) and Ed25519 keys tagged with a network,
their binary storage format, base58check addresses and "/p2p/" multiaddrs,
and signing, verification and key agreement over both key families.
"""

from .address import (
    b58_to_bin,
    b58_to_pubkey,
    b58_to_version_bin,
    bin_to_b58,
    p2p_to_pubkey_bin,
    pubkey_bin_to_p2p,
    pubkey_to_b58,
)
from .codec import keys_from_bin, keys_to_bin
from .config import KeyConfig
from .context import KeyContext
from .exceptions import (
    BadChecksumError,
    BadNetworkError,
    KeyCodecError,
    KeyTypeMismatchError,
    MalformedAddressError,
    MalformedBinaryError,
    NotCompactError,
)
from .keys import (
    EccCompactPrivateKey,
    EccCompactPublicKey,
    Ed25519PrivateKey,
    Ed25519PublicKey,
    KeyBundle,
    PrivateKey,
    PublicKey,
    generate_keys,
)
from .operations import KeyAgreement, Signer, make_key_agreement, make_signer, verify
from .pubkey import bin_to_pubkey, pubkey_to_bin
from .registry import NetworkRegistry
from .storage import load_keys, save_keys
from .types import KeyType, Network

__all__ = [
    # Identifiers
    "KeyType",
    "Network",
    # Keys
    "EccCompactPrivateKey",
    "EccCompactPublicKey",
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
    "KeyBundle",
    "PrivateKey",
    "PublicKey",
    "generate_keys",
    # Codecs
    "keys_to_bin",
    "keys_from_bin",
    "pubkey_to_bin",
    "bin_to_pubkey",
    "bin_to_b58",
    "b58_to_bin",
    "b58_to_version_bin",
    "pubkey_to_b58",
    "b58_to_pubkey",
    "pubkey_bin_to_p2p",
    "p2p_to_pubkey_bin",
    # Operations
    "KeyAgreement",
    "Signer",
    "make_key_agreement",
    "make_signer",
    "verify",
    # Storage
    "load_keys",
    "save_keys",
    # Configuration
    "KeyConfig",
    "KeyContext",
    "NetworkRegistry",
    # Errors
    "KeyCodecError",
    "BadChecksumError",
    "BadNetworkError",
    "KeyTypeMismatchError",
    "MalformedAddressError",
    "MalformedBinaryError",
    "NotCompactError",
]
