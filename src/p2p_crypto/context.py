"""
Network-bound convenience operations.

Most call sites work on one network for their whole lifetime. A
`KeyContext` pairs the codecs with a `NetworkRegistry` so those callers do
not pass the network to every call. Each operation reads the registry once;
changing the network between calls affects only later calls.

The context also carries the `KeyConfig` it was built from, which supplies
the default key family and the location of the persisted key file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .address import b58_to_pubkey, pubkey_to_b58
from .config import KeyConfig
from .keys import KeyBundle, PublicKey, generate_keys
from .pubkey import bin_to_pubkey, pubkey_to_bin
from .registry import NetworkRegistry
from .storage import load_keys, save_keys
from .types import KeyType, Network

__all__ = [
    "KeyContext",
]


@dataclass(slots=True)
class KeyContext:
    """
    Key operations on the registry's current network.

    Unset registries resolve to mainnet.
    """

    registry: NetworkRegistry = field(default_factory=NetworkRegistry)
    """Source of the current network."""

    config: KeyConfig = field(default_factory=KeyConfig)
    """Defaults for generation and storage."""

    @classmethod
    def from_config(cls, config: KeyConfig) -> KeyContext:
        return cls(registry=NetworkRegistry.from_config(config), config=config)

    @property
    def network(self) -> Network:
        """Snapshot of the current network."""
        return self.registry.get(Network.MAINNET)

    def generate_keys(self, key_type: KeyType | None = None) -> KeyBundle:
        """Generate keys on the current network, defaulting to the configured family."""
        if key_type is None:
            key_type = self.config.default_key_type
        return generate_keys(key_type, self.network)

    def pubkey_to_bin(self, public_key: PublicKey) -> bytes:
        return pubkey_to_bin(self.network, public_key)

    def bin_to_pubkey(self, data: bytes) -> PublicKey:
        return bin_to_pubkey(self.network, data)

    def pubkey_to_b58(self, public_key: PublicKey) -> str:
        return pubkey_to_b58(self.network, public_key)

    def b58_to_pubkey(self, text: str) -> PublicKey:
        return b58_to_pubkey(self.network, text)

    def _key_file(self) -> Path:
        if self.config.key_file is None:
            raise ValueError("No key file configured")
        return self.config.key_file

    def save_keys(self, bundle: KeyBundle) -> None:
        """
        Write a bundle to the configured key file.

        Raises:
            ValueError: If the configuration names no key file.
        """
        save_keys(bundle, self._key_file())

    def load_keys(self) -> KeyBundle:
        """
        Read the bundle stored in the configured key file.

        Raises:
            ValueError: If the configuration names no key file.
            OSError: If the file cannot be read.
            MalformedBinaryError: If the contents are not a key bundle.
        """
        return load_keys(self._key_file())
