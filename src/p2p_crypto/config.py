"""
Global configuration for key handling.

The default network can be chosen through the environment so that tools
and tests can run against testnet without code changes.
"""

import os
from pathlib import Path

from .base import StrictBaseModel
from .types import KeyType, Network

_SUPPORTED_NETWORKS: list[str] = ["mainnet", "testnet"]

P2P_NETWORK = os.environ.get("P2P_NETWORK", "mainnet").lower()
"""The network flag ('mainnet' or 'testnet'). Defaults to 'mainnet'."""

if P2P_NETWORK not in _SUPPORTED_NETWORKS:
    raise ValueError(
        f"Invalid P2P_NETWORK environment variable: '{P2P_NETWORK}'. "
        f"Supported values: {_SUPPORTED_NETWORKS}"
    )


class KeyConfig(StrictBaseModel):
    """Runtime configuration for key generation and storage."""

    default_network: Network = Network.from_name(P2P_NETWORK)
    """Network used when the caller does not name one."""

    default_key_type: KeyType = KeyType.ED25519
    """Key family used for newly generated keys."""

    key_file: Path | None = None
    """Location of the persisted key bundle, if any."""
