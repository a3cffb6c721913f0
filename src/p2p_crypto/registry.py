"""
Network selection context.

A registry holds the "current" network for a group of callers. It is an
ordinary object: construct one per application (or per test) and pass it
where it is needed. Independent registries never observe each other.

Reads and writes are plain attribute loads and stores. A caller that needs
the same network across several steps must read it once and reuse the value.
"""

from __future__ import annotations

import logging

from .config import KeyConfig
from .types import Network

__all__ = [
    "NetworkRegistry",
]

logger = logging.getLogger(__name__)


class NetworkRegistry:
    """Mutable holder for the current network."""

    __slots__ = ("_network",)

    def __init__(self, network: Network | None = None) -> None:
        self._network = network

    @classmethod
    def from_config(cls, config: KeyConfig) -> NetworkRegistry:
        """Create a registry preset to the configured default network."""
        return cls(config.default_network)

    def get(self, default: Network) -> Network:
        """
        Return the current network.

        Args:
            default: Value returned when no network has been set.

        Returns:
            The stored network, or `default` if unset.
        """
        network = self._network
        return default if network is None else network

    def set(self, network: Network) -> None:
        """Replace the current network. Last write wins."""
        logger.debug("Network set to %s", network.name)
        self._network = network

    def __repr__(self) -> str:
        return f"NetworkRegistry({self._network!r})"
