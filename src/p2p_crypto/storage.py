"""
Key bundle files.

A key file holds the raw output of `keys_to_bin`: no header, no framing.
I/O errors are not caught here; they reach the caller unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .codec import keys_from_bin, keys_to_bin
from .keys import KeyBundle

__all__ = [
    "save_keys",
    "load_keys",
]

logger = logging.getLogger(__name__)


def save_keys(bundle: KeyBundle, path: str | Path) -> None:
    """Write a key bundle to `path`, replacing any existing file."""
    path = Path(path)
    path.write_bytes(keys_to_bin(bundle))
    logger.info("Saved %s keys to %s", bundle.key_type.name.lower(), path)


def load_keys(path: str | Path) -> KeyBundle:
    """
    Read a key bundle from `path`.

    Raises:
        OSError: If the file cannot be read.
        MalformedBinaryError: If the contents are not a key bundle.
    """
    path = Path(path)
    bundle = keys_from_bin(path.read_bytes())
    logger.info("Loaded %s keys from %s", bundle.key_type.name.lower(), path)
    return bundle
