"""
Compact NIST P-256 points.

A P-256 public point normally needs both coordinates (65 bytes
uncompressed). For every x on the curve there are two points, (x, y) and
(x, p - y). If we only ever use the point with the smaller y, the x
coordinate alone identifies it and a public key fits in 32 bytes.

Such points are called compact:

    compact(x, y)  <=>  y == min(y, p - y)

Recovery from x decodes the compressed form with either parity and then
picks the smaller y. Key generation only hands out keys with compact
points: if a fresh scalar d yields a non-compact point, its negation
n - d yields (x, p - y), which is compact.

References:
    - https://datatracker.ietf.org/doc/html/draft-jivsov-ecc-compact-05
"""

from __future__ import annotations

from typing import Final

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

__all__ = [
    "DEFAULT_CURVE",
    "COMPACT_POINT_LENGTH",
    "UNCOMPRESSED_POINT_LENGTH",
    "curve_for_name",
    "compact_x",
    "is_compact",
    "recover_point",
    "generate_compact_key",
    "load_private_key",
    "load_public_key",
]

DEFAULT_CURVE: Final = "secp256r1"
"""Named curve used by ecc_compact keys."""

P256_PRIME: Final = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF
"""Field prime p of P-256."""

P256_ORDER: Final = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551
"""Group order n of P-256."""

COMPACT_POINT_LENGTH: Final = 32
"""Size of a compact point (the big-endian x coordinate)."""

UNCOMPRESSED_POINT_LENGTH: Final = 65
"""Size of an SEC1 uncompressed point: 0x04 || x || y."""

_MIN_SCALAR_LENGTH: Final = 31
"""Shortest scalar the binary key layout can hold."""

_CURVES: Final[dict[str, type[ec.EllipticCurve]]] = {
    "secp256r1": ec.SECP256R1,
}


def curve_for_name(name: str) -> ec.EllipticCurve:
    """
    Look up a supported named curve.

    Raises:
        ValueError: If the curve is not supported.
    """
    try:
        return _CURVES[name]()
    except KeyError:
        raise ValueError(f"Unsupported curve: {name!r}") from None


def _coordinates(point: bytes) -> tuple[int, int]:
    if len(point) != UNCOMPRESSED_POINT_LENGTH or point[0] != 0x04:
        raise ValueError(f"Expected {UNCOMPRESSED_POINT_LENGTH}-byte uncompressed point")
    return int.from_bytes(point[1:33], "big"), int.from_bytes(point[33:], "big")


def is_compact(point: bytes) -> bool:
    """Return True if the uncompressed point can be rebuilt from its x coordinate."""
    _, y = _coordinates(point)
    return y == min(y, P256_PRIME - y)


def compact_x(point: bytes) -> bytes | None:
    """
    Return the 32-byte compact form of a point.

    Args:
        point: SEC1 uncompressed point.

    Returns:
        The x coordinate if the point is compact, otherwise None.
    """
    if not is_compact(point):
        return None
    return point[1:33]


def recover_point(compact: bytes, curve: str = DEFAULT_CURVE) -> bytes:
    """
    Rebuild the full point from a compact x coordinate.

    Args:
        compact: 32-byte big-endian x coordinate.
        curve: Named curve of the point.

    Returns:
        65-byte SEC1 uncompressed point with the smaller y.

    Raises:
        ValueError: If x is not the coordinate of a point on the curve.
    """
    if len(compact) != COMPACT_POINT_LENGTH:
        raise ValueError(f"Expected {COMPACT_POINT_LENGTH} bytes, got {len(compact)}")

    # Let the library solve y^2 = x^3 - 3x + b; it rejects x off the curve.
    candidate = ec.EllipticCurvePublicKey.from_encoded_point(
        curve_for_name(curve),
        b"\x02" + compact,
    )
    numbers = candidate.public_numbers()
    y = min(numbers.y, P256_PRIME - numbers.y)

    return b"\x04" + compact + y.to_bytes(COMPACT_POINT_LENGTH, "big")


def _point_bytes(public_key: ec.EllipticCurvePublicKey) -> bytes:
    return public_key.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint,
    )


def generate_compact_key(curve: str = DEFAULT_CURVE) -> tuple[bytes, bytes]:
    """
    Generate a private scalar whose public point is compact.

    The scalar is returned in minimal big-endian form. Scalars below 2^248
    come back as 31 bytes; anything shorter than that cannot be stored in
    the binary layout, so such a draw is discarded.

    Returns:
        (scalar, uncompressed_point) tuple.
    """
    named_curve = curve_for_name(curve)

    while True:
        private_key = ec.generate_private_key(named_curve)
        point = _point_bytes(private_key.public_key())

        if not is_compact(point):
            negated = P256_ORDER - private_key.private_numbers().private_value
            private_key = ec.derive_private_key(negated, named_curve)
            point = _point_bytes(private_key.public_key())

        value = private_key.private_numbers().private_value
        length = (value.bit_length() + 7) // 8
        if length >= _MIN_SCALAR_LENGTH:
            return value.to_bytes(length, "big"), point


def load_private_key(scalar: bytes, curve: str = DEFAULT_CURVE) -> ec.EllipticCurvePrivateKey:
    """Build a library private key from a raw big-endian scalar."""
    return ec.derive_private_key(int.from_bytes(scalar, "big"), curve_for_name(curve))


def load_public_key(point: bytes, curve: str = DEFAULT_CURVE) -> ec.EllipticCurvePublicKey:
    """Build a library public key from an SEC1 encoded point."""
    return ec.EllipticCurvePublicKey.from_encoded_point(curve_for_name(curve), point)
