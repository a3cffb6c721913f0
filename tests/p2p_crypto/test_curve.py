"""Tests for compact P-256 points."""

import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from p2p_crypto import curve


class TestCompactPoints:
    """Tests for compactness and point recovery."""

    def test_generated_keys_are_compact(self) -> None:
        """Generation only returns keys with compact points."""
        for _ in range(10):
            scalar, point = curve.generate_compact_key()

            assert len(scalar) in (31, 32)
            assert len(point) == curve.UNCOMPRESSED_POINT_LENGTH
            assert curve.is_compact(point)

    def test_generated_scalar_matches_point(self) -> None:
        """The returned point is the public point of the returned scalar."""
        scalar, point = curve.generate_compact_key()

        public_key = curve.load_private_key(scalar).public_key()
        numbers = public_key.public_numbers()

        assert point[1:33] == numbers.x.to_bytes(32, "big")
        assert point[33:] == numbers.y.to_bytes(32, "big")

    def test_recover_roundtrip(self) -> None:
        """A compact point is rebuilt exactly from its x coordinate."""
        _, point = curve.generate_compact_key()

        compact = curve.compact_x(point)
        assert compact is not None
        assert curve.recover_point(compact) == point

    def test_negated_point_is_not_compact(self) -> None:
        """Of the two points sharing an x coordinate, exactly one is compact."""
        _, point = curve.generate_compact_key()
        y = int.from_bytes(point[33:], "big")
        negated = point[:33] + (curve.P256_PRIME - y).to_bytes(32, "big")

        assert curve.is_compact(point)
        assert not curve.is_compact(negated)
        assert curve.compact_x(negated) is None

    def test_recover_rejects_x_off_curve(self) -> None:
        """An x coordinate outside the field is rejected."""
        with pytest.raises(ValueError):
            curve.recover_point(b"\xff" * 32)

    def test_recover_rejects_wrong_length(self) -> None:
        """Compact points must be 32 bytes."""
        with pytest.raises(ValueError, match="Expected 32 bytes"):
            curve.recover_point(bytes(31))

    def test_unsupported_curve(self) -> None:
        """Only secp256r1 is supported."""
        with pytest.raises(ValueError, match="Unsupported curve"):
            curve.curve_for_name("secp256k1")

    def test_curve_for_name(self) -> None:
        """The default curve maps to the library's P-256."""
        assert isinstance(curve.curve_for_name(curve.DEFAULT_CURVE), ec.SECP256R1)
