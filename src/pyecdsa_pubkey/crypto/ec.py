"""
Short Weierstrass curve parameters and affine point checks over SECP curves

This module provides the curve descriptor shared by every supported curve and
the field arithmetic needed to validate SEC1 encoded points.
"""

from typing import Optional


class WeierstrassCurve:
    """Base class for curve parameters of y^2 = x^3 + ax + b over GF(p)"""

    # Name used in diagnostics, e.g. "NistP256"
    CURVE_KIND: str

    # Curve field prime (p)
    P: int

    # Scalar field prime (n)
    N: int

    # Curve parameters for y^2 = x^3 + ax + b
    A: int
    B: int

    # Generator point coordinates
    G_X: int
    G_Y: int

    # Coordinate byte length
    COORD_BYTES: int

    @classmethod
    def compressed_point_size(cls) -> int:
        """Size of a compressed SEC1 point: tag byte + X"""
        return 1 + cls.COORD_BYTES

    @classmethod
    def uncompressed_point_size(cls) -> int:
        """Size of an uncompressed SEC1 point: tag byte + X + Y"""
        return 1 + 2 * cls.COORD_BYTES

    @classmethod
    def untagged_point_size(cls) -> int:
        """Size of an uncompressed SEC1 point with the 0x04 tag removed"""
        return cls.uncompressed_point_size() - 1

    def __eq__(self, other) -> bool:
        if isinstance(other, WeierstrassCurve):
            return self.CURVE_KIND == other.CURVE_KIND
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.CURVE_KIND)

    def __repr__(self) -> str:
        return self.CURVE_KIND


def _curve_rhs(x: int, curve: WeierstrassCurve) -> int:
    """Compute x^3 + ax + b (mod p)"""
    p = curve.P
    return (x * x * x + curve.A * x + curve.B) % p


def is_on_curve(x: int, y: int, curve: WeierstrassCurve) -> bool:
    """Check that the affine point (x, y) satisfies the curve equation"""
    if not (0 <= x < curve.P and 0 <= y < curve.P):
        return False
    return (y * y) % curve.P == _curve_rhs(x, curve)


def y_from_x(x: int, odd: bool, curve: WeierstrassCurve) -> Optional[int]:
    """
    Recover the y coordinate for x with the requested parity.

    Returns None if x is out of range or x^3 + ax + b is not a square mod p.
    Only valid for p = 3 (mod 4), which holds for every curve shipped here.
    """
    p = curve.P
    if not 0 <= x < p:
        return None

    rhs = _curve_rhs(x, curve)
    y = pow(rhs, (p + 1) // 4, p)
    if (y * y) % p != rhs:
        return None

    if (y & 1) != int(odd):
        y = (p - y) % p
        # y == 0 has no odd counterpart
        if (y & 1) != int(odd):
            return None
    return y
