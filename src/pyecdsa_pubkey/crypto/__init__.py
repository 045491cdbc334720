"""
Curve descriptors and SEC1 curve points

This module provides the curve parameters and point constructors used to
validate ECDSA public keys over the secp256r1, secp384r1 and secp256k1 curves.
"""

from .ec import WeierstrassCurve, is_on_curve, y_from_x
from .point import CurvePoint, CompressedCurvePoint, UncompressedCurvePoint
from .secp256r1 import P256Curve, NIST_P256
from .secp384r1 import P384Curve, NIST_P384
from .secp256k1 import Secp256k1Curve, SECP256K1

__all__ = [
    'WeierstrassCurve',
    'is_on_curve',
    'y_from_x',
    'CurvePoint',
    'CompressedCurvePoint',
    'UncompressedCurvePoint',
    'P256Curve',
    'NIST_P256',
    'P384Curve',
    'NIST_P384',
    'Secp256k1Curve',
    'SECP256K1',
]
