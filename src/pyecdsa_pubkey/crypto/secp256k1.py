"""
secp256k1 curve descriptor
"""

from .ec import WeierstrassCurve


class Secp256k1Curve(WeierstrassCurve):
    """secp256k1 curve parameters"""

    CURVE_KIND = "Secp256k1"

    P = 0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f
    N = 0xfffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141

    # y^2 = x^3 + 7
    A = 0
    B = 7

    G_X = 0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798
    G_Y = 0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8

    COORD_BYTES = 32


SECP256K1 = Secp256k1Curve()
