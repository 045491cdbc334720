"""
Python ECDSA Public Key Library

Parsing, validation and serialization of ECDSA public keys as Weierstrass
elliptic curve points in the SEC1 `Elliptic-Curve-Point-to-Octet-String`
encoding, compressed or uncompressed.

Supported curves are secp256r1 (NIST P-256), secp384r1 (NIST P-384) and
secp256k1. Keys can also be read and written through a generic Encoding
(hex, base32 or base64).
"""

from .public_key import (
    PublicKey,
    EcdsaPublicKey,
)

from .crypto import (
    WeierstrassCurve,
    CurvePoint,
    CompressedCurvePoint,
    UncompressedCurvePoint,
    P256Curve,
    P384Curve,
    Secp256k1Curve,
    NIST_P256,
    NIST_P384,
    SECP256K1,
)

from .encoding import Encoding

from .error import (
    Error,
    ErrorKind,
)

__version__ = "0.1.0"

__all__ = [
    # Public keys
    "PublicKey",
    "EcdsaPublicKey",

    # Curves and points
    "WeierstrassCurve",
    "CurvePoint",
    "CompressedCurvePoint",
    "UncompressedCurvePoint",
    "P256Curve",
    "P384Curve",
    "Secp256k1Curve",
    "NIST_P256",
    "NIST_P384",
    "SECP256K1",

    # Encodings
    "Encoding",

    # Errors
    "Error",
    "ErrorKind",
]
