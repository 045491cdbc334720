"""
ECDSA public keys: compressed or uncompressed Weierstrass elliptic curve points

Keys are parsed from the `Elliptic-Curve-Point-to-Octet-String` encoding
described in SEC 1: Elliptic Curve Cryptography (Version 2.0) section 2.3.3
(page 10).

<http://www.secg.org/sec1-v2.pdf>
"""

import logging
from abc import ABC, abstractmethod
from typing import Union

from .crypto.ec import WeierstrassCurve
from .crypto.point import (
    UNCOMPRESSED_TAG,
    CompressedCurvePoint,
    UncompressedCurvePoint,
)
from .encoding import Encoding
from .error import Error, ErrorKind
from .util import fmt_colon_delimited_hex


logger = logging.getLogger(__name__)

CurvePointVariant = Union[CompressedCurvePoint, UncompressedCurvePoint]


class PublicKey(ABC):
    """Marker for public keys usable by signature verification code"""

    __slots__ = ()

    @abstractmethod
    def as_bytes(self) -> bytes:
        """Obtain the public key as bytes"""


class EcdsaPublicKey(PublicKey):
    """
    ECDSA public key, holding either a compressed or an uncompressed curve point.

    Instances are immutable and should be created with one of the from_*
    classmethods or decode().
    """

    __slots__ = ("_point",)

    def __init__(self, point: CurvePointVariant):
        if not isinstance(point, (CompressedCurvePoint, UncompressedCurvePoint)):
            raise TypeError(f"expected a curve point, got {type(point).__name__}")
        object.__setattr__(self, "_point", point)

    @classmethod
    def from_bytes(cls, curve: WeierstrassCurve, data: bytes) -> 'EcdsaPublicKey':
        """
        Create an ECDSA public key from a compressed or uncompressed SEC1 point.

        Args:
            curve: Curve the key belongs to
            data: SEC1 encoded point

        Raises:
            Error: KEY_INVALID if the length matches neither point size for the
                curve or the point itself is invalid
        """
        data = bytes(data)
        length = len(data)

        if length == curve.compressed_point_size():
            return cls(CompressedCurvePoint(curve, data))
        elif length == curve.uncompressed_point_size():
            return cls(UncompressedCurvePoint(curve, data))

        logger.debug("Rejected %r public key of length %d", curve, length)
        raise Error(
            ErrorKind.KEY_INVALID,
            f"invalid length for {curve!r} public key: {length}"
        )

    @classmethod
    def from_compressed_point(cls, curve: WeierstrassCurve, data: bytes) -> 'EcdsaPublicKey':
        """Create an ECDSA public key from a compressed SEC1 point"""
        return cls(CompressedCurvePoint(curve, data))

    @classmethod
    def from_untagged_point(cls, curve: WeierstrassCurve, data: bytes) -> 'EcdsaPublicKey':
        """
        Create an ECDSA public key from a raw uncompressed point without the
        0x04 tag, i.e. the X and Y coordinates concatenated.

        The input must be exactly curve.untagged_point_size() bytes and encode
        a point on the curve. Callers are expected to guarantee both, so a
        violation raises ValueError rather than Error.
        """
        data = bytes(data)
        size = curve.untagged_point_size()
        if len(data) != size:
            raise ValueError(f"expected {size}-byte untagged {curve!r} point (got {len(data)})")

        tagged = bytearray(curve.uncompressed_point_size())
        tagged[0] = UNCOMPRESSED_TAG
        tagged[1:] = data

        try:
            point = UncompressedCurvePoint(curve, tagged)
        except Error as exc:
            raise ValueError(f"untagged point rejected: {exc}") from exc
        return cls(point)

    @classmethod
    def decode(cls, curve: WeierstrassCurve, encoded: Union[bytes, str],
               encoding: Encoding) -> 'EcdsaPublicKey':
        """
        Decode an ECDSA public key (compressed or uncompressed SEC1 point)
        serialized with the given Encoding.

        Raises:
            Error: ENCODING_INVALID if the encoding rejects the input,
                KEY_INVALID if the decoded bytes are not a valid key
        """
        buffer = bytearray(curve.uncompressed_point_size())
        decoded_len = encoding.decode(encoded, buffer)
        return cls.from_bytes(curve, buffer[:decoded_len])

    def encode(self, encoding: Encoding) -> bytes:
        """Encode this public key's SEC1 bytes with the given Encoding"""
        return encoding.encode(self.as_bytes())

    @property
    def curve(self) -> WeierstrassCurve:
        return self._point.curve

    @property
    def point(self) -> CurvePointVariant:
        return self._point

    @property
    def is_compressed(self) -> bool:
        return isinstance(self._point, CompressedCurvePoint)

    def as_bytes(self) -> bytes:
        """Obtain the public key as the SEC1 bytes of the stored point"""
        return self._point.as_bytes()

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __len__(self) -> int:
        return len(self._point)

    def __setattr__(self, name, value):
        raise AttributeError("EcdsaPublicKey is immutable")

    def __reduce__(self):
        return (type(self), (self._point,))

    def __copy__(self) -> 'EcdsaPublicKey':
        return self

    def __deepcopy__(self, memo) -> 'EcdsaPublicKey':
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, EcdsaPublicKey):
            return NotImplemented
        return self._point == other._point

    def __hash__(self) -> int:
        return hash(self._point)

    def __repr__(self) -> str:
        return f"EcdsaPublicKey<{self.curve!r}>({fmt_colon_delimited_hex(self.as_bytes())})"
