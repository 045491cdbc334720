"""
SEC1 encoded Weierstrass curve points

Compressed and uncompressed points as described in SEC 1: Elliptic Curve
Cryptography (Version 2.0) section 2.3.3, validated on construction.

<http://www.secg.org/sec1-v2.pdf>
"""

from abc import ABC, abstractmethod
from typing import Tuple

from ..error import Error, ErrorKind
from . import ec
from .ec import WeierstrassCurve


COMPRESSED_EVEN_TAG = 0x02
COMPRESSED_ODD_TAG = 0x03
UNCOMPRESSED_TAG = 0x04


class CurvePoint(ABC):
    """Immutable SEC1 point buffer bound to a curve"""

    __slots__ = ("_curve", "_bytes")

    TAGS: Tuple[int, ...] = ()
    FORMAT = "curve"

    def __init__(self, curve: WeierstrassCurve, data: bytes):
        data = bytes(data)
        expected = self.point_size(curve)
        if len(data) != expected:
            raise Error(
                ErrorKind.KEY_INVALID,
                f"expected {expected}-byte {self.FORMAT} point for {curve!r} (got {len(data)})"
            )

        if data[0] not in self.TAGS:
            tags = " or ".join(f"0x{tag:02x}" for tag in self.TAGS)
            raise Error(
                ErrorKind.KEY_INVALID,
                f"expected first byte to be {tags} (got 0x{data[0]:02x})"
            )

        self._check_on_curve(curve, data)
        object.__setattr__(self, "_curve", curve)
        object.__setattr__(self, "_bytes", data)

    @classmethod
    @abstractmethod
    def point_size(cls, curve: WeierstrassCurve) -> int:
        """Size in bytes of this point format on the given curve"""

    @abstractmethod
    def _check_on_curve(self, curve: WeierstrassCurve, data: bytes) -> None:
        """Raise Error if data does not encode a point on the curve"""

    @abstractmethod
    def to_affine(self) -> Tuple[int, int]:
        """Return the affine (x, y) coordinates"""

    @property
    def curve(self) -> WeierstrassCurve:
        return self._curve

    def as_bytes(self) -> bytes:
        """Return the SEC1 encoded point"""
        return self._bytes

    def __bytes__(self) -> bytes:
        return self._bytes

    def __len__(self) -> int:
        return len(self._bytes)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._curve, self._bytes))

    def __copy__(self) -> 'CurvePoint':
        return self

    def __deepcopy__(self, memo) -> 'CurvePoint':
        return self

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._curve == other._curve and self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._curve, self._bytes))

    def __repr__(self) -> str:
        return f"{type(self).__name__}<{self._curve!r}>({self._bytes.hex()})"


class CompressedCurvePoint(CurvePoint):
    """Compressed point: 0x02/0x03 parity tag followed by X"""

    __slots__ = ()

    TAGS = (COMPRESSED_EVEN_TAG, COMPRESSED_ODD_TAG)
    FORMAT = "compressed"

    @classmethod
    def point_size(cls, curve: WeierstrassCurve) -> int:
        return curve.compressed_point_size()

    def _check_on_curve(self, curve: WeierstrassCurve, data: bytes) -> None:
        x = int.from_bytes(data[1:], byteorder='big')
        if ec.y_from_x(x, data[0] == COMPRESSED_ODD_TAG, curve) is None:
            raise Error(ErrorKind.KEY_INVALID, f"point is not on the {curve!r} curve")

    def to_affine(self) -> Tuple[int, int]:
        x = int.from_bytes(self._bytes[1:], byteorder='big')
        y = ec.y_from_x(x, self._bytes[0] == COMPRESSED_ODD_TAG, self._curve)
        return x, y

    def decompress(self) -> 'UncompressedCurvePoint':
        """Recover Y and return the uncompressed form of this point"""
        x, y = self.to_affine()
        return UncompressedCurvePoint.from_affine(self._curve, x, y)


class UncompressedCurvePoint(CurvePoint):
    """Uncompressed point: 0x04 tag followed by X and Y"""

    __slots__ = ()

    TAGS = (UNCOMPRESSED_TAG,)
    FORMAT = "uncompressed"

    @classmethod
    def point_size(cls, curve: WeierstrassCurve) -> int:
        return curve.uncompressed_point_size()

    @classmethod
    def from_affine(cls, curve: WeierstrassCurve, x: int, y: int) -> 'UncompressedCurvePoint':
        """Create a point from affine coordinates, validating it's on the curve"""
        size = curve.COORD_BYTES
        if not (0 <= x < curve.P and 0 <= y < curve.P):
            raise Error(ErrorKind.KEY_INVALID, "point coordinates out of field range")
        data = bytes([UNCOMPRESSED_TAG]) + x.to_bytes(size, 'big') + y.to_bytes(size, 'big')
        return cls(curve, data)

    def _check_on_curve(self, curve: WeierstrassCurve, data: bytes) -> None:
        size = curve.COORD_BYTES
        x = int.from_bytes(data[1:1 + size], byteorder='big')
        y = int.from_bytes(data[1 + size:], byteorder='big')
        if not ec.is_on_curve(x, y, curve):
            raise Error(ErrorKind.KEY_INVALID, f"point is not on the {curve!r} curve")

    def to_affine(self) -> Tuple[int, int]:
        size = self._curve.COORD_BYTES
        x = int.from_bytes(self._bytes[1:1 + size], byteorder='big')
        y = int.from_bytes(self._bytes[1 + size:], byteorder='big')
        return x, y

    def compress(self) -> CompressedCurvePoint:
        """Return the compressed form of this point"""
        x, y = self.to_affine()
        tag = COMPRESSED_ODD_TAG if y & 1 else COMPRESSED_EVEN_TAG
        return CompressedCurvePoint(
            self._curve, bytes([tag]) + x.to_bytes(self._curve.COORD_BYTES, 'big')
        )
