"""
Test cases for the curve descriptors and SEC1 curve points
"""

import copy
import pickle

import pytest

from pyecdsa_pubkey import Error, ErrorKind
from pyecdsa_pubkey.crypto import (
    CompressedCurvePoint,
    CurvePoint,
    UncompressedCurvePoint,
    NIST_P256,
    NIST_P384,
    SECP256K1,
    P256Curve,
    is_on_curve,
    y_from_x,
)


CURVES = [NIST_P256, NIST_P384, SECP256K1]


def test_point_sizes():
    """Sizes follow from the coordinate length of each curve"""
    assert (NIST_P256.compressed_point_size(),
            NIST_P256.uncompressed_point_size(),
            NIST_P256.untagged_point_size()) == (33, 65, 64)
    assert (NIST_P384.compressed_point_size(),
            NIST_P384.uncompressed_point_size(),
            NIST_P384.untagged_point_size()) == (49, 97, 96)
    assert SECP256K1.compressed_point_size() == 33


def test_curve_identity():
    assert repr(NIST_P256) == "NistP256"
    assert repr(NIST_P384) == "NistP384"
    assert repr(SECP256K1) == "Secp256k1"
    assert NIST_P256 == P256Curve()
    assert NIST_P256 != NIST_P384


@pytest.mark.parametrize("curve", CURVES, ids=repr)
def test_generator_on_curve(curve):
    assert is_on_curve(curve.G_X, curve.G_Y, curve)
    assert not is_on_curve(curve.G_X, curve.G_Y + 1, curve)
    assert not is_on_curve(curve.G_X, curve.G_Y + curve.P, curve)


@pytest.mark.parametrize("curve", CURVES, ids=repr)
def test_y_from_x(curve):
    """Both parities of y are recovered from the generator's x"""
    odd = bool(curve.G_Y & 1)
    assert y_from_x(curve.G_X, odd, curve) == curve.G_Y
    assert y_from_x(curve.G_X, not odd, curve) == curve.P - curve.G_Y
    assert y_from_x(curve.P, False, curve) is None


@pytest.mark.parametrize("curve", CURVES, ids=repr)
def test_compress_decompress(curve):
    point = UncompressedCurvePoint.from_affine(curve, curve.G_X, curve.G_Y)
    compressed = point.compress()

    assert len(compressed) == curve.compressed_point_size()
    assert compressed.as_bytes()[0] == (0x03 if curve.G_Y & 1 else 0x02)
    assert compressed.to_affine() == (curve.G_X, curve.G_Y)
    assert compressed.decompress() == point


def test_uncompressed_from_affine_layout():
    point = UncompressedCurvePoint.from_affine(NIST_P256, NIST_P256.G_X, NIST_P256.G_Y)
    data = point.as_bytes()

    assert data[0] == 0x04
    assert int.from_bytes(data[1:33], 'big') == NIST_P256.G_X
    assert int.from_bytes(data[33:], 'big') == NIST_P256.G_Y
    assert point.to_affine() == (NIST_P256.G_X, NIST_P256.G_Y)


def test_from_affine_out_of_range():
    with pytest.raises(Error) as excinfo:
        UncompressedCurvePoint.from_affine(NIST_P256, NIST_P256.P, 0)
    assert excinfo.value.kind is ErrorKind.KEY_INVALID


def test_point_wrong_length():
    with pytest.raises(Error) as excinfo:
        UncompressedCurvePoint(NIST_P384, b'\x04' + bytes(64))
    assert excinfo.value.message == "expected 97-byte uncompressed point for NistP384 (got 65)"


def test_uncompressed_bad_tag():
    with pytest.raises(Error) as excinfo:
        UncompressedCurvePoint(NIST_P256, b'\x05' + bytes(64))
    assert excinfo.value.message == "expected first byte to be 0x04 (got 0x05)"


def test_compressed_and_uncompressed_never_equal():
    point = UncompressedCurvePoint.from_affine(SECP256K1, SECP256K1.G_X, SECP256K1.G_Y)
    assert point != point.compress()
    assert point.compress() == CompressedCurvePoint(SECP256K1, point.compress().as_bytes())


def test_error_repr():
    err = Error(ErrorKind.ENCODING_INVALID, "bad input")
    assert str(err) == "invalid encoding: bad input"
    assert repr(err) == "Error(ENCODING_INVALID, 'bad input')"


def test_curve_point_is_abstract():
    with pytest.raises(TypeError):
        CurvePoint(NIST_P256, b'\x04' + bytes(64))


def test_point_pickle_and_deepcopy():
    point = UncompressedCurvePoint.from_affine(NIST_P384, NIST_P384.G_X, NIST_P384.G_Y)
    clone = pickle.loads(pickle.dumps(point))
    assert clone == point
    assert copy.deepcopy(point.compress()) == point.compress()
