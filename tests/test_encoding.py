"""
Test cases for the Encoding schemes and the base32 codec
"""

import pytest

from pyecdsa_pubkey import Encoding, Error, ErrorKind
from pyecdsa_pubkey import base32


# RFC 4648 section 10 test vectors for base32hex, without padding
BASE32HEX_VECTORS = [
    (b"", b""),
    (b"f", b"CO"),
    (b"fo", b"CPNG"),
    (b"foo", b"CPNMU"),
    (b"foob", b"CPNMUOG"),
    (b"fooba", b"CPNMUOJ1"),
    (b"foobar", b"CPNMUOJ1E8"),
]


@pytest.mark.parametrize("raw,encoded", BASE32HEX_VECTORS)
def test_base32_vectors(raw, encoded):
    assert base32.encode(raw) == encoded
    assert base32.decode(encoded) == raw


def test_base32_invalid_length():
    with pytest.raises(Error) as excinfo:
        base32.decode(b"C")
    assert excinfo.value.kind is ErrorKind.ENCODING_INVALID


def test_base32_invalid_character():
    with pytest.raises(Error):
        base32.decode(b"CW")
    with pytest.raises(Error):
        base32.decode(b"co")


def test_base32_nonzero_padding():
    # "CO" decodes to "f" with zero trailing bits; "CP" leaves a set bit behind
    with pytest.raises(Error) as excinfo:
        base32.decode(b"CP")
    assert "padding" in excinfo.value.message


def test_decode_reports_length():
    out = bytearray(8)
    assert Encoding.HEX.decode(b"0102ff", out) == 3
    assert out == bytearray(b"\x01\x02\xff" + bytes(5))


def test_decode_accepts_str():
    out = bytearray(4)
    assert Encoding.BASE64.decode("AQID", out) == 3
    assert bytes(out[:3]) == b"\x01\x02\x03"


def test_decode_overflow():
    with pytest.raises(Error) as excinfo:
        Encoding.RAW.decode(b"12345", bytearray(4))
    assert excinfo.value.kind is ErrorKind.ENCODING_INVALID


def test_hex_upper_decodes_either_case():
    out = bytearray(2)
    assert Encoding.HEX_UPPER.decode(b"abCD", out) == 2
    assert out == bytearray(b"\xab\xcd")


def test_base64_rejects_garbage():
    with pytest.raises(Error) as excinfo:
        Encoding.BASE64.decode(b"AQ$D", bytearray(4))
    assert excinfo.value.kind is ErrorKind.ENCODING_INVALID


def test_non_ascii_str_rejected():
    with pytest.raises(Error):
        Encoding.HEX.decode("abé", bytearray(4))


@pytest.mark.parametrize("encoding", list(Encoding), ids=lambda e: e.value)
def test_encode_then_decode(encoding):
    data = bytes(range(49))
    encoded = encoding.encode(data)
    out = bytearray(64)
    n = encoding.decode(encoded, out)
    assert bytes(out[:n]) == data


def test_base32_accepts_str():
    assert base32.decode("CPNMUOJ1E8") == b"foobar"
    with pytest.raises(Error) as excinfo:
        base32.decode("CPNMUOJ1Eé")
    assert excinfo.value.kind is ErrorKind.ENCODING_INVALID
