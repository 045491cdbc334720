"""
Base32 encoding and decoding using RFC4648 "extended hex" format, unpadded
"""

from typing import Union

from .error import Error, ErrorKind


# RFC4648 "extended hex" encoding table
RFC4648_ALPHABET = b"0123456789ABCDEFGHIJKLMNOPQRSTUV"

# RFC4648 "extended hex" decoding table, indexed by ASCII value
RFC4648_INV_ALPHABET = {c: i for i, c in enumerate(RFC4648_ALPHABET)}


def encode(data: bytes) -> bytes:
    """
    Encode bytes into base32 using RFC4648 extended hex format

    Args:
        data: Bytes to encode

    Returns:
        Base32 encoded ASCII bytes, without padding
    """
    result = bytearray()
    acc = 0
    bits = 0

    for byte in data:
        acc = (acc << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            result.append(RFC4648_ALPHABET[(acc >> bits) & 0x1F])
        acc &= (1 << bits) - 1

    if bits:
        result.append(RFC4648_ALPHABET[(acc << (5 - bits)) & 0x1F])

    return bytes(result)


def decode(data: Union[bytes, str]) -> bytes:
    """
    Decode unpadded base32 in RFC4648 extended hex format

    Args:
        data: Base32 encoded ASCII bytes or string

    Returns:
        Decoded bytes

    Raises:
        Error: If the input length, characters or trailing bits are invalid
    """
    if isinstance(data, str):
        try:
            data = data.encode('ascii')
        except UnicodeEncodeError as exc:
            raise Error(ErrorKind.ENCODING_INVALID, "non-ASCII base32 input") from exc

    # If the string has more characters than are required to encode the number of bytes
    # decodable, treat the string as invalid.
    if len(data) % 8 in (1, 3, 6):
        raise Error(ErrorKind.ENCODING_INVALID, "invalid base32 length")

    result = bytearray()
    acc = 0
    bits = 0

    for c in data:
        value = RFC4648_INV_ALPHABET.get(c)
        if value is None:
            raise Error(ErrorKind.ENCODING_INVALID, f"invalid base32 character: {chr(c)!r}")

        acc = ((acc << 5) | value) & 0xFFF
        bits += 5
        if bits >= 8:
            bits -= 8
            result.append((acc >> bits) & 0xFF)

    # Leftover bits only pad out the final character and must be zero
    if acc & ((1 << bits) - 1):
        raise Error(ErrorKind.ENCODING_INVALID, "invalid padding in base32 string")

    return bytes(result)
