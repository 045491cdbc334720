"""
Text and binary encodings for serializing keys

Each Encoding decodes into a caller supplied buffer and reports the number of
bytes written, so fixed-size values can be decoded without intermediate
allocation by the caller.
"""

import base64
import binascii
from enum import Enum
from typing import Union

from . import base32
from .error import Error, ErrorKind


class Encoding(Enum):
    """Supported encodings"""

    RAW = "raw"
    HEX = "hex"
    HEX_UPPER = "hex-upper"
    BASE32 = "base32"
    BASE64 = "base64"

    def encode(self, data: bytes) -> bytes:
        """Encode data, returning a newly allocated byte string"""
        data = bytes(data)
        if self is Encoding.RAW:
            return data
        if self is Encoding.HEX:
            return binascii.hexlify(data)
        if self is Encoding.HEX_UPPER:
            return binascii.hexlify(data).upper()
        if self is Encoding.BASE32:
            return base32.encode(data)
        return base64.b64encode(data)

    def decode(self, encoded: Union[bytes, str], out: bytearray) -> int:
        """
        Decode encoded data into out.

        Args:
            encoded: Encoded input
            out: Buffer receiving the decoded bytes

        Returns:
            The number of bytes written to out

        Raises:
            Error: If the input is malformed or decodes to more than len(out) bytes
        """
        if isinstance(encoded, str):
            try:
                encoded = encoded.encode('ascii')
            except UnicodeEncodeError as exc:
                raise Error(ErrorKind.ENCODING_INVALID, f"non-ASCII {self.value} input") from exc

        decoded = self._decode(bytes(encoded))
        if len(decoded) > len(out):
            raise Error(
                ErrorKind.ENCODING_INVALID,
                f"decoded {self.value} data too long: {len(decoded)} bytes (max {len(out)})"
            )

        out[:len(decoded)] = decoded
        return len(decoded)

    def _decode(self, encoded: bytes) -> bytes:
        if self is Encoding.RAW:
            return encoded
        if self is Encoding.BASE32:
            return base32.decode(encoded)

        try:
            if self is Encoding.BASE64:
                return base64.b64decode(encoded, validate=True)
            # binascii accepts both cases; HEX and HEX_UPPER differ only when encoding
            return binascii.unhexlify(encoded)
        except binascii.Error as exc:
            raise Error(ErrorKind.ENCODING_INVALID, f"invalid {self.value} data: {exc}") from exc
