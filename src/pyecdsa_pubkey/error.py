"""
Error type shared by the public key, curve point and encoding modules
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of errors reported by this library"""

    KEY_INVALID = "invalid key"
    ENCODING_INVALID = "invalid encoding"

    @property
    def description(self) -> str:
        return self.value


class Error(Exception):
    """Error with a kind and a message describing the failure"""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(f"{kind.description}: {message}")
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"Error({self.kind.name}, {self.message!r})"
