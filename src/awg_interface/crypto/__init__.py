"""Key facility for interface key pairs."""

from .exceptions import KeyErrorType, KeyFormat, KeyFormatError
from .key import Key, KeyPair

__all__ = [
    "Key",
    "KeyPair",
    "KeyFormat",
    "KeyErrorType",
    "KeyFormatError",
]
