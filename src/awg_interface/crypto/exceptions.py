"""Exceptions raised by the key facility."""

from enum import Enum

from ..common.exceptions import AwgInterfaceError


class KeyFormat(str, Enum):
    """Encoding a key was being decoded from."""

    BASE64 = "base64"
    BINARY = "binary"
    HEX = "hex"


class KeyErrorType(str, Enum):
    """Why a key failed to decode."""

    CONTENTS = "contents"
    LENGTH = "length"


class KeyFormatError(AwgInterfaceError):
    """Raised when a key cannot be decoded from its text or binary form."""

    def __init__(self, key_format: KeyFormat, error_type: KeyErrorType) -> None:
        self.key_format = key_format
        self.error_type = error_type
        super().__init__(
            f"Invalid {key_format.value} key: bad {error_type.value}"
        )
