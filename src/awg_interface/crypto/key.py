"""Curve25519 keys as used by WireGuard and AmneziaWG interfaces."""

import base64
import binascii
import hmac
import os

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey

from .exceptions import KeyErrorType, KeyFormat, KeyFormatError

KEY_LENGTH = 32
BASE64_LENGTH = 44
HEX_LENGTH = 64


class Key:
    """An immutable 32-byte Curve25519 key.

    Keys compare in constant time and render to the base64 and hex forms
    accepted by ``wg(8)``.
    """

    __slots__ = ("_key",)

    def __init__(self, key: bytes) -> None:
        self._key = bytes(key)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Key":
        """Create a key from its raw 32-byte form.

        Raises:
            KeyFormatError: If data is not exactly 32 bytes long
        """
        if len(data) != KEY_LENGTH:
            raise KeyFormatError(KeyFormat.BINARY, KeyErrorType.LENGTH)
        return cls(data)

    @classmethod
    def from_base64(cls, text: str) -> "Key":
        """Decode a key from its 44-character base64 form.

        Raises:
            KeyFormatError: If text has the wrong length or is not valid base64
        """
        if len(text) != BASE64_LENGTH or not text.endswith("="):
            raise KeyFormatError(KeyFormat.BASE64, KeyErrorType.LENGTH)
        try:
            data = base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as e:
            raise KeyFormatError(KeyFormat.BASE64, KeyErrorType.CONTENTS) from e
        if len(data) != KEY_LENGTH:
            raise KeyFormatError(KeyFormat.BASE64, KeyErrorType.CONTENTS)
        return cls(data)

    @classmethod
    def from_hex(cls, text: str) -> "Key":
        """Decode a key from its 64-character hex form.

        Raises:
            KeyFormatError: If text has the wrong length or is not valid hex
        """
        if len(text) != HEX_LENGTH:
            raise KeyFormatError(KeyFormat.HEX, KeyErrorType.LENGTH)
        try:
            data = bytes.fromhex(text)
        except ValueError as e:
            raise KeyFormatError(KeyFormat.HEX, KeyErrorType.CONTENTS) from e
        # fromhex() skips whitespace
        if len(data) != KEY_LENGTH:
            raise KeyFormatError(KeyFormat.HEX, KeyErrorType.CONTENTS)
        return cls(data)

    @classmethod
    def generate_private_key(cls) -> "Key":
        """Generate a random, clamped Curve25519 private key."""
        scalar = bytearray(os.urandom(KEY_LENGTH))
        scalar[0] &= 248
        scalar[31] &= 127
        scalar[31] |= 64
        return cls(bytes(scalar))

    @classmethod
    def generate_public_key(cls, private_key: "Key") -> "Key":
        """Derive the public key paired with a private key."""
        public = (
            X25519PrivateKey.from_private_bytes(private_key.to_bytes())
            .public_key()
            .public_bytes(
                encoding=serialization.Encoding.Raw,
                format=serialization.PublicFormat.Raw,
            )
        )
        return cls(public)

    def to_bytes(self) -> bytes:
        return self._key

    def to_base64(self) -> str:
        return base64.b64encode(self._key).decode("ascii")

    def to_hex(self) -> str:
        return self._key.hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return hmac.compare_digest(self._key, other._key)

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        # Never print key material
        return "Key(<32 bytes>)"


class KeyPair:
    """A private key and the public key derived from it."""

    __slots__ = ("_private_key", "_public_key")

    def __init__(self, private_key: Key | None = None) -> None:
        """Create a key pair, generating a private key when none is given.

        Args:
            private_key: Existing private key to pair
        """
        self._private_key = (
            private_key if private_key is not None else Key.generate_private_key()
        )
        self._public_key = Key.generate_public_key(self._private_key)

    @property
    def private_key(self) -> Key:
        return self._private_key

    @property
    def public_key(self) -> Key:
        return self._public_key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyPair):
            return NotImplemented
        return self._private_key == other._private_key

    def __hash__(self) -> int:
        return hash(self._private_key)

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self._public_key.to_base64()!r})"
