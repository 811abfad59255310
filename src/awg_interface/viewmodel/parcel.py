"""Flat, ordered binary encoding for staging records."""

import struct
from collections.abc import Iterable

from ..common.exceptions import ParcelError
from ..common.utils import MAX_UINT32

_UINT32 = struct.Struct(">I")


class ParcelWriter:
    """Appends length-prefixed values to a byte buffer.

    Integers are unsigned 32-bit big-endian. Strings are UTF-8 preceded by
    their byte length; string lists are preceded by their item count.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_int(self, value: int) -> None:
        if not (0 <= value <= MAX_UINT32):
            raise ValueError(f"Value {value} does not fit in an unsigned 32-bit field")
        self._buffer += _UINT32.pack(value)

    def write_string(self, value: str | None) -> None:
        """Write a string; ``None`` is written as the empty string."""
        data = (value or "").encode("utf-8")
        self.write_int(len(data))
        self._buffer += data

    def write_string_list(self, values: Iterable[str]) -> None:
        items = list(values)
        self.write_int(len(items))
        for item in items:
            self.write_string(item)

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)


class ParcelReader:
    """Reads values written by ParcelWriter, in the same order.

    Raises:
        ParcelError: On truncated data or invalid UTF-8
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def _take(self, size: int) -> bytes:
        if size > self.remaining:
            raise ParcelError(
                f"Unexpected end of data: needed {size} bytes at offset "
                f"{self._offset}, {self.remaining} available"
            )
        chunk = self._data[self._offset : self._offset + size]
        self._offset += size
        return chunk

    def read_int(self) -> int:
        value: int = _UINT32.unpack(self._take(_UINT32.size))[0]
        return value

    def read_string(self) -> str:
        length = self.read_int()
        raw = self._take(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParcelError(f"Invalid UTF-8 string at offset {self._offset - length}") from e

    def read_string_list(self) -> list[str]:
        count = self.read_int()
        return [self.read_string() for _ in range(count)]

    def ensure_consumed(self) -> None:
        """Raise if unread bytes remain."""
        if self.remaining:
            raise ParcelError(f"{self.remaining} trailing bytes after record")
