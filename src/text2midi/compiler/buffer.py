"""
ByteBuffer - growable byte container for SMF output.

Capacity doubles whenever an append would overflow it, so appends are
amortized O(1). Allocation failure surfaces as ResourceExhaustionError.
"""

from __future__ import annotations

import struct

from text2midi.errors import ResourceExhaustionError

INITIAL_CAPACITY = 256


class ByteBuffer:
    """
    An exclusively owned, append-only byte buffer.

    Example:
        buf = ByteBuffer()
        buf.put(b"MThd")
        buf.put_be32(6)
        data = buf.getvalue()
    """

    __slots__ = ("_data", "_length")

    def __init__(self) -> None:
        self._data = bytearray()
        self._length = 0

    @property
    def capacity(self) -> int:
        """Bytes allocated, including unused space."""
        return len(self._data)

    def reserve(self, additional: int) -> None:
        """Ensure room for `additional` more bytes."""
        needed = self._length + additional
        if needed <= len(self._data):
            return

        capacity = len(self._data) or INITIAL_CAPACITY
        while capacity < needed:
            capacity *= 2

        try:
            self._data.extend(bytes(capacity - len(self._data)))
        except MemoryError as e:
            raise ResourceExhaustionError(f"Out of memory growing buffer to {capacity} bytes") from e

    def put(self, data: bytes) -> None:
        """Append raw bytes."""
        self.reserve(len(data))
        self._data[self._length : self._length + len(data)] = data
        self._length += len(data)

    def put_u8(self, value: int) -> None:
        """Append a single byte."""
        self.reserve(1)
        self._data[self._length] = value & 0xFF
        self._length += 1

    def put_be16(self, value: int) -> None:
        """Append a 16-bit unsigned value, big-endian."""
        self.put(struct.pack(">H", value & 0xFFFF))

    def put_be32(self, value: int) -> None:
        """Append a 32-bit unsigned value, big-endian."""
        self.put(struct.pack(">I", value & 0xFFFFFFFF))

    def put_vlq(self, value: int) -> None:
        """Append a MIDI variable-length quantity."""
        self.put(encode_vlq(value))

    def getvalue(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._data[: self._length])

    def __len__(self) -> int:
        return self._length

    def __bytes__(self) -> bytes:
        return self.getvalue()


def encode_vlq(value: int) -> bytes:
    """
    Encode an unsigned 32-bit value as a MIDI variable-length quantity.

    Seven bits per byte, most significant group first; every byte but
    the last has its high bit set.

    Example:
        encode_vlq(0)    # b'\\x00'
        encode_vlq(128)  # b'\\x81\\x00'
    """
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"VLQ value must be 0-4294967295, got {value}")

    groups = [value & 0x7F]
    value >>= 7
    while value:
        groups.append((value & 0x7F) | 0x80)
        value >>= 7
    return bytes(reversed(groups))


def decode_vlq(data: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Decode a variable-length quantity starting at `offset`.

    Returns:
        (value, offset just past the quantity)
    """
    value = 0
    for index in range(offset, min(len(data), offset + 5)):
        byte = data[index]
        value = (value << 7) | (byte & 0x7F)
        if not byte & 0x80:
            return value, index + 1
    raise ValueError(f"Unterminated variable-length quantity at offset {offset}")
