"""Byte-level reading and writing utilities.

This module provides the cursor used to walk a control payload and the buffer
used to build one. Multi-byte integers follow the byte order passed in by the
caller, normally taken from the file header.
"""

from __future__ import annotations

import struct

from ..header import Endianness


class ByteReader:
    """Reads values from a byte buffer, tracking the current position.

    Example:
        >>> reader = ByteReader(b"\\x00\\x04\\x01")
        >>> reader.read_u16(Endianness.BIG)
        4
        >>> reader.read_u8()
        1
    """

    def __init__(self, data: bytes, position: int = 0) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Byte buffer to read from
            position: Offset of the first byte to read
        """
        self._data = bytes(data)
        self._position = position

    def read_u8(self) -> int:
        """Read one unsigned byte.

        Raises:
            IndexError: If no bytes are left
        """
        return self.read_bytes(1)[0]

    def read_u16(self, endianness: Endianness) -> int:
        """Read an unsigned 16-bit integer.

        Args:
            endianness: Byte order of the integer

        Raises:
            IndexError: If fewer than 2 bytes are left
        """
        value: int = struct.unpack(endianness.struct_prefix + "H", self.read_bytes(2))[0]
        return value

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes raw bytes.

        Raises:
            IndexError: If not enough bytes are left
        """
        if num_bytes > self.bytes_remaining():
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )

        start = self._position
        self._position += num_bytes
        return self._data[start : self._position]

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read offset in bytes."""
        return self._position


class ByteWriter:
    """Accumulates encoded values into a byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_u16(4, Endianness.LITTLE)
        >>> writer.write_u8(1)
        >>> writer.to_bytes()
        b'\\x04\\x00\\x01'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_u8(self, value: int) -> None:
        """Write one unsigned byte.

        Raises:
            ValueError: If value is not 0-255
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Value {value} does not fit in a u8")
        self._buffer.append(value)

    def write_u16(self, value: int, endianness: Endianness) -> None:
        """Write an unsigned 16-bit integer.

        Raises:
            ValueError: If value is not 0-65535
        """
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"Value {value} does not fit in a u16")
        self._buffer.extend(struct.pack(endianness.struct_prefix + "H", value))

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buffer.extend(data)

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buffer)
