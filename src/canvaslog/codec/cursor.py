"""Byte-level reading and writing utilities.

This module provides the cursors the codec reads and writes payloads through.
All multi-byte integers are little-endian; this is part of the wire format.
"""

from __future__ import annotations

import struct

from ..exceptions import InvalidValueLengthError

_U8 = struct.Struct("<B")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")


class ByteWriter:
    """Writes values into a caller-owned, fixed-size byte buffer.

    The writer never grows the buffer: running past its end is an error.
    No reference to the buffer is kept beyond the writer's own lifetime.

    Example:
        >>> buf = bytearray(9)
        >>> writer = ByteWriter(buf)
        >>> writer.write_u8(4)
        >>> writer.write_u64(1234)
        >>> writer.position()
        9
    """

    def __init__(self, buffer: bytearray | memoryview) -> None:
        """Initialize a writer at the start of ``buffer``.

        Raises:
            TypeError: If the buffer is read-only
        """
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError("ByteWriter requires a writable buffer")
        self._view = view.cast("B")
        self._position = 0

    def _reserve(self, num_bytes: int) -> int:
        start = self._position
        if start + num_bytes > len(self._view):
            raise InvalidValueLengthError(
                f"Output buffer too small: need {num_bytes} bytes, "
                f"have {len(self._view) - start}"
            )
        self._position = start + num_bytes
        return start

    def write_u8(self, value: int) -> None:
        _U8.pack_into(self._view, self._reserve(1), value)

    def write_u32(self, value: int) -> None:
        _U32.pack_into(self._view, self._reserve(4), value)

    def write_u64(self, value: int) -> None:
        _U64.pack_into(self._view, self._reserve(8), value)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes.

        Args:
            data: Bytes to write
        """
        start = self._reserve(len(data))
        self._view[start : start + len(data)] = data

    def position(self) -> int:
        """Return the number of bytes written so far."""
        return self._position


class ByteReader:
    """Reads values from a payload left to right.

    Every fixed-width read checks that enough bytes remain and raises
    InvalidValueLengthError otherwise.

    Example:
        >>> reader = ByteReader(b"\\x04test")
        >>> reader.read_bytes(reader.read_u8())
        b'test'
        >>> reader.remaining()
        0
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        """Initialize a reader at the start of ``data``.

        Args:
            data: Payload to read
        """
        self._data = bytes(data)
        self._position = 0

    def _take(self, num_bytes: int) -> int:
        start = self._position
        if start + num_bytes > len(self._data):
            raise InvalidValueLengthError(
                f"Not enough bytes: need {num_bytes}, have {len(self._data) - start}"
            )
        self._position = start + num_bytes
        return start

    def read_u8(self) -> int:
        return _U8.unpack_from(self._data, self._take(1))[0]

    def read_u32(self) -> int:
        return _U32.unpack_from(self._data, self._take(4))[0]

    def read_u64(self) -> int:
        return _U64.unpack_from(self._data, self._take(8))[0]

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from the payload

        Raises:
            InvalidValueLengthError: If not enough bytes are available
        """
        start = self._take(num_bytes)
        return self._data[start : start + num_bytes]

    def read_rest(self) -> bytes:
        """Read every remaining byte (possibly none)."""
        return self.read_bytes(self.remaining())

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position

    def finish(self) -> None:
        """Check that the whole payload has been consumed.

        Raises:
            InvalidValueLengthError: If unread bytes remain
        """
        if self.remaining():
            raise InvalidValueLengthError(
                f"{self.remaining()} trailing bytes after the last field"
            )
