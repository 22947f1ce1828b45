"""
Binary Reader

Cursor over a byte sequence shared by every decoder in a decode chain.
Reads are little-endian and fixed-width; a read that would run past the end
returns None and leaves the cursor where it was.
"""

import builtins
import struct
from typing import Optional, Union

ByteSource = Union[builtins.bytes, bytearray, memoryview]


class BinaryReader:
    """
    Binary reader tracking how many bytes have been consumed.

    Each decode call owns its reader; composite decoders pass the same
    instance to every field decoder in declared order.
    """

    def __init__(self, buf: ByteSource):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = builtins.bytes(buf)
        self._off = 0

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._off

    @property
    def remaining(self) -> int:
        """Number of bytes left to read."""
        return len(self._buf) - self._off

    @property
    def eof(self) -> bool:
        """
        Check if at end of buffer.

        Returns:
            True if at end of buffer
        """
        return self._off >= len(self._buf)

    def bytes(self, n: int) -> Optional[builtins.bytes]:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length, or None if fewer than n remain
        """
        if n < 0 or self._off + n > len(self._buf):
            return None
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def u8(self) -> Optional[int]:
        """
        Read unsigned 8-bit integer.

        Returns:
            Unsigned 8-bit integer value, or None at end of buffer
        """
        if self._off >= len(self._buf):
            return None
        val = self._buf[self._off]
        self._off += 1
        return val

    def u32le(self) -> Optional[int]:
        """
        Read unsigned 32-bit integer in little-endian format.

        Returns:
            Unsigned 32-bit integer value, or None if truncated
        """
        raw = self.bytes(4)
        if raw is None:
            return None
        return struct.unpack("<I", raw)[0]

    def u64le(self) -> Optional[int]:
        """
        Read unsigned 64-bit integer in little-endian format.

        Returns:
            Unsigned 64-bit integer value, or None if truncated
        """
        raw = self.bytes(8)
        if raw is None:
            return None
        return struct.unpack("<Q", raw)[0]

    def len_prefixed_bytes(self) -> Optional[builtins.bytes]:
        """
        Read bytes with a u32 little-endian length prefix.

        Returns:
            Bytes with length read from the prefix, or None if truncated
        """
        n = self.u32le()
        if n is None:
            return None
        return self.bytes(n)
