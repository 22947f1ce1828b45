"""
Binary Writer

Accumulates the little-endian, fixed-width output that BinaryReader consumes.
"""

import struct

from ..runtime.errors import EncodeError

U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF


class BinaryWriter:
    """
    Binary writer producing the canonical byte layout.

    Every method appends; ``to_bytes`` returns the result so far.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb = bytearray()

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)
        """
        if not 0 <= v <= 0xFF:
            raise EncodeError(f"u8 out of range: {v}")
        self._bb.append(v)

    def u32le(self, v: int) -> None:
        """
        Write unsigned 32-bit integer in little-endian format.

        Args:
            v: Integer value to write as 32-bit little-endian
        """
        if not 0 <= v <= U32_MAX:
            raise EncodeError(f"u32 out of range: {v}")
        self._bb.extend(struct.pack('<I', v))

    def u64le(self, v: int) -> None:
        """
        Write unsigned 64-bit integer in little-endian format.

        Args:
            v: Integer value to write as 64-bit little-endian
        """
        if not 0 <= v <= U64_MAX:
            raise EncodeError(f"u64 out of range: {v}")
        self._bb.extend(struct.pack('<Q', v))

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def len_prefixed_bytes(self, v: bytes) -> None:
        """
        Write bytes with a u32 little-endian length prefix.

        Args:
            v: Bytes to write with length prefix
        """
        self.u32le(len(v))
        self.bytes(v)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
