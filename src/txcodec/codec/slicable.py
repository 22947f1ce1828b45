"""
Codec protocol.

Every encodable type implements three operations:

- ``decode_from(reader)``: consume exactly one value from the front of a
  shared BinaryReader and return it, or return None when the bytes are
  truncated or malformed. After a None the reader position is unspecified
  and the caller must abandon its own decode as well.
- ``encode()``: the canonical bytes; decoding them yields an equal value.
- ``with_encoded(action)``: call ``action`` with a temporary read-only view
  of the encoding and return its result.

Composite types decode their fields in declared order against one reader and
encode by concatenating the fields' bytes in that same order. Nothing wraps a
composite in a length prefix, so field order is the only framing.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional, Type, TypeVar

from ..options import CodecOptions, DEFAULT_OPTIONS
from ..runtime.errors import DecodeError, ErrorCode
from .reader import BinaryReader, ByteSource
from .writer import BinaryWriter

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound="Slicable")


def _scoped_view(data: bytes, action: Callable[[memoryview], T]) -> T:
    with memoryview(data) as view:
        return action(view)


def _decode_all(name: str, decoder: Callable[[BinaryReader], Optional[T]],
                data: ByteSource, options: Optional[CodecOptions]) -> T:
    options = options or DEFAULT_OPTIONS
    reader = BinaryReader(data)
    value = decoder(reader)
    if value is None:
        logger.debug(f"Failed to decode {name} from {len(data)} bytes")
        raise DecodeError(
            f"Cannot decode {name}: input is truncated or malformed",
            details={"type": name, "length": len(data)},
        )
    if not reader.eof and not options.allow_trailing:
        logger.debug(f"Decoded {name} left {reader.remaining} trailing bytes at offset {reader.offset}")
        raise DecodeError(
            f"Trailing bytes after {name}",
            code=ErrorCode.TRAILING_BYTES,
            details={"type": name, "offset": reader.offset, "remaining": reader.remaining},
        )
    return value


class Slicable(ABC):
    """Base for values that implement the codec protocol."""

    @classmethod
    @abstractmethod
    def decode_from(cls: Type[S], reader: BinaryReader) -> Optional[S]:
        """Decode one value from the front of ``reader``, or return None."""

    @abstractmethod
    def encode(self) -> bytes:
        """Return the canonical encoding."""

    def with_encoded(self, action: Callable[[memoryview], T]) -> T:
        """
        Run ``action`` against a read-only view of the encoding.

        The view is released when the action returns, so the action must copy
        anything it wants to keep.
        """
        return _scoped_view(self.encode(), action)

    @property
    def encoded_size(self) -> int:
        """Length of the encoding in bytes."""
        return len(self.encode())

    @classmethod
    def decode(cls: Type[S], data: ByteSource, options: Optional[CodecOptions] = None) -> S:
        """
        Decode a complete byte string.

        Args:
            data: Encoded bytes
            options: Decode options; trailing bytes are rejected by default

        Returns:
            Decoded value

        Raises:
            DecodeError: If the input is truncated, malformed, or has
                unexpected trailing bytes
        """
        return _decode_all(cls.__name__, cls.decode_from, data, options)

    @classmethod
    def try_decode(cls: Type[S], data: ByteSource, options: Optional[CodecOptions] = None) -> Optional[S]:
        """Like ``decode`` but return None instead of raising."""
        try:
            return cls.decode(data, options)
        except DecodeError:
            return None


class FixedUint:
    """
    Codec for an unsigned little-endian integer of fixed width.

    Plain ints cannot carry the protocol methods, so integer fields go
    through one of the module-level instances ``U8``, ``U32`` and ``U64``.
    """

    def __init__(self, name: str, size: int):
        self.name = name
        self.size = size
        self.max_value = (1 << (8 * size)) - 1

    def __repr__(self) -> str:
        return f"FixedUint({self.name})"

    def decode_from(self, reader: BinaryReader) -> Optional[int]:
        raw = reader.bytes(self.size)
        if raw is None:
            return None
        return int.from_bytes(raw, "little")

    def encode(self, value: int) -> bytes:
        writer = BinaryWriter()
        if self.size == 1:
            writer.u8(value)
        elif self.size == 4:
            writer.u32le(value)
        else:
            writer.u64le(value)
        return writer.to_bytes()

    def with_encoded(self, value: int, action: Callable[[memoryview], T]) -> T:
        return _scoped_view(self.encode(value), action)

    def decode(self, data: ByteSource, options: Optional[CodecOptions] = None) -> int:
        return _decode_all(self.name, self.decode_from, data, options)


U8 = FixedUint("u8", 1)
U32 = FixedUint("u32", 4)
U64 = FixedUint("u64", 8)


def encode_list(items: Iterable[Slicable]) -> bytes:
    """
    Encode a sequence as a u32 little-endian item count followed by the items.

    Args:
        items: Values implementing the codec protocol

    Returns:
        Encoded sequence
    """
    items = list(items)
    writer = BinaryWriter()
    writer.u32le(len(items))
    for item in items:
        item.with_encoded(writer.bytes)
    return writer.to_bytes()


def decode_list(item_cls: Type[S], reader: BinaryReader,
                options: Optional[CodecOptions] = None) -> Optional[List[S]]:
    """
    Decode a sequence written by ``encode_list``.

    Returns None if the count is missing, exceeds ``options.max_list_items``,
    or any item fails to decode.
    """
    options = options or DEFAULT_OPTIONS
    count = reader.u32le()
    if count is None or count > options.max_list_items:
        return None
    items: List[S] = []
    for _ in range(count):
        item = item_cls.decode_from(reader)
        if item is None:
            return None
        items.append(item)
    return items


def decode_list_all(item_cls: Type[S], data: ByteSource,
                    options: Optional[CodecOptions] = None) -> List[S]:
    """Decode a complete byte string holding an encoded list, raising DecodeError on failure."""
    return _decode_all(
        f"List[{item_cls.__name__}]",
        lambda reader: decode_list(item_cls, reader, options),
        data,
        options,
    )


__all__ = [
    "Slicable",
    "FixedUint",
    "U8",
    "U32",
    "U64",
    "encode_list",
    "decode_list",
    "decode_list_all",
]
