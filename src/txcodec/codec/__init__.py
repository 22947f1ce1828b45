"""
Binary Codec Module

Canonical binary encoding/decoding shared by every transaction type.

Key components:
- reader.py: Cursor over a byte sequence; truncated reads return None
- writer.py: Little-endian fixed-width byte sink
- slicable.py: The codec protocol, integer codecs and list encoding
- variant.py: One-byte tagged unions
"""

from .reader import BinaryReader
from .slicable import (
    Slicable,
    FixedUint,
    U8,
    U32,
    U64,
    encode_list,
    decode_list,
    decode_list_all,
)
from .variant import TaggedVariant
from .writer import BinaryWriter

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "Slicable",
    "FixedUint",
    "TaggedVariant",
    "U8",
    "U32",
    "U64",
    "encode_list",
    "decode_list",
    "decode_list_all",
]
