"""
Tagged variants.

A closed union is encoded as a one-byte discriminant followed by the chosen
variant's fields. Decoding reads the tag, looks it up in the union's
registry and hands the rest of the reader to that variant. Unknown tags are
a decode failure.
"""

from __future__ import annotations
from typing import ClassVar, Dict, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict

from .reader import BinaryReader
from .slicable import Slicable
from .writer import BinaryWriter

V = TypeVar("V", bound="TaggedVariant")


class TaggedVariant(BaseModel, Slicable):
    """
    Base for one member of a closed tagged union.

    Subclasses set ``TAG`` and a ``kind`` literal (the JSON discriminator),
    and override ``write_fields``/``read_fields`` when they carry data.
    """

    TAG: ClassVar[int]

    model_config = ConfigDict(frozen=True)

    def write_fields(self, writer: BinaryWriter) -> None:
        """Append the variant's fields after the tag. No fields by default."""

    @classmethod
    def read_fields(cls: Type[V], reader: BinaryReader) -> Optional[V]:
        """Read the variant's fields, the tag having been consumed."""
        return cls()

    def encode(self) -> bytes:
        writer = BinaryWriter()
        writer.u8(self.TAG)
        self.write_fields(writer)
        return writer.to_bytes()

    @classmethod
    def decode_from(cls: Type[V], reader: BinaryReader) -> Optional[V]:
        if reader.u8() != cls.TAG:
            return None
        return cls.read_fields(reader)


def build_registry(variants: Iterable[Type[TaggedVariant]]) -> Dict[int, Type[TaggedVariant]]:
    """Map tags to variant classes, refusing duplicate tags."""
    registry: Dict[int, Type[TaggedVariant]] = {}
    for variant in variants:
        if variant.TAG in registry:
            raise ValueError(
                f"Duplicate tag 0x{variant.TAG:02x}: {registry[variant.TAG].__name__} and {variant.__name__}"
            )
        registry[variant.TAG] = variant
    return registry


def decode_variant(registry: Dict[int, Type[TaggedVariant]],
                   reader: BinaryReader) -> Optional[TaggedVariant]:
    """Read a tag and dispatch to the matching variant, or return None."""
    tag = reader.u8()
    if tag is None:
        return None
    variant = registry.get(tag)
    if variant is None:
        return None
    return variant.read_fields(reader)
