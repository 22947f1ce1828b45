"""
Fixed-width field types.

Account identifiers, session keys and signatures are opaque byte strings of a
fixed size, written raw with no length prefix. Each is usable as a Pydantic
field: it validates from bytes, a list of ints or a hex string, and dumps to
``0x``-prefixed hex in JSON mode.
"""

from __future__ import annotations
from typing import Annotated, Any, ClassVar, Optional, Union

from pydantic import Field, GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .codec.reader import BinaryReader
from .codec.slicable import Slicable, U32, U64
from .codec.writer import U32_MAX, U64_MAX


class FixedBytes(Slicable):
    """Immutable byte string of exactly ``SIZE`` bytes."""

    SIZE: ClassVar[int] = 0

    def __init__(self, value: Union[bytes, bytearray, memoryview, list]):
        if isinstance(value, (str, int)):
            raise ValueError(f"{type(self).__name__} takes bytes, not {type(value).__name__}; use from_hex() for strings")
        try:
            value = bytes(value)
        except TypeError as e:
            raise ValueError(f"Invalid {type(self).__name__}: {e}") from e
        if len(value) != self.SIZE:
            raise ValueError(
                f"{type(self).__name__} must be {self.SIZE} bytes, got {len(value)}"
            )
        self._value = value

    @classmethod
    def from_hex(cls, hex_string: str) -> "FixedBytes":
        """Create from a hex string, with or without a ``0x`` prefix."""
        if hex_string[:2].lower() == "0x":
            hex_string = hex_string[2:]
        try:
            raw = bytes.fromhex(hex_string)
        except ValueError as e:
            raise ValueError(f"Invalid hex string: {e}") from e
        return cls(raw)

    @classmethod
    def zero(cls) -> "FixedBytes":
        return cls(bytes(cls.SIZE))

    def hex(self) -> str:
        return "0x" + self._value.hex()

    def __bytes__(self) -> bytes:
        return self._value

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self):
        return iter(self._value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FixedBytes):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"

    @classmethod
    def decode_from(cls, reader: BinaryReader) -> Optional["FixedBytes"]:
        raw = reader.bytes(cls.SIZE)
        if raw is None:
            return None
        return cls(raw)

    def encode(self) -> bytes:
        return self._value

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates and serializes the value."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.hex(), when_used="json"
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> "FixedBytes":
        """Validate and convert the input to an instance."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, (bytes, bytearray, memoryview, list)):
            return cls(value)
        raise ValueError(f"Invalid {cls.__name__}: {value!r}")


class AccountId(FixedBytes):
    """Identifier of the account that authorised a transaction (not a signature)."""

    SIZE = 32


class SessionKey(FixedBytes):
    """Validator session key."""

    SIZE = 32


class Signature(FixedBytes):
    """
    Opaque 64-byte signature value.

    Never interpreted here; equality is plain byte comparison.
    """

    SIZE = 64


# Integer field types. Strict mode keeps bools and numeric strings out.
U32Int = Annotated[int, Field(strict=True, ge=0, le=U32_MAX)]
U64Int = Annotated[int, Field(strict=True, ge=0, le=U64_MAX)]

# Per-signer ordering counter
TxOrder = U64
TxOrderInt = U64Int

__all__ = [
    "FixedBytes",
    "AccountId",
    "SessionKey",
    "Signature",
    "U32",
    "U64",
    "U32Int",
    "U64Int",
    "TxOrder",
    "TxOrderInt",
]
