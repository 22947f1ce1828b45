"""
Transaction records.

Wire layouts (no overall length prefix or terminator; every field is
self-delimiting):

    Transaction:          signed ++ nonce ++ function
    UncheckedTransaction: signed ++ nonce ++ function ++ signature

The bytes of an UncheckedTransaction therefore start with the exact bytes of
its Transaction, which is what the signature is meant to cover.
"""

from __future__ import annotations
from typing import Any, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .codec.reader import BinaryReader
from .codec.slicable import Slicable
from .codec.writer import BinaryWriter
from .function import Function, decode_function
from .primitives import AccountId, Signature, TxOrder, TxOrderInt


class Transaction(BaseModel, Slicable):
    """
    A vetted transaction from the external world.

    Attributes:
        signed: Who signed it (this is not a signature)
        nonce: Number of transactions that came before from the same signer
        function: The function that should be called
    """

    model_config = ConfigDict(frozen=True)

    signed: AccountId
    nonce: TxOrderInt
    function: Function

    @classmethod
    def decode_from(cls, reader: BinaryReader) -> Optional[Transaction]:
        signed = AccountId.decode_from(reader)
        if signed is None:
            return None
        nonce = TxOrder.decode_from(reader)
        if nonce is None:
            return None
        function = decode_function(reader)
        if function is None:
            return None
        return cls(signed=signed, nonce=nonce, function=function)

    def encode(self) -> bytes:
        writer = BinaryWriter()
        self.signed.with_encoded(writer.bytes)
        TxOrder.with_encoded(self.nonce, writer.bytes)
        self.function.with_encoded(writer.bytes)
        return writer.to_bytes()


class UncheckedTransaction(BaseModel, Slicable):
    """
    A transaction right from the external world, signature not yet checked.

    The signature should be an Ed25519 signature over ``transaction.encode()``;
    producing and checking it happen elsewhere. Equality compares signature
    bytes and the inner transaction, and the repr leaves the signature out.
    """

    model_config = ConfigDict(frozen=True)

    transaction: Transaction
    signature: Signature

    @classmethod
    def decode_from(cls, reader: BinaryReader) -> Optional[UncheckedTransaction]:
        transaction = Transaction.decode_from(reader)
        if transaction is None:
            return None
        signature = Signature.decode_from(reader)
        if signature is None:
            return None
        return cls(transaction=transaction, signature=signature)

    def encode(self) -> bytes:
        writer = BinaryWriter()
        self.transaction.with_encoded(writer.bytes)
        self.signature.with_encoded(writer.bytes)
        return writer.to_bytes()

    def signed_payload(self) -> bytes:
        """Bytes the signature is expected to cover."""
        return self.transaction.encode()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, UncheckedTransaction):
            return NotImplemented
        return (
            bytes(self.signature) == bytes(other.signature)
            and self.transaction == other.transaction
        )

    def __hash__(self) -> int:
        return hash((bytes(self.signature), self.transaction))

    def __repr_args__(self) -> Iterator[Tuple[Optional[str], Any]]:
        yield None, self.transaction
