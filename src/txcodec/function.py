"""
Function payloads.

The function is the part of a transaction saying what the signer asks for.
It is a closed union: one tag byte, then the variant's fields. Its encoding is
self-delimiting, so a transaction needs no length prefix around it.

| tag  | variant           | fields                     |
|------|-------------------|----------------------------|
| 0x00 | TimestampSet      | timestamp: u64             |
| 0x10 | SessionSetKey     | key: SessionKey            |
| 0x20 | StakingStake      |                            |
| 0x21 | StakingUnstake    |                            |
| 0x22 | StakingTransfer   | dest: AccountId, value: u64|
| 0x30 | GovernancePropose | proposal: Proposal         |
| 0x31 | GovernanceApprove | era_index: u64             |
"""

from __future__ import annotations
from typing import Annotated, ClassVar, Literal, Optional, Union

from pydantic import Field

from .codec.reader import BinaryReader
from .codec.slicable import U64
from .codec.variant import TaggedVariant, build_registry, decode_variant
from .codec.writer import BinaryWriter
from .primitives import AccountId, SessionKey, U64Int
from .proposal import Proposal, decode_proposal


class TimestampSet(TaggedVariant):
    """Set the block timestamp."""
    TAG: ClassVar[int] = 0x00
    kind: Literal["timestamp_set"] = Field("timestamp_set", repr=False)
    timestamp: U64Int

    def write_fields(self, writer: BinaryWriter) -> None:
        U64.with_encoded(self.timestamp, writer.bytes)

    @classmethod
    def read_fields(cls, reader: BinaryReader) -> Optional[TimestampSet]:
        timestamp = U64.decode_from(reader)
        if timestamp is None:
            return None
        return cls(timestamp=timestamp)


class SessionSetKey(TaggedVariant):
    """Register the session key the signer validates with."""
    TAG: ClassVar[int] = 0x10
    kind: Literal["session_set_key"] = Field("session_set_key", repr=False)
    key: SessionKey

    def write_fields(self, writer: BinaryWriter) -> None:
        self.key.with_encoded(writer.bytes)

    @classmethod
    def read_fields(cls, reader: BinaryReader) -> Optional[SessionSetKey]:
        key = SessionKey.decode_from(reader)
        if key is None:
            return None
        return cls(key=key)


class StakingStake(TaggedVariant):
    TAG: ClassVar[int] = 0x20
    kind: Literal["staking_stake"] = Field("staking_stake", repr=False)


class StakingUnstake(TaggedVariant):
    TAG: ClassVar[int] = 0x21
    kind: Literal["staking_unstake"] = Field("staking_unstake", repr=False)


class StakingTransfer(TaggedVariant):
    """Move ``value`` from the signer to ``dest``."""
    TAG: ClassVar[int] = 0x22
    kind: Literal["staking_transfer"] = Field("staking_transfer", repr=False)
    dest: AccountId
    value: U64Int

    def write_fields(self, writer: BinaryWriter) -> None:
        self.dest.with_encoded(writer.bytes)
        U64.with_encoded(self.value, writer.bytes)

    @classmethod
    def read_fields(cls, reader: BinaryReader) -> Optional[StakingTransfer]:
        dest = AccountId.decode_from(reader)
        if dest is None:
            return None
        value = U64.decode_from(reader)
        if value is None:
            return None
        return cls(dest=dest, value=value)


class GovernancePropose(TaggedVariant):
    TAG: ClassVar[int] = 0x30
    kind: Literal["governance_propose"] = Field("governance_propose", repr=False)
    proposal: Proposal

    def write_fields(self, writer: BinaryWriter) -> None:
        self.proposal.with_encoded(writer.bytes)

    @classmethod
    def read_fields(cls, reader: BinaryReader) -> Optional[GovernancePropose]:
        proposal = decode_proposal(reader)
        if proposal is None:
            return None
        return cls(proposal=proposal)


class GovernanceApprove(TaggedVariant):
    TAG: ClassVar[int] = 0x31
    kind: Literal["governance_approve"] = Field("governance_approve", repr=False)
    era_index: U64Int

    def write_fields(self, writer: BinaryWriter) -> None:
        U64.with_encoded(self.era_index, writer.bytes)

    @classmethod
    def read_fields(cls, reader: BinaryReader) -> Optional[GovernanceApprove]:
        era_index = U64.decode_from(reader)
        if era_index is None:
            return None
        return cls(era_index=era_index)


FUNCTION_VARIANTS = build_registry([
    TimestampSet,
    SessionSetKey,
    StakingStake,
    StakingUnstake,
    StakingTransfer,
    GovernancePropose,
    GovernanceApprove,
])

Function = Annotated[
    Union[
        TimestampSet,
        SessionSetKey,
        StakingStake,
        StakingUnstake,
        StakingTransfer,
        GovernancePropose,
        GovernanceApprove,
    ],
    Field(discriminator="kind"),
]


def decode_function(reader: BinaryReader) -> Optional[TaggedVariant]:
    """Decode any function variant from the front of ``reader``."""
    return decode_variant(FUNCTION_VARIANTS, reader)
