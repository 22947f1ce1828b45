"""
Governance proposals: the privileged calls a GovernancePropose function carries.

Each variant is a one-byte tag followed by its fields.
"""

from __future__ import annotations
from typing import Annotated, Any, ClassVar, Literal, Optional, Union

from pydantic import Field, field_serializer, field_validator

from .codec.reader import BinaryReader
from .codec.slicable import U32, U64
from .codec.variant import TaggedVariant, build_registry, decode_variant
from .codec.writer import BinaryWriter
from .primitives import U32Int, U64Int


class SystemSetCode(TaggedVariant):
    """Replace the runtime code."""
    TAG: ClassVar[int] = 0x00
    kind: Literal["system_set_code"] = Field("system_set_code", repr=False)
    code: bytes

    @field_validator("code", mode="before")
    @classmethod
    def parse_code(cls, v: Any) -> Any:
        """Accept hex strings as produced by JSON dumps."""
        if isinstance(v, str):
            return bytes.fromhex(v[2:] if v[:2].lower() == "0x" else v)
        return v

    @field_serializer("code", when_used="json")
    def dump_code(self, v: bytes) -> str:
        return "0x" + v.hex()

    def write_fields(self, writer: BinaryWriter) -> None:
        writer.len_prefixed_bytes(self.code)

    @classmethod
    def read_fields(cls, reader: BinaryReader) -> Optional[SystemSetCode]:
        code = reader.len_prefixed_bytes()
        if code is None:
            return None
        return cls(code=code)


class SessionSetLength(TaggedVariant):
    TAG: ClassVar[int] = 0x10
    kind: Literal["session_set_length"] = Field("session_set_length", repr=False)
    length: U64Int

    def write_fields(self, writer: BinaryWriter) -> None:
        writer.u64le(self.length)

    @classmethod
    def read_fields(cls, reader: BinaryReader) -> Optional[SessionSetLength]:
        length = U64.decode_from(reader)
        if length is None:
            return None
        return cls(length=length)


class SessionForceNewSession(TaggedVariant):
    TAG: ClassVar[int] = 0x11
    kind: Literal["session_force_new_session"] = Field("session_force_new_session", repr=False)


class StakingSetSessionsPerEra(TaggedVariant):
    TAG: ClassVar[int] = 0x20
    kind: Literal["staking_set_sessions_per_era"] = Field("staking_set_sessions_per_era", repr=False)
    sessions: U64Int

    def write_fields(self, writer: BinaryWriter) -> None:
        writer.u64le(self.sessions)

    @classmethod
    def read_fields(cls, reader: BinaryReader) -> Optional[StakingSetSessionsPerEra]:
        sessions = U64.decode_from(reader)
        if sessions is None:
            return None
        return cls(sessions=sessions)


class StakingSetBondingDuration(TaggedVariant):
    TAG: ClassVar[int] = 0x21
    kind: Literal["staking_set_bonding_duration"] = Field("staking_set_bonding_duration", repr=False)
    duration: U64Int

    def write_fields(self, writer: BinaryWriter) -> None:
        writer.u64le(self.duration)

    @classmethod
    def read_fields(cls, reader: BinaryReader) -> Optional[StakingSetBondingDuration]:
        duration = U64.decode_from(reader)
        if duration is None:
            return None
        return cls(duration=duration)


class StakingSetValidatorCount(TaggedVariant):
    TAG: ClassVar[int] = 0x22
    kind: Literal["staking_set_validator_count"] = Field("staking_set_validator_count", repr=False)
    count: U32Int

    def write_fields(self, writer: BinaryWriter) -> None:
        writer.u32le(self.count)

    @classmethod
    def read_fields(cls, reader: BinaryReader) -> Optional[StakingSetValidatorCount]:
        count = U32.decode_from(reader)
        if count is None:
            return None
        return cls(count=count)


class StakingForceNewEra(TaggedVariant):
    TAG: ClassVar[int] = 0x23
    kind: Literal["staking_force_new_era"] = Field("staking_force_new_era", repr=False)


class GovernanceSetApprovalPpmRequired(TaggedVariant):
    """Set the approval threshold, in parts per million."""
    TAG: ClassVar[int] = 0x30
    kind: Literal["governance_set_approval_ppm_required"] = Field(
        "governance_set_approval_ppm_required", repr=False
    )
    ppm: U32Int

    def write_fields(self, writer: BinaryWriter) -> None:
        writer.u32le(self.ppm)

    @classmethod
    def read_fields(cls, reader: BinaryReader) -> Optional[GovernanceSetApprovalPpmRequired]:
        ppm = U32.decode_from(reader)
        if ppm is None:
            return None
        return cls(ppm=ppm)


PROPOSAL_VARIANTS = build_registry([
    SystemSetCode,
    SessionSetLength,
    SessionForceNewSession,
    StakingSetSessionsPerEra,
    StakingSetBondingDuration,
    StakingSetValidatorCount,
    StakingForceNewEra,
    GovernanceSetApprovalPpmRequired,
])

Proposal = Annotated[
    Union[
        SystemSetCode,
        SessionSetLength,
        SessionForceNewSession,
        StakingSetSessionsPerEra,
        StakingSetBondingDuration,
        StakingSetValidatorCount,
        StakingForceNewEra,
        GovernanceSetApprovalPpmRequired,
    ],
    Field(discriminator="kind"),
]


def decode_proposal(reader: BinaryReader) -> Optional[TaggedVariant]:
    """Decode any proposal variant from the front of ``reader``."""
    return decode_variant(PROPOSAL_VARIANTS, reader)
