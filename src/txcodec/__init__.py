"""
txcodec - ledger transaction codec

Deterministic, self-delimiting binary encoding for transaction records and
their signed wrappers. The bytes produced here are what gets stored, hashed
and signed, so every encoder is bit-exact.
"""

from .codec import (
    BinaryReader,
    BinaryWriter,
    Slicable,
    TaggedVariant,
    U8,
    U32,
    U64,
    encode_list,
    decode_list,
    decode_list_all,
)
from .function import (
    Function,
    TimestampSet,
    SessionSetKey,
    StakingStake,
    StakingUnstake,
    StakingTransfer,
    GovernancePropose,
    GovernanceApprove,
    decode_function,
)
from .options import CodecOptions, DEFAULT_OPTIONS
from .primitives import AccountId, SessionKey, Signature, TxOrder
from .proposal import (
    Proposal,
    SystemSetCode,
    SessionSetLength,
    SessionForceNewSession,
    StakingSetSessionsPerEra,
    StakingSetBondingDuration,
    StakingSetValidatorCount,
    StakingForceNewEra,
    GovernanceSetApprovalPpmRequired,
    decode_proposal,
)
from .runtime.errors import TxCodecError, EncodingError, DecodeError, EncodeError, ErrorCode
from .transaction import Transaction, UncheckedTransaction

__version__ = "0.1.0"
__all__ = [
    # Records
    "Transaction",
    "UncheckedTransaction",

    # Field types
    "AccountId",
    "SessionKey",
    "Signature",
    "TxOrder",

    # Functions
    "Function",
    "TimestampSet",
    "SessionSetKey",
    "StakingStake",
    "StakingUnstake",
    "StakingTransfer",
    "GovernancePropose",
    "GovernanceApprove",
    "decode_function",

    # Proposals
    "Proposal",
    "SystemSetCode",
    "SessionSetLength",
    "SessionForceNewSession",
    "StakingSetSessionsPerEra",
    "StakingSetBondingDuration",
    "StakingSetValidatorCount",
    "StakingForceNewEra",
    "GovernanceSetApprovalPpmRequired",
    "decode_proposal",

    # Codec
    "BinaryReader",
    "BinaryWriter",
    "Slicable",
    "TaggedVariant",
    "U8",
    "U32",
    "U64",
    "encode_list",
    "decode_list",
    "decode_list_all",

    # Options and errors
    "CodecOptions",
    "DEFAULT_OPTIONS",
    "TxCodecError",
    "EncodingError",
    "DecodeError",
    "EncodeError",
    "ErrorCode",
]
