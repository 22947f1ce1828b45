"""
Shared fixtures for txcodec tests.

Provides the reference signed transaction plus one instance of every function
and proposal variant so parametrised tests cover the whole union.
"""

import pytest

from txcodec import (
    AccountId,
    GovernanceApprove,
    GovernancePropose,
    GovernanceSetApprovalPpmRequired,
    SessionForceNewSession,
    SessionKey,
    SessionSetKey,
    SessionSetLength,
    Signature,
    StakingForceNewEra,
    StakingSetBondingDuration,
    StakingSetSessionsPerEra,
    StakingSetValidatorCount,
    StakingStake,
    StakingTransfer,
    StakingUnstake,
    SystemSetCode,
    TimestampSet,
    Transaction,
    UncheckedTransaction,
)


ALL_PROPOSALS = [
    SystemSetCode(code=b"\x00asm\x01\x00\x00\x00"),
    SystemSetCode(code=b""),
    SessionSetLength(length=10),
    SessionForceNewSession(),
    StakingSetSessionsPerEra(sessions=6),
    StakingSetBondingDuration(duration=2**64 - 1),
    StakingSetValidatorCount(count=21),
    StakingForceNewEra(),
    GovernanceSetApprovalPpmRequired(ppm=667_000),
]

ALL_FUNCTIONS = [
    TimestampSet(timestamp=135135),
    SessionSetKey(key=SessionKey(bytes(range(32)))),
    StakingStake(),
    StakingUnstake(),
    StakingTransfer(dest=AccountId(bytes([2] * 32)), value=69),
    GovernanceApprove(era_index=7),
] + [GovernancePropose(proposal=p) for p in ALL_PROPOSALS]


def _variant_id(value):
    return repr(value)[:60]


@pytest.fixture
def signer():
    """Signer of the reference transaction: 32 bytes of 1."""
    return AccountId(bytes([1] * 32))


@pytest.fixture
def sample_transaction(signer):
    """Reference unsigned transaction."""
    return Transaction(signed=signer, nonce=999, function=TimestampSet(timestamp=135135))


@pytest.fixture
def sample_unchecked(sample_transaction):
    """Reference signed transaction with an all-zero signature."""
    return UncheckedTransaction(transaction=sample_transaction, signature=Signature(bytes(64)))


@pytest.fixture
def sample_unchecked_bytes():
    """Expected encoding of ``sample_unchecked``."""
    return (
        bytes([1] * 32)
        + bytes.fromhex("e703000000000000")
        + b"\x00"
        + bytes.fromhex("df0f020000000000")
        + bytes(64)
    )


@pytest.fixture(params=ALL_FUNCTIONS, ids=_variant_id)
def any_function(request):
    """Each function variant in turn."""
    return request.param


@pytest.fixture(params=ALL_PROPOSALS, ids=_variant_id)
def any_proposal(request):
    """Each proposal variant in turn."""
    return request.param
