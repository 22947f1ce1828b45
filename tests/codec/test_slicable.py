"""
Codec protocol tests: scoped byte access, whole-buffer decode helpers,
integer codecs and list encoding.
"""

import logging

import pytest

from txcodec import (
    AccountId,
    CodecOptions,
    DecodeError,
    ErrorCode,
    Signature,
    TimestampSet,
    Transaction,
    UncheckedTransaction,
)
from txcodec.codec import (
    BinaryReader,
    U8,
    U32,
    U64,
    decode_list,
    decode_list_all,
    encode_list,
)
from txcodec.runtime.errors import EncodeError


@pytest.mark.unit
class TestScopedByteAccess:
    """with_encoded hands out a temporary view of the encoding."""

    def test_view_matches_encoding(self, sample_unchecked):
        assert sample_unchecked.with_encoded(bytes) == sample_unchecked.encode()
        assert sample_unchecked.with_encoded(len) == sample_unchecked.encoded_size

    def test_view_is_read_only(self, sample_transaction):
        assert sample_transaction.with_encoded(lambda view: view.readonly)

    def test_view_released_after_action(self, sample_transaction):
        kept = sample_transaction.with_encoded(lambda view: view)
        with pytest.raises(ValueError):
            kept[0]

    def test_integer_codec_view(self):
        assert U64.with_encoded(999, bytes) == bytes.fromhex("e703000000000000")


@pytest.mark.unit
class TestFixedUint:
    """Integer codecs."""

    @pytest.mark.parametrize("codec,value,expected", [
        (U8, 0x7F, b"\x7f"),
        (U32, 1, b"\x01\x00\x00\x00"),
        (U64, 135135, bytes.fromhex("df0f020000000000")),
        (U64, 2**64 - 1, b"\xff" * 8),
    ])
    def test_encode(self, codec, value, expected):
        assert codec.encode(value) == expected
        assert codec.decode(expected) == value

    def test_decode_from_leaves_rest(self):
        reader = BinaryReader(b"\x01\x00\x00\x00\xff")
        assert U32.decode_from(reader) == 1
        assert reader.remaining == 1

    def test_truncated(self):
        assert U64.decode_from(BinaryReader(b"\x00" * 7)) is None
        with pytest.raises(DecodeError):
            U64.decode(b"\x00" * 7)

    def test_out_of_range(self):
        with pytest.raises(EncodeError):
            U32.encode(2**32)


@pytest.mark.unit
class TestWholeBufferDecode:
    """decode / try_decode on top of decode_from."""

    def test_trailing_bytes_rejected_by_default(self, sample_unchecked):
        data = sample_unchecked.encode() + b"\x00"
        with pytest.raises(DecodeError) as exc_info:
            UncheckedTransaction.decode(data)
        assert exc_info.value.code == ErrorCode.TRAILING_BYTES
        assert exc_info.value.details["remaining"] == 1

    def test_trailing_bytes_allowed_by_option(self, sample_unchecked):
        data = sample_unchecked.encode() + b"\xde\xad"
        decoded = UncheckedTransaction.decode(data, CodecOptions(allow_trailing=True))
        assert decoded == sample_unchecked

    def test_decode_from_leaves_trailing_bytes(self, sample_transaction):
        reader = BinaryReader(sample_transaction.encode() + b"\x42")
        assert Transaction.decode_from(reader) == sample_transaction
        assert reader.remaining == 1
        assert reader.u8() == 0x42

    def test_try_decode(self, sample_unchecked):
        data = sample_unchecked.encode()
        assert UncheckedTransaction.try_decode(data) == sample_unchecked
        assert UncheckedTransaction.try_decode(data[:-1]) is None
        assert UncheckedTransaction.try_decode(b"") is None

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="txcodec.codec.slicable"):
            with pytest.raises(DecodeError):
                Transaction.decode(b"\x01\x02")
        assert "Failed to decode Transaction" in caplog.text

    def test_error_details(self):
        with pytest.raises(DecodeError) as exc_info:
            AccountId.decode(b"\x01" * 31)
        err = exc_info.value
        assert err.code == ErrorCode.DECODE_ERROR
        assert err.details == {"type": "AccountId", "length": 31}
        assert str(err).startswith("[DECODE_ERROR] Cannot decode AccountId")


@pytest.mark.unit
class TestListCodec:
    """Count-prefixed sequences of records."""

    def _wrappers(self, signer):
        return [
            UncheckedTransaction(
                transaction=Transaction(signed=signer, nonce=n, function=TimestampSet(timestamp=n * 10)),
                signature=Signature(bytes([n]) * 64),
            )
            for n in range(3)
        ]

    def test_roundtrip(self, signer):
        items = self._wrappers(signer)
        data = encode_list(items)
        assert data[:4] == b"\x03\x00\x00\x00"
        assert decode_list_all(UncheckedTransaction, data) == items

    def test_empty(self):
        assert encode_list([]) == b"\x00\x00\x00\x00"
        assert decode_list(UncheckedTransaction, BinaryReader(b"\x00\x00\x00\x00")) == []

    def test_item_failure_fails_list(self, signer):
        data = encode_list(self._wrappers(signer))
        assert decode_list(UncheckedTransaction, BinaryReader(data[:-1])) is None

    def test_count_above_limit(self, signer):
        data = encode_list(self._wrappers(signer))
        options = CodecOptions(max_list_items=2)
        assert decode_list(UncheckedTransaction, BinaryReader(data), options) is None
        with pytest.raises(DecodeError):
            decode_list_all(UncheckedTransaction, data, options)

    def test_forged_count_fails_cleanly(self):
        assert decode_list(Transaction, BinaryReader(b"\xff\xff\xff\x00")) is None
