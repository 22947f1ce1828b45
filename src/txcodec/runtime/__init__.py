"""Runtime helpers for txcodec"""

from .errors import TxCodecError, EncodingError, DecodeError, EncodeError, ErrorCode

__all__ = [
    "TxCodecError",
    "EncodingError",
    "DecodeError",
    "EncodeError",
    "ErrorCode",
]
