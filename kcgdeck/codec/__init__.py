"""
Deck code encodings.

Pure functions only: nothing here touches storage, the network or
global state.
"""

from kcgdeck.codec.kcg import (
    KCG_PREFIX,
    DecodeError,
    DecodeErrorReason,
    EncodeError,
    decode_kcg_code,
    encode_kcg_code,
)
from kcgdeck.codec.slash import decode_slash_code, encode_slash_code
from kcgdeck.codec.validation import (
    CodeFormat,
    ValidatedCode,
    ValidationError,
    ValidationErrorReason,
    detect_code_format,
    validate_deck_code,
)

__all__ = [
    "KCG_PREFIX",
    "CodeFormat",
    "DecodeError",
    "DecodeErrorReason",
    "EncodeError",
    "ValidatedCode",
    "ValidationError",
    "ValidationErrorReason",
    "decode_kcg_code",
    "decode_slash_code",
    "detect_code_format",
    "encode_kcg_code",
    "encode_slash_code",
    "validate_deck_code",
]
