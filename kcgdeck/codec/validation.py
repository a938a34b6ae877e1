"""
Pre-decode checks for pasted deck codes.

Rules run in a fixed order and the first failure wins:
    1. blank input                         -> empty-code
    2. longer than MAX_DECK_CODE_LENGTH    -> too-long
    3. "//", or leading/trailing "/"       -> malformed-format
    4. slash form token not like "AA-12"   -> invalid-token: <token>

Input that passes is trimmed and tagged with its format; only then is it
handed to a decoder.
"""

import re
from dataclasses import dataclass
from enum import Enum

from kcgdeck.codec.kcg import KCG_PREFIX
from kcgdeck.codec.slash import DELIMITER
from kcgdeck.config import MAX_DECK_CODE_LENGTH
from kcgdeck.models.result import Err, Ok, Result

SLASH_CARD_ID_PATTERN = re.compile(r"^[A-Z]{2}-\d+$", re.ASCII)


class CodeFormat(str, Enum):
    """Deck code encodings."""

    KCG = "kcg"
    SLASH = "slash"


class ValidationErrorReason(str, Enum):
    EMPTY_CODE = "empty-code"
    TOO_LONG = "too-long"
    MALFORMED_FORMAT = "malformed-format"
    INVALID_TOKEN = "invalid-token"


_MESSAGES: dict[ValidationErrorReason, str] = {
    ValidationErrorReason.EMPTY_CODE: "The deck code is empty.",
    ValidationErrorReason.TOO_LONG: (
        f"The deck code is too long (maximum {MAX_DECK_CODE_LENGTH} characters)."
    ),
    ValidationErrorReason.MALFORMED_FORMAT: "The deck code format is invalid.",
    ValidationErrorReason.INVALID_TOKEN: "The deck code contains an invalid card id.",
}


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    Why pasted text was rejected before decoding.

    Attributes:
        reason: Which rule failed
        token: The offending token, for invalid-token only
    """

    reason: ValidationErrorReason
    token: str | None = None

    @property
    def message(self) -> str:
        """User-facing explanation."""
        if self.token is not None:
            return f"{_MESSAGES[self.reason]} ({self.token})"
        return _MESSAGES[self.reason]

    def __str__(self) -> str:
        if self.reason is ValidationErrorReason.INVALID_TOKEN:
            return f"{self.reason.value}: {self.token}"
        return self.reason.value


@dataclass(frozen=True, slots=True)
class ValidatedCode:
    """Trimmed code that passed validation, with its detected format."""

    code: str
    format: CodeFormat


def detect_code_format(code: str) -> CodeFormat:
    """Packed codes carry the KCG- prefix; anything else is slash form."""
    if code.strip().startswith(KCG_PREFIX):
        return CodeFormat.KCG
    return CodeFormat.SLASH


def validate_deck_code(text: str) -> Result[ValidatedCode, ValidationError]:
    """Run the import checks on raw pasted text."""
    code = text.strip() if text else ""

    if not code:
        return Err(ValidationError(ValidationErrorReason.EMPTY_CODE))

    if len(code) > MAX_DECK_CODE_LENGTH:
        return Err(ValidationError(ValidationErrorReason.TOO_LONG))

    if DELIMITER * 2 in code or code.startswith(DELIMITER) or code.endswith(DELIMITER):
        return Err(ValidationError(ValidationErrorReason.MALFORMED_FORMAT))

    code_format = detect_code_format(code)
    if code_format is CodeFormat.SLASH:
        for token in code.split(DELIMITER):
            if not SLASH_CARD_ID_PATTERN.match(token.strip()):
                return Err(ValidationError(ValidationErrorReason.INVALID_TOKEN, token=token))

    return Ok(ValidatedCode(code=code, format=code_format))
