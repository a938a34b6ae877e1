"""
Packed "KCG-" deck code.

Format:
    KCG-<body>

The body is a run of tokens, one per physical card copy, in deck order.

Token grammar:
    The 64-character alphabet is split in two halves. The first 32
    characters (A-Z, a-f) are terminal digits; the last 32 (g-z, 0-9, ?, !)
    are continuation digits. A token is zero or more continuation digits
    followed by exactly one terminal digit, so token boundaries need no
    separator.

    Tokens are read in bijective base 32: a token of k digits encodes
    offset(k) + value(digits), where offset(k) counts all shorter tokens.
    Every token string is the spelling of exactly one index.

Identifier grammar:
    PREFIX-NUMBER, where PREFIX is two uppercase letters or "ex"/"prm"
    followed by one of A, S, M, D, and NUMBER is a decimal without leading
    zeros. The identifier index is NUMBER * len(PREFIXES) + position of
    PREFIX in the prefix table.

Both mappings are bijections, so decode followed by encode reproduces
any accepted code character for character.
"""

import re
import string
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from kcgdeck.models.result import Err, Ok, Result

KCG_PREFIX = "KCG-"

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "?!"
RADIX = 32
TERMINAL_DIGITS = ALPHABET[:RADIX]
CONTINUATION_DIGITS = ALPHABET[RADIX:]

# Longest token accepted, in characters
MAX_TOKEN_LENGTH = 8

_TERMINAL_VALUES = {char: value for value, char in enumerate(TERMINAL_DIGITS)}
_CONTINUATION_VALUES = {char: value for value, char in enumerate(CONTINUATION_DIGITS)}

_SERIES_CATEGORIES = "ASMD"


def _build_prefixes() -> tuple[str, ...]:
    series = [
        letter + category
        for letter in string.ascii_uppercase
        for category in _SERIES_CATEGORIES
    ]
    series += ["ex" + category for category in _SERIES_CATEGORIES]
    series += ["prm" + category for category in _SERIES_CATEGORIES]
    seen = set(series)
    others = [
        first + second
        for first in string.ascii_uppercase
        for second in string.ascii_uppercase
        if first + second not in seen
    ]
    return (*series, *others)


# Series prefixes first so the common ones get the shortest tokens
PREFIXES: tuple[str, ...] = _build_prefixes()
_PREFIX_POSITIONS = {prefix: position for position, prefix in enumerate(PREFIXES)}

CARD_ID_PATTERN = re.compile(r"^([A-Z]{2}|ex[ASMD]|prm[ASMD])-(0|[1-9][0-9]*)$")


class DecodeErrorReason(str, Enum):
    """Why a packed code could not be decoded."""

    BAD_PREFIX = "bad-prefix"
    MALFORMED_BODY = "malformed-body"


@dataclass(frozen=True, slots=True)
class DecodeError:
    """
    Structural decode failure.

    Attributes:
        reason: Failure classification
        message: Human-readable explanation
        position: Offset into the full code where decoding stopped, if known
    """

    reason: DecodeErrorReason
    message: str
    position: int | None = None

    def __str__(self) -> str:
        return f"{self.reason.value}: {self.message}"


@dataclass(frozen=True, slots=True)
class EncodeError:
    """An identifier that cannot be represented in a packed code."""

    card_id: str
    message: str

    def __str__(self) -> str:
        return self.message


def _offset(length: int) -> int:
    """Number of tokens shorter than ``length`` digits."""
    return (RADIX**length - RADIX) // (RADIX - 1)


MAX_INDEX = _offset(MAX_TOKEN_LENGTH + 1) - 1


def card_id_to_index(card_id: str) -> int | None:
    """Map an identifier to its index, or None if it is not representable."""
    match = CARD_ID_PATTERN.match(card_id)
    if match is None:
        return None
    prefix, number = match.groups()
    return int(number) * len(PREFIXES) + _PREFIX_POSITIONS[prefix]


def index_to_card_id(index: int) -> str:
    number, position = divmod(index, len(PREFIXES))
    return f"{PREFIXES[position]}-{number}"


def _encode_index(index: int) -> str:
    length = 1
    while index >= _offset(length + 1):
        length += 1

    remainder = index - _offset(length)
    digits: list[int] = []
    for _ in range(length):
        remainder, digit = divmod(remainder, RADIX)
        digits.append(digit)
    digits.reverse()

    leading = "".join(CONTINUATION_DIGITS[d] for d in digits[:-1])
    return leading + TERMINAL_DIGITS[digits[-1]]


def encode_kcg_code(card_ids: Sequence[str]) -> Result[str, EncodeError]:
    """
    Encode a flattened identifier sequence as a packed code.

    Args:
        card_ids: One identifier per card copy, already in deck order

    Returns:
        Ok with the code, or Err naming the first unrepresentable identifier.
        An empty sequence encodes to the bare prefix.
    """
    tokens: list[str] = []
    for card_id in card_ids:
        index = card_id_to_index(card_id)
        if index is None:
            return Err(
                EncodeError(
                    card_id=card_id,
                    message=f"Card id '{card_id}' cannot be represented in a KCG code",
                )
            )
        if index > MAX_INDEX:
            return Err(
                EncodeError(
                    card_id=card_id,
                    message=f"Card id '{card_id}' exceeds the longest KCG token",
                )
            )
        tokens.append(_encode_index(index))

    return Ok(KCG_PREFIX + "".join(tokens))


def decode_kcg_code(code: str) -> Result[list[str], DecodeError]:
    """
    Decode a packed code into its identifier sequence.

    Duplicates are kept: each occurrence is one copy. Identifiers are not
    checked against any catalog.
    """
    if not code.startswith(KCG_PREFIX):
        return Err(
            DecodeError(
                reason=DecodeErrorReason.BAD_PREFIX,
                message=f"Code must start with '{KCG_PREFIX}'",
                position=0,
            )
        )

    card_ids: list[str] = []
    value = 0
    length = 0
    token_start = len(KCG_PREFIX)

    for position in range(len(KCG_PREFIX), len(code)):
        char = code[position]

        if char in _CONTINUATION_VALUES:
            value = value * RADIX + _CONTINUATION_VALUES[char]
            length += 1
        elif char in _TERMINAL_VALUES:
            value = value * RADIX + _TERMINAL_VALUES[char]
            length += 1
        else:
            return Err(
                DecodeError(
                    reason=DecodeErrorReason.MALFORMED_BODY,
                    message=f"Unexpected character {char!r}",
                    position=position,
                )
            )

        if length > MAX_TOKEN_LENGTH:
            return Err(
                DecodeError(
                    reason=DecodeErrorReason.MALFORMED_BODY,
                    message=f"Token longer than {MAX_TOKEN_LENGTH} characters",
                    position=token_start,
                )
            )

        if char in _TERMINAL_VALUES:
            card_ids.append(index_to_card_id(_offset(length) + value))
            value = 0
            length = 0
            token_start = position + 1

    if length:
        return Err(
            DecodeError(
                reason=DecodeErrorReason.MALFORMED_BODY,
                message="Code ends in the middle of a card",
                position=token_start,
            )
        )

    return Ok(card_ids)
