"""
Deck code import/export.

Export: sort the deck, flatten it to one id per copy, encode.
Import: validate the pasted text, decode it, resolve ids against the
catalog.

Structural problems (validation, decode) are returned as errors. Ids the
catalog does not know are NOT errors: they are listed in
``DeckImport.not_found`` and the caller decides whether a partial deck is
acceptable.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from kcgdeck.codec.kcg import DecodeError, EncodeError, decode_kcg_code, encode_kcg_code
from kcgdeck.codec.slash import decode_slash_code, encode_slash_code
from kcgdeck.codec.validation import (
    CodeFormat,
    ValidatedCode,
    ValidationError,
    validate_deck_code,
)
from kcgdeck.models.card import CardLookup
from kcgdeck.models.deck import (
    DeckCard,
    ResolvedCards,
    calculate_total_cards,
    flatten_card_ids,
    resolve_card_ids,
)
from kcgdeck.models.result import Err, Ok, Result
from kcgdeck.models.sorting import sort_deck_cards

logger = logging.getLogger(__name__)

DeckCodeError = ValidationError | DecodeError


@dataclass
class DeckImport:
    """A deck rebuilt from a code."""

    format: CodeFormat
    cards: list[DeckCard] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)

    @property
    def total_cards(self) -> int:
        return calculate_total_cards(self.cards)

    @property
    def is_partial(self) -> bool:
        """Some ids in the code were not in the catalog."""
        return bool(self.not_found)

    @property
    def is_empty(self) -> bool:
        return not self.cards


def export_deck_code(
    deck_cards: Sequence[DeckCard],
    code_format: CodeFormat = CodeFormat.KCG,
) -> Result[str, EncodeError]:
    """
    Encode a deck as a shareable code.

    The deck is put in standard order first, so the same cards always give
    the same code.
    """
    sorted_cards = sort_deck_cards(deck_cards)
    logger.debug(
        "Exporting %s code for %s",
        code_format.value,
        [f"{item.card.id} x{item.count}" for item in sorted_cards],
    )

    if code_format is CodeFormat.SLASH:
        return Ok(encode_slash_code(sorted_cards))

    result = encode_kcg_code(flatten_card_ids(sorted_cards))
    match result:
        case Ok(code):
            logger.debug("Generated deck code: %s", code)
        case Err(error):
            logger.warning("Deck code generation failed: %s", error)
    return result


def _resolve_kcg(code: str, catalog: CardLookup) -> Result[ResolvedCards, DecodeError]:
    match decode_kcg_code(code):
        case Err(error):
            return Err(error)
        case Ok(card_ids):
            logger.debug("Decoded %d card ids from KCG code", len(card_ids))
            resolved = resolve_card_ids(card_ids, catalog)
            if resolved.not_found:
                logger.warning("Card ids not found in catalog: %s", resolved.not_found)
            return Ok(resolved)


def import_deck_code(text: str, catalog: CardLookup) -> Result[DeckImport, DeckCodeError]:
    """
    Rebuild a deck from pasted text.

    Args:
        text: Raw user input; surrounding whitespace is ignored
        catalog: Card lookup used to resolve ids

    Returns:
        Ok with the imported deck (possibly partial or empty), or Err with
        the validation or decode failure.
    """
    validation = validate_deck_code(text)
    if isinstance(validation, Err):
        logger.warning("Deck code rejected: %s", validation.error)
        return validation
    validated = validation.value

    logger.debug("Detected deck code format: %s", validated.format.value)

    if validated.format is CodeFormat.KCG:
        decoded = _resolve_kcg(validated.code, catalog)
        if isinstance(decoded, Err):
            logger.warning("KCG deck code could not be decoded: %s", decoded.error)
            return decoded
        resolved = decoded.value
    else:
        resolved = decode_slash_code(validated.code, catalog)

    deck = DeckImport(
        format=validated.format,
        cards=resolved.cards,
        not_found=resolved.not_found,
    )
    logger.info(
        "Imported %s deck code (%d unique cards, %d missing)",
        deck.format.value,
        len(deck.cards),
        len(deck.not_found),
    )
    return Ok(deck)


def check_deck_code(text: str) -> Result[ValidatedCode, DeckCodeError]:
    """
    Validate pasted text and, for KCG codes, check that the body decodes.

    Does not consult the catalog, so a code that passes may still name
    unknown cards.
    """
    validation = validate_deck_code(text)
    if isinstance(validation, Err):
        return validation

    if validation.value.format is CodeFormat.KCG:
        decoded = decode_kcg_code(validation.value.code)
        if isinstance(decoded, Err):
            return decoded

    return validation
