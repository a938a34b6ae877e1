"""
Slash-delimited deck code.

Format:
    <card_id>/<card_id>/...

One token per physical copy, so three copies of AA-1 are written
"AA-1/AA-1/AA-1". Decoding resolves ids against a catalog and tolerates
ids the catalog does not know: those are reported, not fatal.
"""

import logging
from collections.abc import Sequence

from kcgdeck.models.card import CardLookup
from kcgdeck.models.deck import DeckCard, ResolvedCards, flatten_card_ids, resolve_card_ids
from kcgdeck.models.sorting import sort_deck_cards

logger = logging.getLogger(__name__)

DELIMITER = "/"


def encode_slash_code(deck_cards: Sequence[DeckCard]) -> str:
    """Encode a deck in standard order, one token per copy."""
    return DELIMITER.join(flatten_card_ids(sort_deck_cards(deck_cards)))


def decode_slash_code(code: str, catalog: CardLookup) -> ResolvedCards:
    """
    Decode a slash code against a catalog.

    Blank tokens (leading, trailing or doubled slashes) are dropped.
    Cards appear in order of first occurrence in the code.
    """
    if not code or not code.strip():
        logger.debug("Slash code is empty")
        return ResolvedCards()

    tokens = code.split(DELIMITER)
    logger.debug("Split slash code into %d tokens", len(tokens))

    result = resolve_card_ids(tokens, catalog)

    logger.debug(
        "Resolved %d/%d card ids",
        len(result.cards),
        len(result.cards) + len(result.not_found),
    )
    if result.not_found:
        logger.warning("Card ids not found in catalog: %s", result.not_found)

    return result
