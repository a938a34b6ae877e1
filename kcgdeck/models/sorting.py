"""
Standard card ordering.

Cards sort by kind, then by their earliest type tag, then by identifier
in natural order. Deck codes are always generated from this ordering so
that the same deck produces the same code regardless of the order cards
were added in.
"""

import re
from collections.abc import Iterable
from functools import cmp_to_key

from kcgdeck.models.card import CARD_KINDS, CARD_TYPES, Card, CardType
from kcgdeck.models.deck import DeckCard

_TOKEN_PATTERN = re.compile(r"\d+|\D+")


def _text_key(text: str) -> tuple[str, str]:
    # Case-insensitive first, lowercase before uppercase on ties
    return (text.casefold(), text.swapcase())


def _compare_text(a: str, b: str) -> int:
    key_a, key_b = _text_key(a), _text_key(b)
    return (key_a > key_b) - (key_a < key_b)


def compare_natural(a: str, b: str) -> int:
    """
    Numeric-aware string comparison.

    Digit runs compare by value. Other runs: a run starting with an
    uppercase ASCII letter sorts before one that does not, otherwise the
    runs compare case-insensitively. When all shared runs are equal, the
    string with fewer runs sorts first.
    """
    tokens_a = _TOKEN_PATTERN.findall(a)
    tokens_b = _TOKEN_PATTERN.findall(b)

    if not tokens_a or not tokens_b:
        return _compare_text(a, b)

    for token_a, token_b in zip(tokens_a, tokens_b):
        if token_a.isdecimal() and token_b.isdecimal():
            num_a, num_b = int(token_a), int(token_b)
            if num_a != num_b:
                return -1 if num_a < num_b else 1
            continue

        upper_a = "A" <= token_a[0] <= "Z"
        upper_b = "A" <= token_b[0] <= "Z"
        if upper_a != upper_b:
            return -1 if upper_a else 1
        if token_a != token_b:
            result = _compare_text(token_a, token_b)
            if result:
                return result
            return -1 if token_a < token_b else 1

    return len(tokens_a) - len(tokens_b)


def _earliest_type_index(types: Iterable[CardType]) -> int:
    return min((CARD_TYPES.index(t) for t in types), default=len(CARD_TYPES))


def compare_cards(a: Card, b: Card) -> int:
    """Standard card comparison: kind, then type, then id."""
    kind_diff = CARD_KINDS.index(a.kind) - CARD_KINDS.index(b.kind)
    if kind_diff:
        return kind_diff

    type_diff = _earliest_type_index(a.types) - _earliest_type_index(b.types)
    if type_diff:
        return type_diff

    return compare_natural(a.id, b.id)


def sort_cards(cards: Iterable[Card]) -> list[Card]:
    return sorted(cards, key=cmp_to_key(compare_cards))


def sort_deck_cards(deck_cards: Iterable[DeckCard]) -> list[DeckCard]:
    return sorted(deck_cards, key=cmp_to_key(lambda a, b: compare_cards(a.card, b.card)))
