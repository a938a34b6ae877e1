"""
Deck multiset model.

A deck is an ordered sequence of DeckCard entries with unique card ids.
Every mutation goes through one of the DeckOperation variants and returns
a new list; the input list is never modified. Entry order of surviving
cards is preserved.

Rules:
- Each count is between 1 and MAX_CARD_COPIES
- The total count never exceeds MAX_DECK_SIZE
- Setting a count to zero removes the card
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from kcgdeck.config import MAX_CARD_COPIES, MAX_DECK_SIZE
from kcgdeck.models.card import Card, CardLookup
from kcgdeck.models.result import Err, Ok, Result


@dataclass(frozen=True, slots=True)
class DeckCard:
    """A card in a deck with its copy count."""

    card: Card
    count: int


# =============================================================================
# OPERATIONS
# =============================================================================


@dataclass(frozen=True, slots=True)
class AddCard:
    card: Card


@dataclass(frozen=True, slots=True)
class RemoveCard:
    card_id: str


@dataclass(frozen=True, slots=True)
class IncrementCount:
    card_id: str


@dataclass(frozen=True, slots=True)
class DecrementCount:
    card_id: str


@dataclass(frozen=True, slots=True)
class SetCount:
    card_id: str
    count: int


@dataclass(frozen=True, slots=True)
class ClearDeck:
    pass


DeckOperation = AddCard | RemoveCard | IncrementCount | DecrementCount | SetCount | ClearDeck


# =============================================================================
# ERRORS
# =============================================================================


@dataclass(frozen=True, slots=True)
class CardNotFound:
    card_id: str

    def __str__(self) -> str:
        return f"Card '{self.card_id}' is not in the deck"


@dataclass(frozen=True, slots=True)
class MaxCountExceeded:
    card_id: str
    max_count: int

    def __str__(self) -> str:
        return f"Card '{self.card_id}' is limited to {self.max_count} copies"


@dataclass(frozen=True, slots=True)
class InvalidCardCount:
    card_id: str
    count: int

    def __str__(self) -> str:
        return f"Invalid count {self.count} for card '{self.card_id}'"


@dataclass(frozen=True, slots=True)
class DeckSizeExceeded:
    current_size: int
    max_size: int

    def __str__(self) -> str:
        return f"Deck would hold {self.current_size} cards (maximum {self.max_size})"


DeckOperationError = CardNotFound | MaxCountExceeded | InvalidCardCount | DeckSizeExceeded


# =============================================================================
# STATE
# =============================================================================


@dataclass(frozen=True, slots=True)
class EmptyDeck:
    pass


@dataclass(frozen=True, slots=True)
class ValidDeck:
    cards: tuple[DeckCard, ...]
    total_count: int


@dataclass(frozen=True, slots=True)
class InvalidDeck:
    cards: tuple[DeckCard, ...]
    total_count: int
    errors: tuple[str, ...] = field(default_factory=tuple)


DeckState = EmptyDeck | ValidDeck | InvalidDeck


# =============================================================================
# FUNCTIONS
# =============================================================================


def create_deck_card(card: Card, count: int) -> Result[DeckCard, DeckOperationError]:
    """Create a DeckCard, enforcing the per-card copy limit."""
    if count < 1:
        return Err(InvalidCardCount(card_id=card.id, count=count))
    if count > MAX_CARD_COPIES:
        return Err(MaxCountExceeded(card_id=card.id, max_count=MAX_CARD_COPIES))
    return Ok(DeckCard(card=card, count=count))


def calculate_total_cards(cards: Iterable[DeckCard]) -> int:
    """Total copies across all entries."""
    return sum(deck_card.count for deck_card in cards)


def calculate_deck_state(cards: Sequence[DeckCard]) -> DeckState:
    """
    Classify a deck as empty, valid or invalid.

    Invalid decks keep their cards and total so callers can still display
    them alongside the error list.
    """
    if not cards:
        return EmptyDeck()

    total_count = calculate_total_cards(cards)
    errors: list[str] = []

    for deck_card in cards:
        if deck_card.count < 1:
            errors.append(f"Card '{deck_card.card.name}' has an invalid count: {deck_card.count}")
        if deck_card.count > MAX_CARD_COPIES:
            errors.append(
                f"Card '{deck_card.card.name}' exceeds the copy limit: "
                f"{deck_card.count}/{MAX_CARD_COPIES}"
            )

    if total_count > MAX_DECK_SIZE:
        errors.append(f"Deck exceeds {MAX_DECK_SIZE} cards: {total_count}")

    if errors:
        return InvalidDeck(cards=tuple(cards), total_count=total_count, errors=tuple(errors))

    return ValidDeck(cards=tuple(cards), total_count=total_count)


def _find_index(cards: Sequence[DeckCard], card_id: str) -> int | None:
    for index, deck_card in enumerate(cards):
        if deck_card.card.id == card_id:
            return index
    return None


def add_card_to_deck(
    cards: Sequence[DeckCard], card: Card
) -> Result[list[DeckCard], DeckOperationError]:
    """Add one copy of a card, appending it if not yet in the deck."""
    total = calculate_total_cards(cards)
    if total >= MAX_DECK_SIZE:
        return Err(DeckSizeExceeded(current_size=total + 1, max_size=MAX_DECK_SIZE))

    index = _find_index(cards, card.id)
    if index is None:
        match create_deck_card(card, 1):
            case Ok(new_card):
                return Ok([*cards, new_card])
            case Err(error):
                return Err(error)

    existing = cards[index]
    if existing.count >= MAX_CARD_COPIES:
        return Err(MaxCountExceeded(card_id=card.id, max_count=MAX_CARD_COPIES))

    updated = list(cards)
    updated[index] = DeckCard(card=existing.card, count=existing.count + 1)
    return Ok(updated)


def set_card_count(
    cards: Sequence[DeckCard], card_id: str, count: int
) -> Result[list[DeckCard], DeckOperationError]:
    """Set the count of a card already in the deck. Zero removes it."""
    index = _find_index(cards, card_id)
    if index is None:
        return Err(CardNotFound(card_id=card_id))

    if count < 0:
        return Err(InvalidCardCount(card_id=card_id, count=count))

    if count == 0:
        return Ok([deck_card for i, deck_card in enumerate(cards) if i != index])

    if count > MAX_CARD_COPIES:
        return Err(MaxCountExceeded(card_id=card_id, max_count=MAX_CARD_COPIES))

    existing = cards[index]
    new_total = calculate_total_cards(cards) - existing.count + count
    if new_total > MAX_DECK_SIZE:
        return Err(DeckSizeExceeded(current_size=new_total, max_size=MAX_DECK_SIZE))

    updated = list(cards)
    updated[index] = DeckCard(card=existing.card, count=count)
    return Ok(updated)


def remove_card_from_deck(
    cards: Sequence[DeckCard], card_id: str
) -> Result[list[DeckCard], DeckOperationError]:
    """Remove every copy of a card."""
    if _find_index(cards, card_id) is None:
        return Err(CardNotFound(card_id=card_id))
    return Ok([deck_card for deck_card in cards if deck_card.card.id != card_id])


def increment_card_count(
    cards: Sequence[DeckCard], card_id: str
) -> Result[list[DeckCard], DeckOperationError]:
    index = _find_index(cards, card_id)
    current = cards[index].count if index is not None else 0
    return set_card_count(cards, card_id, current + 1)


def decrement_card_count(
    cards: Sequence[DeckCard], card_id: str
) -> Result[list[DeckCard], DeckOperationError]:
    index = _find_index(cards, card_id)
    current = cards[index].count if index is not None else 0
    return set_card_count(cards, card_id, current - 1)


def execute_deck_operation(
    cards: Sequence[DeckCard], operation: DeckOperation
) -> Result[list[DeckCard], DeckOperationError]:
    """Apply a single deck operation."""
    match operation:
        case AddCard(card=card):
            return add_card_to_deck(cards, card)
        case RemoveCard(card_id=card_id):
            return remove_card_from_deck(cards, card_id)
        case IncrementCount(card_id=card_id):
            return increment_card_count(cards, card_id)
        case DecrementCount(card_id=card_id):
            return decrement_card_count(cards, card_id)
        case SetCount(card_id=card_id, count=count):
            return set_card_count(cards, card_id, count)
        case ClearDeck():
            return Ok([])


def flatten_card_ids(cards: Iterable[DeckCard]) -> list[str]:
    """Expand a deck to one identifier per physical copy."""
    return [deck_card.card.id for deck_card in cards for _ in range(deck_card.count)]


def tally_card_ids(card_ids: Iterable[str]) -> dict[str, int]:
    """
    Count copies per identifier, in order of first occurrence.

    Identifiers are stripped; blank ones are ignored.
    """
    counts: dict[str, int] = {}
    for raw_id in card_ids:
        card_id = raw_id.strip()
        if card_id:
            counts[card_id] = counts.get(card_id, 0) + 1
    return counts


@dataclass
class ResolvedCards:
    """Deck entries resolved from a list of ids, plus the ids the catalog lacks."""

    cards: list[DeckCard] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)

    @property
    def total_cards(self) -> int:
        return calculate_total_cards(self.cards)


def resolve_card_ids(card_ids: Iterable[str], catalog: CardLookup) -> ResolvedCards:
    """
    Tally identifiers and look each distinct one up in the catalog.

    Missing ids are collected, not fatal: the result holds whatever could
    be resolved.
    """
    result = ResolvedCards()
    for card_id, count in tally_card_ids(card_ids).items():
        card = catalog.find(card_id)
        if card is None:
            result.not_found.append(card_id)
        else:
            result.cards.append(DeckCard(card=card, count=count))
    return result
