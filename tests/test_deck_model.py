"""Tests for deck operations and deck state."""

from kcgdeck.config import MAX_CARD_COPIES, MAX_DECK_SIZE
from kcgdeck.models.card import Card, CardKind
from kcgdeck.models.deck import (
    AddCard,
    CardNotFound,
    ClearDeck,
    DeckCard,
    DeckSizeExceeded,
    DecrementCount,
    EmptyDeck,
    IncrementCount,
    InvalidCardCount,
    InvalidDeck,
    MaxCountExceeded,
    RemoveCard,
    SetCount,
    ValidDeck,
    calculate_deck_state,
    calculate_total_cards,
    create_deck_card,
    execute_deck_operation,
    flatten_card_ids,
    tally_card_ids,
)
from kcgdeck.models.result import Err, Ok


def make_card(card_id: str, kind: CardKind = CardKind.ARTIST) -> Card:
    return Card(id=card_id, name=f"Card {card_id}", kind=kind)


def full_deck() -> list[DeckCard]:
    """A legal deck holding exactly MAX_DECK_SIZE cards."""
    return [DeckCard(card=make_card(f"AA-{i}"), count=MAX_CARD_COPIES) for i in range(15)]


class TestCreateDeckCard:
    def test_valid_count(self) -> None:
        card = make_card("AA-1")
        assert create_deck_card(card, 2) == Ok(DeckCard(card=card, count=2))

    def test_zero_is_invalid(self) -> None:
        assert create_deck_card(make_card("AA-1"), 0) == Err(InvalidCardCount("AA-1", 0))

    def test_above_limit(self) -> None:
        result = create_deck_card(make_card("AA-1"), MAX_CARD_COPIES + 1)
        assert result == Err(MaxCountExceeded("AA-1", MAX_CARD_COPIES))


class TestAddCard:
    def test_new_card_is_appended(self) -> None:
        first = DeckCard(card=make_card("AS-1"), count=2)
        card = make_card("AA-1")

        result = execute_deck_operation([first], AddCard(card))

        assert result == Ok([first, DeckCard(card=card, count=1)])

    def test_existing_card_is_incremented_in_place(self) -> None:
        card = make_card("AA-1")
        other = DeckCard(card=make_card("AS-1"), count=1)
        deck = [DeckCard(card=card, count=1), other]

        result = execute_deck_operation(deck, AddCard(card))

        assert result == Ok([DeckCard(card=card, count=2), other])

    def test_input_is_not_modified(self) -> None:
        card = make_card("AA-1")
        deck = [DeckCard(card=card, count=1)]

        execute_deck_operation(deck, AddCard(card))

        assert deck == [DeckCard(card=card, count=1)]

    def test_copy_limit(self) -> None:
        card = make_card("AA-1")
        deck = [DeckCard(card=card, count=MAX_CARD_COPIES)]

        result = execute_deck_operation(deck, AddCard(card))

        assert result == Err(MaxCountExceeded("AA-1", MAX_CARD_COPIES))

    def test_full_deck(self) -> None:
        result = execute_deck_operation(full_deck(), AddCard(make_card("AS-1")))

        assert result == Err(DeckSizeExceeded(MAX_DECK_SIZE + 1, MAX_DECK_SIZE))


class TestSetCount:
    def test_sets_count(self) -> None:
        card = make_card("AA-1")
        result = execute_deck_operation([DeckCard(card=card, count=1)], SetCount("AA-1", 3))

        assert result == Ok([DeckCard(card=card, count=3)])

    def test_zero_removes(self) -> None:
        deck = [DeckCard(card=make_card("AA-1"), count=2)]

        assert execute_deck_operation(deck, SetCount("AA-1", 0)) == Ok([])

    def test_negative_is_invalid(self) -> None:
        deck = [DeckCard(card=make_card("AA-1"), count=2)]

        assert execute_deck_operation(deck, SetCount("AA-1", -1)) == Err(
            InvalidCardCount("AA-1", -1)
        )

    def test_above_copy_limit(self) -> None:
        deck = [DeckCard(card=make_card("AA-1"), count=2)]

        assert execute_deck_operation(deck, SetCount("AA-1", 5)) == Err(
            MaxCountExceeded("AA-1", MAX_CARD_COPIES)
        )

    def test_missing_card(self) -> None:
        assert execute_deck_operation([], SetCount("AA-1", 1)) == Err(CardNotFound("AA-1"))

    def test_total_above_deck_size(self) -> None:
        deck = full_deck()[:-1] + [DeckCard(card=make_card("AS-1"), count=3)]

        result = execute_deck_operation(deck, SetCount("AS-1", 4))

        assert result == Ok(deck[:-1] + [DeckCard(card=deck[-1].card, count=4)])

        deck.append(DeckCard(card=make_card("AS-2"), count=1))
        result = execute_deck_operation(deck, SetCount("AS-1", 4))

        assert result == Err(DeckSizeExceeded(MAX_DECK_SIZE + 1, MAX_DECK_SIZE))


class TestOtherOperations:
    def test_remove(self) -> None:
        keep = DeckCard(card=make_card("AS-1"), count=1)
        deck = [DeckCard(card=make_card("AA-1"), count=2), keep]

        assert execute_deck_operation(deck, RemoveCard("AA-1")) == Ok([keep])

    def test_remove_missing(self) -> None:
        assert execute_deck_operation([], RemoveCard("AA-1")) == Err(CardNotFound("AA-1"))

    def test_increment_and_decrement(self) -> None:
        card = make_card("AA-1")
        deck = [DeckCard(card=card, count=2)]

        assert execute_deck_operation(deck, IncrementCount("AA-1")) == Ok(
            [DeckCard(card=card, count=3)]
        )
        assert execute_deck_operation(deck, DecrementCount("AA-1")) == Ok(
            [DeckCard(card=card, count=1)]
        )

    def test_decrement_last_copy_removes(self) -> None:
        deck = [DeckCard(card=make_card("AA-1"), count=1)]

        assert execute_deck_operation(deck, DecrementCount("AA-1")) == Ok([])

    def test_increment_missing(self) -> None:
        assert execute_deck_operation([], IncrementCount("AA-1")) == Err(CardNotFound("AA-1"))

    def test_clear(self) -> None:
        assert execute_deck_operation(full_deck(), ClearDeck()) == Ok([])


class TestDeckState:
    def test_empty(self) -> None:
        assert calculate_deck_state([]) == EmptyDeck()

    def test_valid(self) -> None:
        deck = full_deck()
        state = calculate_deck_state(deck)

        assert state == ValidDeck(cards=tuple(deck), total_count=MAX_DECK_SIZE)

    def test_invalid_lists_every_problem(self) -> None:
        deck = full_deck() + [
            DeckCard(card=make_card("AS-1"), count=0),
            DeckCard(card=make_card("AS-2"), count=5),
        ]

        state = calculate_deck_state(deck)

        assert isinstance(state, InvalidDeck)
        assert state.total_count == MAX_DECK_SIZE + 5
        assert len(state.errors) == 3


class TestFlattenAndTally:
    def test_flatten(self) -> None:
        deck = [
            DeckCard(card=make_card("AA-1"), count=2),
            DeckCard(card=make_card("AS-1"), count=1),
        ]

        assert flatten_card_ids(deck) == ["AA-1", "AA-1", "AS-1"]
        assert calculate_total_cards(deck) == 3

    def test_tally(self) -> None:
        assert tally_card_ids(["AS-1", " AA-1", "", "AS-1 "]) == {"AS-1": 2, "AA-1": 1}
