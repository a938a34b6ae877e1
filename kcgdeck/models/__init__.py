from kcgdeck.models.card import CARD_KINDS, CARD_TYPES, Card, CardKind, CardLookup, CardType
from kcgdeck.models.deck import (
    AddCard,
    CardNotFound,
    ClearDeck,
    DecrementCount,
    DeckCard,
    DeckOperation,
    DeckOperationError,
    DeckSizeExceeded,
    DeckState,
    EmptyDeck,
    IncrementCount,
    InvalidCardCount,
    InvalidDeck,
    MaxCountExceeded,
    RemoveCard,
    ResolvedCards,
    SetCount,
    ValidDeck,
    calculate_deck_state,
    calculate_total_cards,
    execute_deck_operation,
    flatten_card_ids,
    resolve_card_ids,
    tally_card_ids,
)
from kcgdeck.models.failure import (
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    ApiResponse,
    FailureDetail,
    FailureKind,
    InvalidDeckCodeError,
    KnownError,
    OutcomeType,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)
from kcgdeck.models.result import Err, Ok, Result
from kcgdeck.models.saved_deck import SavedDeck
from kcgdeck.models.sorting import compare_cards, compare_natural, sort_cards, sort_deck_cards

__all__ = [
    "CARD_KINDS",
    "CARD_TYPES",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "AddCard",
    "ApiResponse",
    "Card",
    "CardKind",
    "CardLookup",
    "CardNotFound",
    "CardType",
    "ClearDeck",
    "DeckCard",
    "DeckOperation",
    "DeckOperationError",
    "DeckSizeExceeded",
    "DeckState",
    "DecrementCount",
    "EmptyDeck",
    "Err",
    "FailureDetail",
    "FailureKind",
    "IncrementCount",
    "InvalidCardCount",
    "InvalidDeck",
    "InvalidDeckCodeError",
    "KnownError",
    "MaxCountExceeded",
    "Ok",
    "OutcomeType",
    "RemoveCard",
    "ResolvedCards",
    "Result",
    "SavedDeck",
    "SetCount",
    "ValidDeck",
    "calculate_deck_state",
    "calculate_total_cards",
    "compare_cards",
    "compare_natural",
    "create_unknown_failure",
    "execute_deck_operation",
    "finalize_response",
    "flatten_card_ids",
    "is_finalized",
    "resolve_card_ids",
    "sort_cards",
    "sort_deck_cards",
    "tally_card_ids",
]
