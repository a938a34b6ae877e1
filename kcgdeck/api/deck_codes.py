"""
Deck code API endpoints.

Export a deck list to a shareable code, import a pasted code back into a
deck, and check a code without resolving its cards.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, StringConstraints

from kcgdeck.codec.kcg import DecodeError
from kcgdeck.codec.validation import CodeFormat, ValidationError
from kcgdeck.models.deck import (
    DeckCard,
    InvalidDeck,
    calculate_deck_state,
    calculate_total_cards,
)
from kcgdeck.models.failure import FailureKind, InvalidDeckCodeError, KnownError
from kcgdeck.models.result import Err, Ok
from kcgdeck.services.card_catalog import CardCatalog, get_card_catalog
from kcgdeck.services.deck_code import (
    DeckCodeError,
    check_deck_code,
    export_deck_code,
    import_deck_code,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/deck-codes", tags=["deck-codes"])


class DeckCardRequest(BaseModel):
    """A card and how many copies of it the deck holds."""

    id: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    # Zero is accepted here and reported as a deck rule violation
    count: int = Field(default=1, ge=0)


class ExportRequest(BaseModel):
    """Request model for exporting a deck."""

    cards: list[DeckCardRequest] = Field(default_factory=list)
    format: CodeFormat = CodeFormat.KCG


class ExportResponse(BaseModel):
    """Response model for an exported deck code."""

    code: str
    format: CodeFormat
    total_cards: int


class CodeRequest(BaseModel):
    """Request model carrying a pasted deck code."""

    code: str


class ImportedCardResponse(BaseModel):
    id: str
    name: str
    count: int


class ImportResponse(BaseModel):
    """Response model for an imported deck."""

    format: CodeFormat
    cards: list[ImportedCardResponse]
    not_found: list[str] = Field(default_factory=list)
    total_cards: int


class ValidateResponse(BaseModel):
    """Response model for a deck code check."""

    valid: bool
    format: CodeFormat | None = None
    reason: str | None = None


def deck_code_failure(error: DeckCodeError) -> KnownError:
    """Classify a validation or decode failure for the API."""
    if isinstance(error, ValidationError):
        return KnownError(
            kind=FailureKind.INVALID_INPUT,
            message=error.message,
            detail=str(error),
            suggestion="Paste a KCG- code or card ids separated by '/'.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return InvalidDeckCodeError(
        kind=FailureKind.INVALID_DECK_CODE,
        message="The deck code could not be read.",
        detail=str(error),
    )


def _merge_requested_cards(cards: list[DeckCardRequest]) -> dict[str, int]:
    # Repeated ids add up, first occurrence keeps its place
    merged: dict[str, int] = {}
    for item in cards:
        merged[item.id] = merged.get(item.id, 0) + item.count
    return merged


@router.post("/export", response_model=ExportResponse)
async def export_code(
    request: ExportRequest,
    catalog: Annotated[CardCatalog, Depends(get_card_catalog)],
) -> ExportResponse:
    """
    Encode a deck list as a deck code.

    Cards are resolved against the catalog and the deck rules are checked
    before encoding. The code does not depend on the order of ``cards``.
    """
    requested = _merge_requested_cards(request.cards)

    missing = [card_id for card_id in requested if card_id not in catalog]
    if missing:
        raise KnownError(
            kind=FailureKind.NOT_FOUND,
            message="Some cards are not in the card list.",
            detail=", ".join(missing),
            suggestion="Check the card ids and try again.",
            status_code=status.HTTP_404_NOT_FOUND,
        )

    deck_cards: list[DeckCard] = []
    for card_id, count in requested.items():
        card = catalog.find(card_id)
        if card is not None:
            deck_cards.append(DeckCard(card=card, count=count))

    state = calculate_deck_state(deck_cards)
    if isinstance(state, InvalidDeck):
        raise KnownError(
            kind=FailureKind.DECK_RULE_VIOLATION,
            message="The deck breaks the deck building rules.",
            detail="; ".join(state.errors),
            suggestion="Fix the card counts and export again.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    match export_deck_code(deck_cards, request.format):
        case Ok(code):
            return ExportResponse(
                code=code,
                format=request.format,
                total_cards=calculate_total_cards(deck_cards),
            )
        case Err(error):
            raise KnownError(
                kind=FailureKind.UNREPRESENTABLE_CARD,
                message="A card in the deck cannot be written into a KCG code.",
                detail=str(error),
                suggestion="Export the deck in slash format instead.",
                status_code=status.HTTP_400_BAD_REQUEST,
            )


@router.post("/import", response_model=ImportResponse)
async def import_code(
    request: CodeRequest,
    catalog: Annotated[CardCatalog, Depends(get_card_catalog)],
) -> ImportResponse:
    """
    Rebuild a deck from a pasted code.

    Ids missing from the catalog are listed in ``not_found``; the import
    only fails when no card at all could be resolved.
    """
    result = import_deck_code(request.code, catalog)
    if isinstance(result, Err):
        raise deck_code_failure(result.error)

    deck = result.value
    if deck.is_empty:
        raise KnownError(
            kind=FailureKind.EMPTY_RESULT,
            message="No cards in the deck code were found in the card list.",
            detail=", ".join(deck.not_found) or None,
            suggestion="The code may be from a newer card list.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    return ImportResponse(
        format=deck.format,
        cards=[
            ImportedCardResponse(id=item.card.id, name=item.card.name, count=item.count)
            for item in deck.cards
        ],
        not_found=deck.not_found,
        total_cards=deck.total_cards,
    )


@router.post("/validate", response_model=ValidateResponse)
async def validate_code(request: CodeRequest) -> ValidateResponse:
    """
    Check a pasted code without resolving its cards.

    Always returns 200; ``valid`` says whether the code would import.
    """
    match check_deck_code(request.code):
        case Ok(validated):
            return ValidateResponse(valid=True, format=validated.format)
        case Err(DecodeError() as error):
            return ValidateResponse(valid=False, format=CodeFormat.KCG, reason=str(error))
        case Err(error):
            logger.debug("Deck code failed validation: %s", error)
            return ValidateResponse(valid=False, reason=str(error))


