"""
Card list API endpoints.

Browse the card catalog with text, kind, type and tag filters.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from kcgdeck.models.card import Card, CardKind, CardType
from kcgdeck.models.filter import (
    FilterCondition,
    KindFilter,
    TagFilter,
    TextFilter,
    TypeFilter,
    combine_filters,
)
from kcgdeck.models.sorting import sort_cards
from kcgdeck.services.card_catalog import CardCatalog, get_card_catalog

router = APIRouter(prefix="/cards", tags=["cards"])


class CardResponse(BaseModel):
    """Response model for a single card."""

    id: str
    name: str
    kind: CardKind
    types: list[CardType] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    effect: str | None = None


class CardListResponse(BaseModel):
    """Response model for a filtered card list."""

    cards: list[CardResponse]
    total_count: int
    filtered_count: int


def _to_response(card: Card) -> CardResponse:
    return CardResponse(
        id=card.id,
        name=card.name,
        kind=card.kind,
        types=list(card.types),
        tags=list(card.tags),
        effect=card.effect,
    )


@router.get("", response_model=CardListResponse)
async def list_cards(
    catalog: Annotated[CardCatalog, Depends(get_card_catalog)],
    text: str = "",
    kind: Annotated[list[CardKind] | None, Query()] = None,
    card_type: Annotated[list[CardType] | None, Query(alias="type")] = None,
    tag: Annotated[list[str] | None, Query()] = None,
) -> CardListResponse:
    """
    List cards in standard order.

    Repeated query parameters match any of their values; different
    parameters must all match.
    """
    conditions: list[FilterCondition] = [
        TextFilter(text),
        KindFilter(tuple(kind or ())),
        TypeFilter(tuple(card_type or ())),
        TagFilter(tuple(tag or ())),
    ]
    result = catalog.filter(combine_filters(conditions))

    return CardListResponse(
        cards=[_to_response(card) for card in sort_cards(result.items)],
        total_count=result.total_count,
        filtered_count=result.filtered_count,
    )
