"""
Saved deck API endpoints.

Decks are stored by name as deck codes. A code is checked before it is
saved, so everything in storage can be imported again.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from kcgdeck.api.deck_codes import CodeRequest, deck_code_failure
from kcgdeck.codec.validation import CodeFormat, detect_code_format
from kcgdeck.db import (
    delete_saved_deck,
    get_saved_deck,
    list_saved_decks,
    save_deck,
    saved_deck_to_model,
)
from kcgdeck.db.database import get_session
from kcgdeck.models.failure import FailureKind, KnownError
from kcgdeck.models.result import Err
from kcgdeck.models.saved_deck import SavedDeck
from kcgdeck.services.deck_code import check_deck_code

router = APIRouter(prefix="/decks", tags=["decks"])


class SavedDeckResponse(BaseModel):
    """Response model for a single saved deck."""

    name: str
    code: str
    format: CodeFormat


class SavedDeckListResponse(BaseModel):
    """Response model for a list of saved decks."""

    decks: list[SavedDeckResponse]
    count: int


def _to_response(deck: SavedDeck) -> SavedDeckResponse:
    return SavedDeckResponse(name=deck.name, code=deck.code, format=detect_code_format(deck.code))


def _deck_not_found(name: str) -> KnownError:
    return KnownError(
        kind=FailureKind.NOT_FOUND,
        message=f"No saved deck named '{name}'.",
        suggestion="List saved decks to see the available names.",
        status_code=status.HTTP_404_NOT_FOUND,
    )


@router.get("", response_model=SavedDeckListResponse)
async def list_decks(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> SavedDeckListResponse:
    """List saved decks ordered by name."""
    db_decks = await list_saved_decks(session)
    decks = [_to_response(saved_deck_to_model(d)) for d in db_decks]
    return SavedDeckListResponse(decks=decks, count=len(decks))


@router.get("/{name}", response_model=SavedDeckResponse)
async def get_deck(
    name: str,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> SavedDeckResponse:
    """
    Get a saved deck by name.

    Returns 404 if no deck has this name.
    """
    db_deck = await get_saved_deck(session, name)
    if db_deck is None:
        raise _deck_not_found(name)
    return _to_response(saved_deck_to_model(db_deck))


@router.put(
    "/{name}",
    response_model=SavedDeckResponse,
    responses={201: {"model": SavedDeckResponse}},
)
async def put_deck(
    name: str,
    request: CodeRequest,
    response: Response,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> SavedDeckResponse:
    """
    Save a deck code under a name, replacing any deck with that name.

    Returns 201 when the name is new and 200 when an existing deck was
    replaced.
    """
    result = check_deck_code(request.code)
    if isinstance(result, Err):
        raise deck_code_failure(result.error)

    deck = SavedDeck(name=name, code=result.value.code)
    _, created = await save_deck(session, deck)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return _to_response(deck)


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_deck(
    name: str,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> None:
    """
    Delete a saved deck.

    Returns 404 if no deck has this name.
    """
    if not await delete_saved_deck(session, name):
        raise _deck_not_found(name)
