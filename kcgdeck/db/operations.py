"""
Database CRUD operations for saved decks.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from kcgdeck.models.db import SavedDeckDB
from kcgdeck.models.saved_deck import SavedDeck


async def get_saved_deck(session: AsyncSession, name: str) -> SavedDeckDB | None:
    """
    Get a saved deck by name.

    Returns None if no deck has this name.
    """
    result = await session.execute(select(SavedDeckDB).where(SavedDeckDB.name == name))
    return result.scalar_one_or_none()


async def list_saved_decks(session: AsyncSession) -> list[SavedDeckDB]:
    """All saved decks, ordered by name."""
    result = await session.execute(select(SavedDeckDB).order_by(SavedDeckDB.name))
    return list(result.scalars().all())


async def save_deck(session: AsyncSession, deck: SavedDeck) -> tuple[SavedDeckDB, bool]:
    """
    Insert or update a saved deck.

    If a deck with the same name exists, its code is replaced.

    Returns:
        Tuple of (deck, created) where created is True if new.
    """
    existing = await get_saved_deck(session, deck.name)

    if existing:
        existing.code = deck.code
        await session.flush()
        return existing, False

    db_deck = SavedDeckDB(name=deck.name, code=deck.code)
    session.add(db_deck)
    await session.flush()
    return db_deck, True


async def delete_saved_deck(session: AsyncSession, name: str) -> bool:
    """
    Delete a saved deck.

    Returns True if a deck was deleted, False if none existed.
    """
    result = await session.execute(delete(SavedDeckDB).where(SavedDeckDB.name == name))
    await session.flush()
    return result.rowcount > 0  # type: ignore[attr-defined]


def saved_deck_to_model(db_deck: SavedDeckDB) -> SavedDeck:
    """Convert a database saved deck to a domain model."""
    return SavedDeck(name=db_deck.name, code=db_deck.code)
