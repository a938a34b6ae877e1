"""Tests for saved deck database operations."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from kcgdeck.db.operations import (
    delete_saved_deck,
    get_saved_deck,
    list_saved_decks,
    save_deck,
    saved_deck_to_model,
)
from kcgdeck.models.db import Base
from kcgdeck.models.saved_deck import SavedDeck


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def session(async_engine) -> AsyncSession:
    """Provide a database session for tests."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        yield session


class TestSavedDeckOperations:
    async def test_save_new_deck(self, session: AsyncSession) -> None:
        db_deck, created = await save_deck(session, SavedDeck(name="Red", code="KCG-0M"))

        assert created
        assert db_deck.id is not None
        assert db_deck.name == "Red"

    async def test_save_replaces_code(self, session: AsyncSession) -> None:
        first, _ = await save_deck(session, SavedDeck(name="Red", code="KCG-0M"))
        second, created = await save_deck(session, SavedDeck(name="Red", code="AA-1/AA-1"))

        assert not created
        assert second.id == first.id
        assert second.code == "AA-1/AA-1"

    async def test_get_saved_deck(self, session: AsyncSession) -> None:
        await save_deck(session, SavedDeck(name="Red", code="KCG-0M"))

        found = await get_saved_deck(session, "Red")

        assert found is not None
        assert saved_deck_to_model(found) == SavedDeck(name="Red", code="KCG-0M")

    async def test_get_missing_deck(self, session: AsyncSession) -> None:
        assert await get_saved_deck(session, "Nope") is None

    async def test_list_is_ordered_by_name(self, session: AsyncSession) -> None:
        await save_deck(session, SavedDeck(name="Zed", code="AA-1"))
        await save_deck(session, SavedDeck(name="Alpha", code="AA-2"))

        decks = await list_saved_decks(session)

        assert [deck.name for deck in decks] == ["Alpha", "Zed"]

    async def test_delete(self, session: AsyncSession) -> None:
        await save_deck(session, SavedDeck(name="Red", code="KCG-0M"))

        assert await delete_saved_deck(session, "Red")
        assert await get_saved_deck(session, "Red") is None
        assert not await delete_saved_deck(session, "Red")
