from kcgdeck.db.database import get_session, init_db
from kcgdeck.db.operations import (
    delete_saved_deck,
    get_saved_deck,
    list_saved_decks,
    save_deck,
    saved_deck_to_model,
)

__all__ = [
    "delete_saved_deck",
    "get_saved_deck",
    "get_session",
    "init_db",
    "list_saved_decks",
    "save_deck",
    "saved_deck_to_model",
]
