from kcgdeck.api.cards import router as cards_router
from kcgdeck.api.deck_codes import router as deck_codes_router
from kcgdeck.api.decks import router as decks_router
from kcgdeck.api.health import router as health_router

__all__ = [
    "cards_router",
    "deck_codes_router",
    "decks_router",
    "health_router",
]
