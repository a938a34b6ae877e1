"""
kcgdeck services.

Card catalog loading and deck code import/export.
"""

from kcgdeck.services.card_catalog import (
    CardCatalog,
    CatalogError,
    get_card_catalog,
    load_card_catalog,
    parse_catalog_csv,
)
from kcgdeck.services.deck_code import (
    DeckCodeError,
    DeckImport,
    check_deck_code,
    export_deck_code,
    import_deck_code,
)

__all__ = [
    "CardCatalog",
    "CatalogError",
    "DeckCodeError",
    "DeckImport",
    "check_deck_code",
    "export_deck_code",
    "get_card_catalog",
    "import_deck_code",
    "load_card_catalog",
    "parse_catalog_csv",
]
