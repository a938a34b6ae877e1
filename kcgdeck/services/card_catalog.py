"""
Card catalog service.

Loads the card list from CSV, answers id lookups for deck code import
and filters the list for browsing.

CSV columns:
    id,name,kind,type,effect,tags

``type`` and ``tags`` hold "/"-separated lists, e.g. "赤/装備".
"""

import csv
import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from io import StringIO
from pathlib import Path

from kcgdeck.config import settings
from kcgdeck.models.card import Card, CardKind, CardType
from kcgdeck.models.filter import (
    FilterCondition,
    FilterResult,
    apply_filter,
    create_filter_result,
)

logger = logging.getLogger(__name__)

LIST_SEPARATOR = "/"


class CatalogError(ValueError):
    """The card data file is unusable."""


class CardCatalog:
    """In-memory card catalog indexed by card id."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: dict[str, Card] = {}
        for card in cards:
            # First definition wins for duplicate ids
            self._cards.setdefault(card.id, card)

    def find(self, card_id: str) -> Card | None:
        return self._cards.get(card_id)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards.values())

    def __len__(self) -> int:
        return len(self._cards)

    def filter(self, condition: FilterCondition) -> FilterResult[Card]:
        """Cards matching ``condition``, with the catalog size for context."""
        cards = list(self)
        return create_filter_result(cards, apply_filter(cards, condition))


def _split_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(LIST_SEPARATOR) if part.strip()]


def parse_catalog_csv(text: str) -> CardCatalog:
    """
    Parse catalog CSV text.

    Raises:
        CatalogError: If a required column is missing or a row has an
            unknown kind or type.
    """
    reader = csv.DictReader(StringIO(text))
    missing = {"id", "name", "kind"} - set(reader.fieldnames or [])
    if missing:
        raise CatalogError(f"Card data is missing columns: {sorted(missing)}")

    cards: list[Card] = []
    # Header is line 1
    for line_number, row in enumerate(reader, start=2):
        card_id = (row.get("id") or "").strip()
        if not card_id:
            continue

        try:
            kind = CardKind((row.get("kind") or "").strip())
            types = tuple(CardType(value) for value in _split_list(row.get("type")))
        except ValueError as e:
            raise CatalogError(f"Invalid card data on line {line_number}: {e}") from e

        cards.append(
            Card(
                id=card_id,
                name=(row.get("name") or "").strip(),
                kind=kind,
                types=types,
                tags=tuple(_split_list(row.get("tags"))),
                effect=(row.get("effect") or "").strip() or None,
            )
        )

    return CardCatalog(cards)


def load_card_catalog(path: Path | None = None) -> CardCatalog:
    """
    Load the card catalog from a CSV file.

    Args:
        path: CSV file. Defaults to ``settings.card_data_path``.

    Raises:
        FileNotFoundError: If the file doesn't exist
        CatalogError: If the file content is invalid
    """
    if path is None:
        path = settings.card_data_path

    if not path.exists():
        raise FileNotFoundError(f"Card data not found at {path}.")

    catalog = parse_catalog_csv(path.read_text(encoding="utf-8-sig"))
    logger.info("Loaded %d cards from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def get_card_catalog() -> CardCatalog:
    """
    Get cached card catalog.

    Cached after first load.
    """
    return load_card_catalog()
