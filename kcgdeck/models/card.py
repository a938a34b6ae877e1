from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class CardKind(str, Enum):
    """Card kind. Declaration order is the deck sort order."""

    ARTIST = "Artist"
    SONG = "Song"
    MAGIC = "Magic"
    DIRECTION = "Direction"


class CardType(str, Enum):
    """
    Card type tag. Declaration order is the deck sort order.

    The first six are colors; the rest are timing, equipment and
    installation tags.
    """

    RED = "赤"
    BLUE = "青"
    YELLOW = "黄"
    WHITE = "白"
    BLACK = "黒"
    ALL = "全"
    INSTANT = "即時"
    EQUIPMENT = "装備"
    INSTALLATION = "設置"


CARD_KINDS: tuple[CardKind, ...] = tuple(CardKind)
CARD_TYPES: tuple[CardType, ...] = tuple(CardType)


@dataclass(frozen=True, slots=True)
class Card:
    """
    A catalog card.

    Attributes:
        id: Unique card identifier (e.g., "AA-1", "exS-12")
        name: Display name
        kind: Card kind
        types: Type tags; a card may carry several or none
        tags: Free-form search tags
        effect: Rules text, if any
    """

    id: str
    name: str
    kind: CardKind
    types: tuple[CardType, ...] = ()
    tags: tuple[str, ...] = ()
    effect: str | None = None


class CardLookup(Protocol):
    """Anything that can resolve a card id to a catalog card."""

    def find(self, card_id: str) -> Card | None: ...
