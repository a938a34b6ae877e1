"""
Card list filtering.

A filter condition narrows a card list by one attribute:
- text: name or id contains the text, case-insensitively
- kind: card kind is any of the given kinds
- type: card carries any of the given type tags
- tags: card carries any of the given tags

A combined condition applies its parts one after another, so every part
must match. A condition with no values matches every card.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from kcgdeck.models.card import Card, CardKind, CardType

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class TextFilter:
    value: str


@dataclass(frozen=True, slots=True)
class KindFilter:
    values: tuple[CardKind, ...]


@dataclass(frozen=True, slots=True)
class TypeFilter:
    values: tuple[CardType, ...]


@dataclass(frozen=True, slots=True)
class TagFilter:
    values: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CombinedFilter:
    conditions: tuple["FilterCondition", ...] = ()


FilterCondition = TextFilter | KindFilter | TypeFilter | TagFilter | CombinedFilter


@dataclass(frozen=True, slots=True)
class FilterResult(Generic[T]):
    """Filtered items plus the counts before and after filtering."""

    items: tuple[T, ...] = field(default_factory=tuple)
    total_count: int = 0
    filtered_count: int = 0


def _matches_text(card: Card, text: str) -> bool:
    needle = text.strip().lower()
    return not needle or needle in card.name.lower() or needle in card.id.lower()


def apply_filter(cards: Iterable[Card], condition: FilterCondition) -> list[Card]:
    """Cards matching ``condition``, in their original order."""
    match condition:
        case TextFilter(value=value):
            return [card for card in cards if _matches_text(card, value)]
        case KindFilter(values=values):
            if not values:
                return list(cards)
            return [card for card in cards if card.kind in values]
        case TypeFilter(values=values):
            if not values:
                return list(cards)
            return [card for card in cards if any(t in values for t in card.types)]
        case TagFilter(values=values):
            if not values:
                return list(cards)
            return [card for card in cards if any(tag in values for tag in card.tags)]
        case CombinedFilter(conditions=conditions):
            filtered = list(cards)
            for sub_condition in conditions:
                filtered = apply_filter(filtered, sub_condition)
            return filtered


def is_empty_filter(condition: FilterCondition) -> bool:
    """True if the condition would match every card."""
    match condition:
        case TextFilter(value=value):
            return not value.strip()
        case KindFilter(values=values) | TypeFilter(values=values) | TagFilter(values=values):
            return not values
        case CombinedFilter(conditions=conditions):
            return all(is_empty_filter(c) for c in conditions)


def combine_filters(conditions: Iterable[FilterCondition]) -> CombinedFilter:
    return CombinedFilter(conditions=tuple(conditions))


def create_filter_result(all_items: Sequence[T], filtered_items: Sequence[T]) -> FilterResult[T]:
    return FilterResult(
        items=tuple(filtered_items),
        total_count=len(all_items),
        filtered_count=len(filtered_items),
    )
