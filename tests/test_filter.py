"""Tests for card list filtering."""

import pytest

from kcgdeck.models.card import Card, CardKind, CardType
from kcgdeck.models.filter import (
    CombinedFilter,
    FilterResult,
    KindFilter,
    TagFilter,
    TextFilter,
    TypeFilter,
    apply_filter,
    combine_filters,
    create_filter_result,
    is_empty_filter,
)
from kcgdeck.services.card_catalog import CardCatalog


@pytest.fixture
def cards() -> list[Card]:
    return [
        Card(
            id="AA-1",
            name="Hololive Artist",
            kind=CardKind.ARTIST,
            types=(CardType.RED,),
            tags=("hololive", "vtuber"),
        ),
        Card(
            id="AS-2",
            name="Nijisanji Song",
            kind=CardKind.SONG,
            types=(CardType.BLUE,),
            tags=("nijisanji", "vtuber"),
        ),
        Card(
            id="AA-3",
            name="Indie Card",
            kind=CardKind.ARTIST,
            types=(CardType.RED,),
            tags=("indie",),
        ),
        Card(id="AD-1", name="Buzzer", kind=CardKind.DIRECTION),
    ]


def ids(cards: list[Card]) -> list[str]:
    return [card.id for card in cards]


class TestApplyFilter:
    def test_text_matches_name(self, cards: list[Card]) -> None:
        assert ids(apply_filter(cards, TextFilter("hololive"))) == ["AA-1"]

    def test_text_matches_id(self, cards: list[Card]) -> None:
        assert ids(apply_filter(cards, TextFilter(" as-2 "))) == ["AS-2"]

    def test_blank_text_matches_all(self, cards: list[Card]) -> None:
        assert len(apply_filter(cards, TextFilter("  "))) == 4

    def test_kind(self, cards: list[Card]) -> None:
        assert ids(apply_filter(cards, KindFilter((CardKind.SONG,)))) == ["AS-2"]
        assert ids(apply_filter(cards, KindFilter((CardKind.SONG, CardKind.DIRECTION)))) == [
            "AS-2",
            "AD-1",
        ]

    def test_type_matches_any(self, cards: list[Card]) -> None:
        assert ids(apply_filter(cards, TypeFilter((CardType.RED,)))) == ["AA-1", "AA-3"]
        assert len(apply_filter(cards, TypeFilter((CardType.RED, CardType.BLUE)))) == 3

    def test_tag_matches_any(self, cards: list[Card]) -> None:
        assert ids(apply_filter(cards, TagFilter(("vtuber",)))) == ["AA-1", "AS-2"]
        assert ids(apply_filter(cards, TagFilter(("hololive", "indie")))) == ["AA-1", "AA-3"]

    def test_empty_values_match_all(self, cards: list[Card]) -> None:
        for condition in (KindFilter(()), TypeFilter(()), TagFilter(()), CombinedFilter()):
            assert len(apply_filter(cards, condition)) == 4

    def test_combined_requires_every_condition(self, cards: list[Card]) -> None:
        condition = combine_filters([KindFilter((CardKind.ARTIST,)), TagFilter(("vtuber",))])

        assert ids(apply_filter(cards, condition)) == ["AA-1"]


class TestIsEmptyFilter:
    def test_text(self) -> None:
        assert is_empty_filter(TextFilter(""))
        assert is_empty_filter(TextFilter("   "))
        assert not is_empty_filter(TextFilter("song"))

    def test_value_lists(self) -> None:
        assert is_empty_filter(KindFilter(()))
        assert not is_empty_filter(KindFilter((CardKind.ARTIST,)))
        assert is_empty_filter(TypeFilter(()))
        assert not is_empty_filter(TagFilter(("tag",)))

    def test_combined(self) -> None:
        assert is_empty_filter(CombinedFilter())
        assert is_empty_filter(combine_filters([TextFilter(""), TagFilter(())]))
        assert not is_empty_filter(combine_filters([TextFilter(""), TagFilter(("tag",))]))


class TestFilterResult:
    def test_counts(self) -> None:
        assert create_filter_result([1, 2, 3], [2]) == FilterResult(
            items=(2,), total_count=3, filtered_count=1
        )

    def test_empty(self) -> None:
        assert create_filter_result([], []) == FilterResult()

    def test_catalog_filter(self, catalog: CardCatalog) -> None:
        result = catalog.filter(TypeFilter((CardType.ALL,)))

        assert [card.id for card in result.items] == ["AA-10", "exA-1"]
        assert result.total_count == len(catalog)
        assert result.filtered_count == 2
