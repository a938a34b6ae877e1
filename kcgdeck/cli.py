"""
Command line interface for deck codes.

    kcgdeck encode AA-1 AA-1 AS-2      # one id per copy
    kcgdeck encode --format slash AA-1 AS-2
    kcgdeck decode KCG-0M0M0M
    kcgdeck validate "AA-1/AA-2"
    kcgdeck cards --kind Song --type 赤

Exit status is 0 on success and 1 on failure.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from kcgdeck.codec.validation import CodeFormat
from kcgdeck.models.card import CardKind, CardType
from kcgdeck.models.deck import DeckCard, InvalidDeck, calculate_deck_state, resolve_card_ids
from kcgdeck.models.filter import KindFilter, TagFilter, TextFilter, TypeFilter, combine_filters
from kcgdeck.models.result import Err
from kcgdeck.models.sorting import sort_cards
from kcgdeck.services.card_catalog import CardCatalog, CatalogError, load_card_catalog
from kcgdeck.services.deck_code import check_deck_code, export_deck_code, import_deck_code

logger = logging.getLogger(__name__)


def _load_catalog(path: Path | None) -> CardCatalog | None:
    try:
        return load_card_catalog(path)
    except (FileNotFoundError, CatalogError) as e:
        logger.error("Failed to load card data: %s", e)
        return None


def run_encode(card_ids: Sequence[str], code_format: CodeFormat, catalog: CardCatalog) -> int:
    """Print the code for a deck given one id per copy."""
    resolved = resolve_card_ids(card_ids, catalog)
    if resolved.not_found:
        logger.error("Unknown card ids: %s", ", ".join(resolved.not_found))
        return 1

    state = calculate_deck_state(resolved.cards)
    if isinstance(state, InvalidDeck):
        for error in state.errors:
            logger.error("%s", error)
        return 1

    result = export_deck_code(resolved.cards, code_format)
    if isinstance(result, Err):
        logger.error("Cannot encode deck: %s", result.error)
        return 1

    print(result.value)
    return 0


def _format_card_line(deck_card: DeckCard) -> str:
    return f"{deck_card.count}x {deck_card.card.id} {deck_card.card.name}"


def run_decode(code: str, catalog: CardCatalog) -> int:
    """Print the cards in a code, one line per distinct card."""
    result = import_deck_code(code, catalog)
    if isinstance(result, Err):
        logger.error("Invalid deck code: %s", result.error)
        return 1

    deck = result.value
    for deck_card in deck.cards:
        print(_format_card_line(deck_card))
    for card_id in deck.not_found:
        print(f"? {card_id} (not in card list)")
    print(f"Total: {deck.total_cards}")

    return 1 if deck.is_empty else 0


def run_cards(
    catalog: CardCatalog,
    text: str,
    kinds: Sequence[CardKind],
    types: Sequence[CardType],
    tags: Sequence[str],
) -> int:
    """Print matching cards in standard order."""
    condition = combine_filters(
        [
            TextFilter(text),
            KindFilter(tuple(kinds)),
            TypeFilter(tuple(types)),
            TagFilter(tuple(tags)),
        ]
    )
    result = catalog.filter(condition)
    for card in sort_cards(result.items):
        print(f"{card.id} {card.name}")
    print(f"{result.filtered_count}/{result.total_count} cards")
    return 0


def run_validate(code: str) -> int:
    result = check_deck_code(code)
    if isinstance(result, Err):
        print(f"invalid: {result.error}")
        return 1
    print(f"valid: {result.value.format.value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kcgdeck", description="Encode and decode deck codes.")
    parser.add_argument(
        "--cards",
        type=Path,
        default=None,
        help="Card list CSV (defaults to the bundled card list)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Encode card ids as a deck code")
    encode.add_argument("card_ids", nargs="+", metavar="ID", help="Card id, once per copy")
    encode.add_argument(
        "--format",
        type=CodeFormat,
        choices=list(CodeFormat),
        metavar="{kcg,slash}",
        default=CodeFormat.KCG,
        help="Code format (default: kcg)",
    )

    decode = subparsers.add_parser("decode", help="List the cards in a deck code")
    decode.add_argument("code")

    cards = subparsers.add_parser("cards", help="List cards, optionally filtered")
    cards.add_argument("text", nargs="?", default="", help="Name or id contains this text")
    cards.add_argument(
        "--kind",
        type=CardKind,
        action="append",
        default=[],
        choices=list(CardKind),
        metavar="KIND",
        help="Artist, Song, Magic or Direction (repeatable)",
    )
    cards.add_argument(
        "--type",
        dest="types",
        type=CardType,
        action="append",
        default=[],
        choices=list(CardType),
        metavar="TYPE",
        help="Type tag such as 赤 or 装備 (repeatable)",
    )
    cards.add_argument("--tag", dest="tags", action="append", default=[], help="Tag (repeatable)")

    validate = subparsers.add_parser("validate", help="Check a deck code without decoding cards")
    validate.add_argument("code")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "validate":
        return run_validate(args.code)

    catalog = _load_catalog(args.cards)
    if catalog is None:
        return 1

    if args.command == "encode":
        return run_encode(args.card_ids, args.format, catalog)
    if args.command == "cards":
        return run_cards(catalog, args.text, args.kind, args.types, args.tags)
    return run_decode(args.code, catalog)


if __name__ == "__main__":
    sys.exit(main())
