from magedeck.parsers.decklist import load_deck, parse_decklist, sanitise_name, unsanitise_name
from magedeck.parsers.scryfall import filter_cards, load_bulk_file, normalize_card

__all__ = [
    "filter_cards",
    "load_bulk_file",
    "load_deck",
    "normalize_card",
    "parse_decklist",
    "sanitise_name",
    "unsanitise_name",
]
