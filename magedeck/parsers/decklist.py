"""
Parser for plain-text decklists.

Accepted line format:
    <quantity> <card name>

Example:
    4 Lightning Bolt
    SB: 2 Pyroblast
    1 Atraxa, Praetors' Voice # !Commander

Section headers (Deck, Sideboard), `//` comments, empty lines and basic
lands are dropped. Card names come out with apostrophes doubled so they
can be embedded in a catalog query pattern.
"""

import logging
from pathlib import Path

from magedeck.models.deck import Deck, DeckEntry

logger = logging.getLogger(__name__)

BASIC_LANDS = ("swamp", "island", "mountain", "plains", "forest", "wastes")

SECTION_HEADERS = frozenset({"Deck", "Sideboard"})

SIDEBOARD_PREFIX = "SB: "
COMMANDER_SUFFIX = "# !Commander"
COMMENT_PREFIX = "//"

# Quantities are small signed integers
MIN_QUANTITY = -128
MAX_QUANTITY = 127


def sanitise_name(name: str) -> str:
    """Double every apostrophe so the name is safe inside a quoted pattern."""
    return name.replace("'", "''")


def unsanitise_name(name: str) -> str:
    """Undo sanitise_name for display."""
    return name.replace("''", "'")


def is_basic_land(line: str) -> bool:
    line = line.lower()
    return any(land in line for land in BASIC_LANDS)


def is_deck_entry(line: str) -> bool:
    """False for blank lines, section headers and comments."""
    if not line or line in SECTION_HEADERS:
        return False
    return not line.startswith(COMMENT_PREFIX)


def clean_line(line: str) -> str:
    """Trim a line and strip sideboard / commander markers."""
    line = line.strip()
    if line.startswith(SIDEBOARD_PREFIX):
        line = line[len(SIDEBOARD_PREFIX) :]
    if line.endswith(COMMANDER_SUFFIX):
        line = line[: -len(COMMANDER_SUFFIX)]
    return line.strip()


def parse_quantity(token: str) -> int:
    """Parse a quantity token, falling back to 1."""
    try:
        quantity = int(token)
    except ValueError:
        return 1
    if not MIN_QUANTITY <= quantity <= MAX_QUANTITY:
        return 1
    return quantity


def parse_line(line: str) -> DeckEntry | None:
    """
    Parse one decklist line.

    Returns:
        DeckEntry, or None if the line is not a priceable card
    """
    line = clean_line(line)
    if not is_deck_entry(line) or is_basic_land(line):
        return None

    parts = line.split(maxsplit=1)
    if len(parts) < 2:
        return None

    quantity, name = parts
    return DeckEntry(parse_quantity(quantity), sanitise_name(name))


def parse_decklist(text: str) -> Deck:
    """
    Parse decklist text into a Deck.

    Args:
        text: Raw file content

    Returns:
        Deck with entries in file order. Empty deck for empty input.
    """
    cards: list[DeckEntry] = []

    for line in text.split("\n"):
        entry = parse_line(line)
        if entry is not None:
            cards.append(entry)

    return Deck(cards)


def load_deck(path: Path) -> Deck:
    """Read a decklist file and parse it."""
    text = path.read_text(encoding="utf-8")
    deck = parse_decklist(text)
    logger.debug("Loaded %d entries from %s", len(deck.cards), path)
    return deck
