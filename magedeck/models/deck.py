from dataclasses import dataclass, field
from typing import NamedTuple

from magedeck.models.currency import Currency

# Historically restricted cards; a deck running any of them is never "cheap"
POWER = (
    "black lotus",
    "mox jet",
    "mox ruby",
    "mox sapphire",
    "mox pearl",
    "mox emerald",
    "ancestral recall",
    "timetwister",
    "time walk",
)


class DeckEntry(NamedTuple):
    """One decklist line: quantity and (escaped) card name."""

    quantity: int
    name: str


def _has_power(cards: list[DeckEntry]) -> bool:
    for entry in cards:
        name = entry.name.lower()
        if any(power in name for power in POWER):
            return True
    return False


@dataclass
class Deck:
    """
    A parsed decklist.

    Attributes:
        cards: Entries in file order
        contains_power: True if any entry names one of the POWER cards
    """

    cards: list[DeckEntry] = field(default_factory=list)
    contains_power: bool = field(init=False)

    def __post_init__(self) -> None:
        self.contains_power = _has_power(self.cards)


@dataclass
class DeckLine:
    """
    One deck entry after lookup.

    `price` is the line total (unit price x quantity). `set_code` is None
    when the catalog had no match for `name`.
    """

    quantity: int
    name: str
    set_code: str | None = None
    set_name: str | None = None
    price: float | None = None

    @property
    def found(self) -> bool:
        return self.set_code is not None


@dataclass
class DeckPriceReport:
    """
    Result of pricing a deck.

    When `declined` is True no lookups were made and only
    `decline_message` is meaningful.
    """

    deck_name: str
    currency: Currency
    declined: bool = False
    decline_message: str | None = None
    lines: list[DeckLine] = field(default_factory=list)
    total: float = 0.0
    cheapest: tuple[str, float] | None = None
    most_expensive: tuple[str, float] | None = None

    @property
    def missing(self) -> list[str]:
        """Names with no catalog match, in deck order."""
        return [line.name for line in self.lines if not line.found]

    @property
    def purchase_hint(self) -> str:
        return self.currency.purchase_location()
