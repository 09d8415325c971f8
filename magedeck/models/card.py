from dataclasses import dataclass
from typing import NotRequired, TypedDict

from magedeck.models.currency import Currency


class RawCard(TypedDict):
    """The slice of a Scryfall card object we consume."""

    name: str
    set: str
    set_name: str
    purchase_uris: NotRequired[dict[str, str] | None]
    prices: dict[str, str | None]


@dataclass(frozen=True, slots=True)
class CatalogRow:
    """
    A normalized, storage-ready card printing.

    Attributes:
        id: Fresh UUID generated at normalization (not stable across syncs)
        name: Card name as published by Scryfall
        set_code: Set code (e.g., "lea")
        set_name: Set display name (e.g., "Limited Edition Alpha")
        euro..tix: Price per currency, None when unpriced
        cardmarket..tcgplayer: Purchase link per marketplace
    """

    id: str
    name: str | None
    set_code: str | None
    set_name: str | None
    euro: float | None = None
    euro_foil: float | None = None
    usd: float | None = None
    usd_foil: float | None = None
    usd_etched: float | None = None
    tix: float | None = None
    cardmarket: str | None = None
    cardhoarder: str | None = None
    tcgplayer: str | None = None

    def price_in(self, currency: Currency) -> float | None:
        """Price stored for the given currency."""
        price: float | None = getattr(self, currency.price_field)
        return price

    def __str__(self) -> str:
        prices = ", ".join(c.format_price(self.price_in(c)) for c in Currency)
        return f"{self.name} - {self.set_name} ({(self.set_code or '').upper()}): {prices}"


@dataclass(frozen=True, slots=True)
class PricedResult:
    """
    The cheapest printing found for a name query.

    Only built when name, set code and set name are all known.
    """

    name: str
    set_code: str
    set_name: str
    price: float | None
    currency: Currency
    purchase_site: str | None = None

    def __str__(self) -> str:
        return (
            f"{self.name} - {self.set_name} ({self.set_code.upper()}): "
            f"{self.currency.format_price(self.price)}"
        )
