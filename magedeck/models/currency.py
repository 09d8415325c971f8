"""
Currencies and marketplaces.

Each Currency maps to exactly one stored price column, one upstream feed
key, and one Marketplace. Each Marketplace maps to a purchase-link column
and a purchase hint. All currency fan-out goes through these tables.
"""

from dataclasses import dataclass
from enum import Enum


class Marketplace(str, Enum):
    """The three storefronts whose links the feed publishes."""

    CARDMARKET = "cardmarket"
    TCGPLAYER = "tcgplayer"
    CARDHOARDER = "cardhoarder"

    @property
    def purchase_hint(self) -> str:
        return PURCHASE_HINTS[self]


class Currency(str, Enum):
    """Price columns a card can be priced in."""

    EURO = "euro"
    EURO_FOIL = "euro_foil"
    USD = "usd"
    USD_FOIL = "usd_foil"
    USD_ETCHED = "usd_etched"
    TIX = "tix"

    @property
    def info(self) -> "CurrencyInfo":
        return CURRENCY_INFO[self]

    @property
    def price_field(self) -> str:
        return CURRENCY_INFO[self].price_field

    @property
    def marketplace(self) -> Marketplace:
        return CURRENCY_INFO[self].marketplace

    def format_price(self, price: float | None) -> str:
        """Render a price in this currency, or N/A when absent."""
        amount = "N/A" if price is None else f"{price:.2f}"
        return CURRENCY_INFO[self].template.format(amount)

    def purchase_location(self) -> str:
        return CURRENCY_INFO[self].marketplace.purchase_hint


@dataclass(frozen=True, slots=True)
class CurrencyInfo:
    """
    Lookup record for a currency.

    Attributes:
        price_field: Catalog column holding this price
        feed_key: Key used in the upstream feed's prices mapping
        marketplace: Storefront selling in this currency
        template: Format string taking the rendered amount
    """

    price_field: str
    feed_key: str
    marketplace: Marketplace
    template: str


CURRENCY_INFO: dict[Currency, CurrencyInfo] = {
    Currency.EURO: CurrencyInfo("euro", "eur", Marketplace.CARDMARKET, "{}€"),
    Currency.EURO_FOIL: CurrencyInfo("euro_foil", "eur_foil", Marketplace.CARDMARKET, "{}€ Foil"),
    Currency.USD: CurrencyInfo("usd", "usd", Marketplace.TCGPLAYER, "${}"),
    Currency.USD_FOIL: CurrencyInfo("usd_foil", "usd_foil", Marketplace.TCGPLAYER, "${} Foil"),
    Currency.USD_ETCHED: CurrencyInfo(
        "usd_etched", "usd_etched", Marketplace.TCGPLAYER, "${} Etched"
    ),
    Currency.TIX: CurrencyInfo("tix", "tix", Marketplace.CARDHOARDER, "{} Tix"),
}

# Upstream price key -> Currency
FEED_CURRENCIES: dict[str, Currency] = {info.feed_key: c for c, info in CURRENCY_INFO.items()}

PURCHASE_HINTS: dict[Marketplace, str] = {
    Marketplace.CARDMARKET: "Check https://www.cardmarket.com/en/Magic for buying options",
    Marketplace.TCGPLAYER: (
        "Check https://www.tcgplayer.com/search/magic/product"
        "?productLineName=magic&page=1&view=grid for buying options"
    ),
    Marketplace.CARDHOARDER: "Check https://www.cardhoarder.com/ for buying options",
}
