from magedeck.models.card import CatalogRow, PricedResult, RawCard
from magedeck.models.currency import (
    CURRENCY_INFO,
    FEED_CURRENCIES,
    PURCHASE_HINTS,
    Currency,
    CurrencyInfo,
    Marketplace,
)
from magedeck.models.deck import POWER, Deck, DeckEntry, DeckLine, DeckPriceReport
from magedeck.models.failure import (
    FailureKind,
    FeedDownloadError,
    FeedFormatError,
    KnownError,
    ProjectNotInitialisedError,
    StorageError,
)

__all__ = [
    "CURRENCY_INFO",
    "CatalogRow",
    "Currency",
    "CurrencyInfo",
    "Deck",
    "DeckEntry",
    "DeckLine",
    "DeckPriceReport",
    "FEED_CURRENCIES",
    "FailureKind",
    "FeedDownloadError",
    "FeedFormatError",
    "KnownError",
    "Marketplace",
    "POWER",
    "PURCHASE_HINTS",
    "PricedResult",
    "ProjectNotInitialisedError",
    "RawCard",
    "StorageError",
]
