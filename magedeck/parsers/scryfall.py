"""
Scryfall bulk data normalizer.

Turns raw Scryfall card objects into flat CatalogRow records ready for
storage, dropping printings that carry no price in any currency.

Bulk data: https://scryfall.com/docs/api/bulk-data
"""

import json
import logging
import re
import uuid
from collections.abc import Iterable
from pathlib import Path

from magedeck.models.card import CatalogRow, RawCard
from magedeck.models.currency import FEED_CURRENCIES, Marketplace
from magedeck.models.failure import FeedFormatError

logger = logging.getLogger(__name__)

# Plain decimal with optional sign and exponent, or inf/infinity/nan
PRICE_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def has_price(card: RawCard) -> bool:
    """True if at least one currency in the card's price mapping is set."""
    return any(price is not None for price in card["prices"].values())


def _parse_price(currency: str, price: str) -> float:
    # float() alone also takes surrounding whitespace and digit separators
    if not PRICE_PATTERN.fullmatch(price):
        raise FeedFormatError(f"{currency} should have a valid price", detail=f"got {price!r}")
    return float(price)


def normalize_card(card: RawCard) -> CatalogRow:
    """
    Flatten a Scryfall card into a CatalogRow.

    Args:
        card: Raw card object from the bulk feed

    Returns:
        CatalogRow with a freshly generated id

    Raises:
        FeedFormatError: On an unknown marketplace or currency key, or a
            price string that is not a number
    """
    fields: dict[str, float | str | None] = {}

    for site, url in (card.get("purchase_uris") or {}).items():
        try:
            marketplace = Marketplace(site)
        except ValueError as e:
            raise FeedFormatError(f"Unknown marketplace in feed: {site}") from e
        fields[marketplace.value] = url

    for key, price in card["prices"].items():
        currency = FEED_CURRENCIES.get(key)
        if currency is None:
            raise FeedFormatError(f"Unknown currency in feed: {key}")
        if price is not None:
            fields[currency.price_field] = _parse_price(key, price)

    return CatalogRow(
        id=str(uuid.uuid4()),
        name=card["name"],
        set_code=card["set"],
        set_name=card["set_name"],
        **fields,  # type: ignore[arg-type]
    )


def filter_cards(cards: Iterable[RawCard]) -> list[CatalogRow]:
    """
    Normalize every priced card, dropping cards with no price at all.

    Args:
        cards: Raw cards from the bulk feed

    Returns:
        CatalogRows in feed order
    """
    rows = [normalize_card(card) for card in cards if has_price(card)]
    logger.debug("Normalized %d priced cards", len(rows))
    return rows


def load_bulk_file(bulk_data_path: Path) -> list[CatalogRow]:
    """
    Load a downloaded Scryfall bulk JSON file and normalize it.

    Args:
        bulk_data_path: Path to the JSON card array

    Returns:
        Normalized CatalogRows
    """
    with open(bulk_data_path, encoding="utf-8") as f:
        cards: list[RawCard] = json.load(f)

    return filter_cards(cards)
