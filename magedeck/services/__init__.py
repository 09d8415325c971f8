from magedeck.services.card_database import fetch_bulk_cards, get_bulk_data_url
from magedeck.services.pricing import (
    POWER_DECLINE_MESSAGE,
    price_card,
    price_deck,
    render_card,
    render_deck_report,
)

__all__ = [
    "POWER_DECLINE_MESSAGE",
    "fetch_bulk_cards",
    "get_bulk_data_url",
    "price_card",
    "price_deck",
    "render_card",
    "render_deck_report",
]
