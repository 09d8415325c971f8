"""
Sync the local catalog with Scryfall.

Downloads the bulk card feed, normalizes it and replaces the catalog.
Run directly with `python -m magedeck.jobs.sync_cards`.
"""

import asyncio
import logging

from magedeck.config import settings
from magedeck.db.store import CatalogStore
from magedeck.models.card import RawCard
from magedeck.parsers.scryfall import filter_cards
from magedeck.services.card_database import fetch_bulk_cards

logger = logging.getLogger(__name__)


async def run_sync(store: CatalogStore, cards: list[RawCard] | None = None) -> int:
    """
    Replace the catalog with the latest priced cards.

    Args:
        store: Initialised catalog store
        cards: Already downloaded raw cards. Fetched from Scryfall when None.

    Returns:
        Number of catalog rows stored
    """
    if cards is None:
        cards = await fetch_bulk_cards()

    rows = filter_cards(cards)
    logger.info("Kept %d of %d cards with a price", len(rows), len(cards))

    try:
        return await store.sync(rows)
    except Exception as e:
        logger.error("Failed to sync catalog: %s", e)
        raise


async def run_configured_sync() -> int:
    """Sync the catalog configured in settings."""
    async with CatalogStore(settings.database_url, timeout=settings.db_timeout) as store:
        return await run_sync(store)


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_configured_sync())


if __name__ == "__main__":
    main()
