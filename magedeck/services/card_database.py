"""
Scryfall bulk feed fetcher.

Downloads the card array the catalog is built from.
"""

import logging

import httpx

from magedeck.config import settings
from magedeck.models.card import RawCard
from magedeck.models.failure import FeedDownloadError, FeedFormatError

logger = logging.getLogger(__name__)

USER_AGENT = "MageDeck/1.0"


async def get_bulk_data_url(client: httpx.AsyncClient, bulk_type: str | None = None) -> str:
    """
    Find the download URL for a Scryfall bulk data type.

    Raises:
        FeedFormatError: If the bulk type is not listed
        httpx.HTTPError: If the API request fails
    """
    bulk_type = bulk_type or settings.bulk_type

    response = await client.get(settings.scryfall_bulk_api)
    response.raise_for_status()
    data = response.json()

    for item in data["data"]:
        if item["type"] == bulk_type:
            return str(item["download_uri"])

    raise FeedFormatError("No download link!", detail=f"bulk type {bulk_type} not listed")


async def fetch_bulk_cards(
    client: httpx.AsyncClient | None = None,
    bulk_type: str | None = None,
) -> list[RawCard]:
    """
    Download the latest bulk card array from Scryfall.

    Args:
        client: HTTP client to use. A new one is created when omitted.
        bulk_type: Bulk data type. Defaults to settings.bulk_type (oracle_cards)

    Returns:
        Raw card objects as published

    Raises:
        FeedDownloadError: If the feed cannot be fetched
        FeedFormatError: If the bulk data listing has no matching entry
    """
    if client is None:
        async with httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
            timeout=settings.http_timeout,
        ) as owned_client:
            return await fetch_bulk_cards(owned_client, bulk_type)

    logger.info("Downloading latest data from Scryfall")
    try:
        download_url = await get_bulk_data_url(client, bulk_type)
        response = await client.get(download_url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FeedDownloadError(
            f"Failed to download bulk data: HTTP {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        raise FeedDownloadError(f"Failed to download bulk data: {e}") from e

    cards: list[RawCard] = response.json()
    logger.info("Downloaded %d cards", len(cards))
    return cards
