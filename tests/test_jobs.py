"""Tests for the catalog sync job."""

from unittest.mock import AsyncMock, patch

import pytest

from magedeck.db.store import CatalogStore
from magedeck.jobs.sync_cards import run_sync
from magedeck.models.card import RawCard
from magedeck.models.currency import Currency
from magedeck.models.failure import FeedFormatError


class TestRunSync:
    async def test_sync_given_cards(self, store: CatalogStore, raw_card: RawCard) -> None:
        count = await run_sync(store, [raw_card])

        assert count == 1
        result = await store.find_cheapest("Brainstorm", Currency.USD)
        assert result is not None
        assert result.price == 1.5

    async def test_black_lotus_usd_only(self, store: CatalogStore) -> None:
        card: RawCard = {
            "name": "Black Lotus",
            "set": "lea",
            "set_name": "Limited Edition Alpha",
            "prices": {"usd": "10.50", "eur": None, "tix": None},
        }

        await run_sync(store, [card])

        rows = await store.list_matches("Black Lotus")
        assert len(rows) == 1
        row = rows[0]
        assert row.usd == 10.50
        assert [row.euro, row.euro_foil, row.usd_foil, row.usd_etched, row.tix] == [None] * 5

    async def test_fetches_when_no_cards_given(
        self, store: CatalogStore, raw_card: RawCard
    ) -> None:
        with patch(
            "magedeck.jobs.sync_cards.fetch_bulk_cards",
            new_callable=AsyncMock,
            return_value=[raw_card],
        ) as fetch:
            count = await run_sync(store)

        fetch.assert_awaited_once()
        assert count == 1

    async def test_malformed_feed_leaves_catalog_untouched(
        self, seeded_store: CatalogStore, raw_card: RawCard
    ) -> None:
        before = await seeded_store.count()
        raw_card["prices"]["usd"] = "free"

        with pytest.raises(FeedFormatError):
            await run_sync(seeded_store, [raw_card])

        assert await seeded_store.count() == before
