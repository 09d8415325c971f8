from collections.abc import AsyncGenerator

import pytest

from magedeck.db.store import CatalogStore
from magedeck.models.card import CatalogRow, RawCard


@pytest.fixture
def raw_card() -> RawCard:
    """A Scryfall card object as it appears in the bulk feed."""
    return {
        "name": "Brainstorm",
        "set": "ice",
        "set_name": "Ice Age",
        "purchase_uris": {
            "tcgplayer": "https://tcgplayer.example/brainstorm",
            "cardmarket": "https://cardmarket.example/brainstorm",
            "cardhoarder": "https://cardhoarder.example/brainstorm",
        },
        "prices": {
            "usd": "1.50",
            "usd_foil": None,
            "usd_etched": None,
            "eur": "1.20",
            "eur_foil": None,
            "tix": "0.05",
        },
    }


@pytest.fixture
def catalog_rows() -> list[CatalogRow]:
    """A small catalog with several printings per name."""
    return [
        CatalogRow(
            id="row-1",
            name="Brainstorm",
            set_code="ice",
            set_name="Ice Age",
            usd=1.50,
            euro=1.20,
            tix=0.05,
            tcgplayer="https://tcgplayer.example/bs-ice",
            cardmarket="https://cardmarket.example/bs-ice",
        ),
        CatalogRow(
            id="row-2",
            name="Brainstorm",
            set_code="mmq",
            set_name="Mercadian Masques",
            usd=0.75,
            tix=0.02,
            tcgplayer="https://tcgplayer.example/bs-mmq",
        ),
        CatalogRow(
            id="row-3",
            name="Lightning Bolt",
            set_code="lea",
            set_name="Limited Edition Alpha",
            usd=400.0,
            euro=350.0,
        ),
        CatalogRow(
            id="row-4",
            name="Lightning Bolt",
            set_code="m10",
            set_name="Magic 2010",
            usd=2.0,
            euro=1.5,
            tix=0.1,
        ),
        CatalogRow(
            id="row-5",
            name="Urza's Tower",
            set_code="atq",
            set_name="Antiquities",
            usd=20.0,
            euro=18.0,
        ),
        CatalogRow(
            id="row-6",
            name="Counterspell",
            set_code="tmp",
            set_name="Tempest",
            tix=0.03,
            cardhoarder="https://cardhoarder.example/cs-tmp",
        ),
        CatalogRow(
            id="row-7",
            name="Black Lotus",
            set_code="lea",
            set_name="Limited Edition Alpha",
            usd=30000.0,
            tix=5.0,
        ),
    ]


@pytest.fixture
async def store() -> AsyncGenerator[CatalogStore, None]:
    """An empty catalog in an in-memory SQLite database."""
    catalog = CatalogStore("sqlite+aiosqlite:///:memory:")
    await catalog.init()
    yield catalog
    await catalog.close()


@pytest.fixture
async def seeded_store(store: CatalogStore, catalog_rows: list[CatalogRow]) -> CatalogStore:
    """Catalog synced with catalog_rows."""
    await store.sync(catalog_rows)
    return store


@pytest.fixture
def sample_decklist() -> str:
    """Sample decklist with headers, markers, comments and basics."""
    return """Deck
// Burn
4 Lightning Bolt
2 Brainstorm
20 Mountain

Sideboard
SB: 1 Urza's Tower
1 Ghostly Flicker # !Commander"""
