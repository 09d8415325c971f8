from magedeck.db.database import create_catalog_engine, create_schema
from magedeck.db.operations import (
    count_cards,
    find_cheapest,
    list_matches,
    model_to_row,
    name_matches,
    row_to_model,
    sync_catalog,
)
from magedeck.db.store import CatalogStore, get_store

__all__ = [
    "CatalogStore",
    "count_cards",
    "create_catalog_engine",
    "create_schema",
    "find_cheapest",
    "get_store",
    "list_matches",
    "model_to_row",
    "name_matches",
    "row_to_model",
    "sync_catalog",
]
