"""
Catalog store.

Owns an engine bound to an explicit database URL and exposes the catalog
operations, each in its own session. All SQLAlchemy failures surface as
StorageError.
"""

import logging
from collections.abc import Sequence
from functools import lru_cache
from types import TracebackType

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from magedeck.config import settings
from magedeck.db.database import create_catalog_engine, create_schema
from magedeck.db.operations import count_cards, find_cheapest, list_matches, sync_catalog
from magedeck.models.card import CatalogRow, PricedResult
from magedeck.models.currency import Currency
from magedeck.models.failure import FailureKind, StorageError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 0.5


class CatalogStore:
    """
    Persistent catalog of priced card printings.

    Usage:
        async with CatalogStore("sqlite+aiosqlite:///cards.db") as store:
            await store.sync(rows)
            cheapest = await store.find_cheapest("Brainstorm", Currency.USD)
    """

    def __init__(self, database_url: str, timeout: float = DEFAULT_TIMEOUT, echo: bool = False):
        self.database_url = database_url
        self.engine = create_catalog_engine(database_url, timeout, echo=echo)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def __aenter__(self) -> "CatalogStore":
        await self.init()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def init(self) -> None:
        """Create the catalog schema if missing."""
        await create_schema(self.engine)

    async def close(self) -> None:
        await self.engine.dispose()

    async def sync(self, rows: Sequence[CatalogRow]) -> int:
        """
        Replace the entire catalog with `rows`.

        Delete and insert share one transaction: on failure the previous
        catalog is kept and sync can simply be re-run.

        Raises:
            StorageError: If the write fails (nothing is committed)
        """
        logger.info("Populating catalog with %d cards...", len(rows))
        try:
            async with self._session_factory.begin() as session:
                count = await sync_catalog(session, rows)
        except SQLAlchemyError as e:
            raise StorageError(
                "Failed to sync catalog, previous data kept",
                kind=FailureKind.STORAGE_WRITE,
                detail=str(e),
            ) from e

        logger.info("Catalog synced: %d cards", count)
        return count

    async def find_cheapest(
        self,
        name_pattern: str,
        currency: Currency,
        exact_match: bool = False,
    ) -> PricedResult | None:
        """Cheapest printing matching `name_pattern`, or None."""
        try:
            async with self._session_factory() as session:
                return await find_cheapest(session, name_pattern, currency, exact_match)
        except SQLAlchemyError as e:
            raise StorageError("Failed to query catalog", detail=str(e)) from e

    async def list_matches(self, name_pattern: str) -> list[CatalogRow]:
        """Every printing whose name contains `name_pattern`."""
        try:
            async with self._session_factory() as session:
                return await list_matches(session, name_pattern)
        except SQLAlchemyError as e:
            raise StorageError("Failed to query catalog", detail=str(e)) from e

    async def count(self) -> int:
        try:
            async with self._session_factory() as session:
                return await count_cards(session)
        except SQLAlchemyError as e:
            raise StorageError("Failed to query catalog", detail=str(e)) from e


@lru_cache(maxsize=1)
def get_store() -> CatalogStore:
    """
    Catalog store bound to the configured database.

    Cached after first call. Used as a FastAPI dependency.
    """
    return CatalogStore(settings.database_url, timeout=settings.db_timeout, echo=settings.debug)
