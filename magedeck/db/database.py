"""
Database engine and schema management.

Engines are always built from an explicit URL; CatalogStore owns the one it
creates.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from magedeck.models.db import Base
from magedeck.models.failure import FailureKind, StorageError


def create_catalog_engine(database_url: str, timeout: float, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the catalog database.

    Args:
        database_url: SQLAlchemy URL (sqlite+aiosqlite)
        timeout: Seconds to wait for the database connection/lock
        echo: Log emitted SQL
    """
    return create_async_engine(
        database_url,
        echo=echo,
        connect_args={"timeout": timeout},
    )


async def create_schema(bind: AsyncEngine) -> None:
    """
    Create all catalog tables on the given engine.

    Raises:
        StorageError: If the schema cannot be created
    """
    try:
        async with bind.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as e:
        raise StorageError(
            "Failed to run database migrations",
            kind=FailureKind.STORAGE_MIGRATION,
            detail=str(e),
        ) from e
