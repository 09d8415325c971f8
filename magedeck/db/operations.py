"""
Catalog queries.

Async functions over an AsyncSession. None of them commit; the caller owns
the transaction.

Name patterns are embedded in the SQL as quoted string literals, so callers
must double apostrophes first (see parsers.decklist.sanitise_name).
"""

from collections.abc import Sequence

from sqlalchemy import ColumnElement, delete, func, insert, literal_column, select
from sqlalchemy.ext.asyncio import AsyncSession

from magedeck.models.card import CatalogRow, PricedResult
from magedeck.models.currency import Currency
from magedeck.models.db import CatalogCardDB


def row_to_model(row: CatalogRow) -> dict[str, str | float | None]:
    """Convert a CatalogRow to insert parameters."""
    return {
        "id": row.id,
        "name": row.name,
        "set_tag": row.set_code,
        "set_name": row.set_name,
        "euro": row.euro,
        "euro_foil": row.euro_foil,
        "usd": row.usd,
        "usd_foil": row.usd_foil,
        "usd_etched": row.usd_etched,
        "tix": row.tix,
        "cardmarket": row.cardmarket,
        "cardhoarder": row.cardhoarder,
        "tcgplayer": row.tcgplayer,
    }


def model_to_row(card: CatalogCardDB) -> CatalogRow:
    """Convert a database card to a CatalogRow."""
    return CatalogRow(
        id=card.id,
        name=card.name,
        set_code=card.set_tag,
        set_name=card.set_name,
        euro=card.euro,
        euro_foil=card.euro_foil,
        usd=card.usd,
        usd_foil=card.usd_foil,
        usd_etched=card.usd_etched,
        tix=card.tix,
        cardmarket=card.cardmarket,
        cardhoarder=card.cardhoarder,
        tcgplayer=card.tcgplayer,
    )


def name_matches(pattern: str, exact_match: bool = False) -> ColumnElement[bool]:
    """Name filter: substring LIKE by default, equality when exact."""
    if exact_match:
        return CatalogCardDB.name == literal_column(f"'{pattern}'")
    return CatalogCardDB.name.like(literal_column(f"'%{pattern}%'"))


async def sync_catalog(session: AsyncSession, rows: Sequence[CatalogRow]) -> int:
    """
    Replace the whole catalog with the given rows.

    Deletes every stored row, then bulk inserts. Run inside a single
    transaction so a failure leaves the previous catalog in place.

    Returns:
        Number of rows inserted
    """
    await session.execute(delete(CatalogCardDB))
    if rows:
        await session.execute(insert(CatalogCardDB), [row_to_model(row) for row in rows])
    await session.flush()
    return len(rows)


async def find_cheapest(
    session: AsyncSession,
    name_pattern: str,
    currency: Currency,
    exact_match: bool = False,
) -> PricedResult | None:
    """
    Find the cheapest printing whose name matches the pattern.

    Rows with no price in the requested currency sort after priced rows, so
    the result only has price None when no matching row is priced.

    Returns:
        PricedResult with the purchase link for the currency's marketplace,
        or None if nothing matched.
    """
    price_col = getattr(CatalogCardDB, currency.price_field)
    link_col = getattr(CatalogCardDB, currency.marketplace.value)

    result = await session.execute(
        select(
            CatalogCardDB.name,
            CatalogCardDB.set_tag,
            CatalogCardDB.set_name,
            price_col,
            link_col,
        )
        .where(name_matches(name_pattern, exact_match))
        .order_by(price_col.is_(None), price_col)
        .limit(1)
    )
    record = result.first()
    if record is None:
        return None

    name, set_tag, set_name, price, purchase_site = record
    if name is None or set_tag is None or set_name is None:
        return None

    return PricedResult(
        name=name,
        set_code=set_tag,
        set_name=set_name,
        price=price,
        currency=currency,
        purchase_site=purchase_site,
    )


async def list_matches(session: AsyncSession, name_pattern: str) -> list[CatalogRow]:
    """Get every printing whose name contains the pattern, ordered by name and set."""
    result = await session.execute(
        select(CatalogCardDB)
        .where(name_matches(name_pattern))
        .order_by(CatalogCardDB.name, CatalogCardDB.set_tag)
    )
    return [model_to_row(card) for card in result.scalars().all()]


async def count_cards(session: AsyncSession) -> int:
    """Number of rows in the catalog."""
    result = await session.execute(select(func.count()).select_from(CatalogCardDB))
    return int(result.scalar_one())
