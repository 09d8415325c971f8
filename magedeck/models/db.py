"""
SQLAlchemy ORM models for persistent storage.

The catalog mirrors CatalogRow one-to-one. Rows carry no identity that
survives a sync; every sync replaces the whole table.
"""

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class CatalogCardDB(Base):
    """
    One priced card printing in the local catalog.
    """

    __tablename__ = "catalog_cards"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True, index=True)
    set_tag: Mapped[str | None] = mapped_column(String(16), nullable=True)
    set_name: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Prices, one column per currency
    euro: Mapped[float | None] = mapped_column(Float, nullable=True)
    euro_foil: Mapped[float | None] = mapped_column(Float, nullable=True)
    usd: Mapped[float | None] = mapped_column(Float, nullable=True)
    usd_foil: Mapped[float | None] = mapped_column(Float, nullable=True)
    usd_etched: Mapped[float | None] = mapped_column(Float, nullable=True)
    tix: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Purchase links, one column per marketplace
    cardmarket: Mapped[str | None] = mapped_column(Text, nullable=True)
    cardhoarder: Mapped[str | None] = mapped_column(Text, nullable=True)
    tcgplayer: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<CatalogCardDB(name={self.name}, set={self.set_tag})>"
