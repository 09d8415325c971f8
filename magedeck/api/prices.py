"""
Price API endpoints.

Read-only views over the local catalog: card listing, single-card and
deck pricing.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from magedeck.db.store import CatalogStore, get_store
from magedeck.models.currency import Currency
from magedeck.parsers.decklist import parse_decklist, sanitise_name
from magedeck.services.pricing import price_card, price_deck

router = APIRouter(tags=["prices"])


class CatalogCardResponse(BaseModel):
    """A stored card printing with all of its prices."""

    name: str | None
    set_code: str | None
    set_name: str | None
    prices: dict[Currency, float | None]
    purchase_uris: dict[str, str | None]


class CardListResponse(BaseModel):
    """Response model for a card listing."""

    query: str
    cards: list[CatalogCardResponse]
    count: int


class CardPriceResponse(BaseModel):
    """Cheapest printing of a single card."""

    name: str
    set_code: str
    set_name: str
    price: float | None
    formatted_price: str
    currency: Currency
    purchase_site: str | None = None


class DeckPriceRequest(BaseModel):
    """Request body for deck pricing."""

    decklist: str = Field(..., description="Decklist text, one '<qty> <name>' per line")
    currency: Currency = Currency.EURO
    name: str = ""


class DeckLineResponse(BaseModel):
    quantity: int
    name: str
    set_code: str | None = None
    set_name: str | None = None
    price: float | None = None
    found: bool


class DeckPriceResponse(BaseModel):
    """Deck pricing summary. When declined, only `message` is set."""

    name: str
    currency: Currency
    declined: bool
    message: str | None = None
    lines: list[DeckLineResponse] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    total: float = 0.0
    formatted_total: str | None = None
    cheapest: str | None = None
    most_expensive: str | None = None
    purchase_hint: str | None = None


@router.get("/cards", response_model=CardListResponse)
async def list_cards(
    store: Annotated[CatalogStore, Depends(get_store)],
    name: Annotated[str, Query(min_length=1)],
) -> CardListResponse:
    """List every stored printing whose name contains `name`."""
    rows = await store.list_matches(sanitise_name(name))
    cards = [
        CatalogCardResponse(
            name=row.name,
            set_code=row.set_code,
            set_name=row.set_name,
            prices={c: row.price_in(c) for c in Currency},
            purchase_uris={
                "cardmarket": row.cardmarket,
                "cardhoarder": row.cardhoarder,
                "tcgplayer": row.tcgplayer,
            },
        )
        for row in rows
    ]
    return CardListResponse(query=name, cards=cards, count=len(cards))


@router.get("/prices/card", response_model=CardPriceResponse)
async def get_card_price(
    store: Annotated[CatalogStore, Depends(get_store)],
    name: Annotated[str, Query(min_length=1)],
    currency: Currency = Currency.EURO,
    exact_match: bool = False,
) -> CardPriceResponse:
    """Cheapest printing of a card. 404 if no entry matches."""
    result = await price_card(store, name, currency, exact_match)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No entry found for '{name}'",
        )

    return CardPriceResponse(
        name=result.name,
        set_code=result.set_code,
        set_name=result.set_name,
        price=result.price,
        formatted_price=currency.format_price(result.price),
        currency=currency,
        purchase_site=result.purchase_site,
    )


@router.post("/prices/deck", response_model=DeckPriceResponse)
async def get_deck_price(
    request: DeckPriceRequest,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> DeckPriceResponse:
    """
    Price a decklist at its cheapest printings.

    Decks with power priced in a paper currency come back declined, not as
    an error.
    """
    deck = parse_decklist(request.decklist)
    report = await price_deck(store, deck, request.currency, deck_name=request.name)
    currency = report.currency

    if report.declined:
        return DeckPriceResponse(
            name=report.deck_name,
            currency=currency,
            declined=True,
            message=report.decline_message,
        )

    return DeckPriceResponse(
        name=report.deck_name,
        currency=currency,
        declined=False,
        lines=[
            DeckLineResponse(
                quantity=line.quantity,
                name=line.name,
                set_code=line.set_code,
                set_name=line.set_name,
                price=line.price,
                found=line.found,
            )
            for line in report.lines
        ],
        missing=report.missing,
        total=report.total,
        formatted_total=currency.format_price(report.total),
        cheapest=report.cheapest[0] if report.cheapest else None,
        most_expensive=report.most_expensive[0] if report.most_expensive else None,
        purchase_hint=report.purchase_hint,
    )
