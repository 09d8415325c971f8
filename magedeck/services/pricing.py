"""
Price aggregation.

Prices single cards and whole decks against the catalog store and renders
the printable report lines.
"""

import logging

from magedeck.db.store import CatalogStore
from magedeck.models.card import PricedResult
from magedeck.models.currency import Currency
from magedeck.models.deck import Deck, DeckLine, DeckPriceReport
from magedeck.parsers.decklist import sanitise_name, unsanitise_name

logger = logging.getLogger(__name__)

POWER_DECLINE_MESSAGE = (
    "You added power and expected this to be cheap...? Away and chase yersel..."
)


async def price_card(
    store: CatalogStore,
    name: str,
    currency: Currency,
    exact_match: bool = False,
) -> PricedResult | None:
    """
    Find the cheapest printing of a card.

    Args:
        store: Catalog to query
        name: Card name as typed by the user (unescaped)
        currency: Price column to minimise
        exact_match: Require the whole name to match

    Returns:
        PricedResult, or None if no entry matches
    """
    return await store.find_cheapest(sanitise_name(name), currency, exact_match)


async def price_deck(
    store: CatalogStore,
    deck: Deck,
    currency: Currency,
    deck_name: str = "",
) -> DeckPriceReport:
    """
    Price every entry of a deck at its cheapest printing.

    Decks with power are declined in every currency but tix without any
    lookup. Entries with no match count as zero and are listed as missing
    under their unescaped name.

    Cheapest / most expensive compare unit prices strictly, so the first
    card seen wins ties.
    """
    report = DeckPriceReport(deck_name=deck_name, currency=currency)

    if deck.contains_power and currency is not Currency.TIX:
        report.declined = True
        report.decline_message = POWER_DECLINE_MESSAGE
        logger.info("Declined pricing deck %r: contains power", deck_name)
        return report

    for quantity, name in deck.cards:
        entry = await store.find_cheapest(name, currency)
        if entry is None:
            report.lines.append(DeckLine(quantity, unsanitise_name(name)))
            continue

        if entry.price is None:
            report.lines.append(
                DeckLine(quantity, entry.name, entry.set_code, entry.set_name, None)
            )
            continue

        unit_price = entry.price
        if report.cheapest is None or unit_price < report.cheapest[1]:
            report.cheapest = (entry.name, unit_price)
        if report.most_expensive is None or unit_price > report.most_expensive[1]:
            report.most_expensive = (entry.name, unit_price)

        line_price = unit_price * quantity
        report.total += line_price
        report.lines.append(
            DeckLine(quantity, entry.name, entry.set_code, entry.set_name, line_price)
        )

    logger.debug(
        "Priced deck %r: %d lines, %d missing", deck_name, len(report.lines), len(report.missing)
    )
    return report


def render_card(result: PricedResult) -> str:
    """One-line summary of a single-card lookup, with its purchase link."""
    return f"[*] {result} ({result.purchase_site or 'N/A'})"


def render_deck_report(report: DeckPriceReport) -> list[str]:
    """Printable lines for a deck report."""
    currency = report.currency

    if report.declined:
        return [f"[*] Cheapest version of deck '{report.deck_name}': {report.decline_message}"]

    lines: list[str] = []
    for line in report.lines:
        if not line.found:
            lines.append(f"[*] No entry found for '{line.name}'")
            continue
        lines.append(
            f"[*] {line.quantity}x {line.name} - {line.set_name} "
            f"({(line.set_code or '').upper()}): {currency.format_price(line.price)}"
        )

    cheapest_name, cheapest_price = report.cheapest or ("", None)
    expensive_name, expensive_price = report.most_expensive or ("", None)

    lines.extend(
        [
            "",
            f"[*] Cheapest version of deck '{report.deck_name}': "
            f"{currency.format_price(report.total)}",
            f"[*] Cheapest card: {cheapest_name} {currency.format_price(cheapest_price)}",
            f"[*] Most expensive card: {expensive_name} "
            f"{currency.format_price(expensive_price)}",
            f"[*] {report.purchase_hint}",
        ]
    )
    return lines
