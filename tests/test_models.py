import pytest

from magedeck.models.card import CatalogRow, PricedResult
from magedeck.models.currency import (
    CURRENCY_INFO,
    FEED_CURRENCIES,
    Currency,
    Marketplace,
)
from magedeck.models.deck import POWER, Deck, DeckEntry, DeckLine, DeckPriceReport


class TestCurrency:
    @pytest.mark.parametrize(
        ("currency", "expected"),
        [
            (Currency.EURO, "1.50€"),
            (Currency.EURO_FOIL, "1.50€ Foil"),
            (Currency.USD, "$1.50"),
            (Currency.USD_FOIL, "$1.50 Foil"),
            (Currency.USD_ETCHED, "$1.50 Etched"),
            (Currency.TIX, "1.50 Tix"),
        ],
    )
    def test_format_price(self, currency: Currency, expected: str) -> None:
        assert currency.format_price(1.5) == expected

    def test_format_missing_price(self) -> None:
        assert Currency.USD.format_price(None) == "$N/A"
        assert Currency.TIX.format_price(None) == "N/A Tix"

    def test_format_rounds_to_two_places(self) -> None:
        assert Currency.EURO.format_price(0.125) == "0.12€"
        assert Currency.EURO.format_price(10) == "10.00€"

    def test_every_currency_has_info(self) -> None:
        assert set(CURRENCY_INFO) == set(Currency)

    def test_marketplace_grouping(self) -> None:
        assert Currency.EURO.marketplace is Marketplace.CARDMARKET
        assert Currency.EURO_FOIL.marketplace is Marketplace.CARDMARKET
        assert Currency.USD.marketplace is Marketplace.TCGPLAYER
        assert Currency.USD_FOIL.marketplace is Marketplace.TCGPLAYER
        assert Currency.USD_ETCHED.marketplace is Marketplace.TCGPLAYER
        assert Currency.TIX.marketplace is Marketplace.CARDHOARDER

    def test_feed_keys(self) -> None:
        assert set(FEED_CURRENCIES) == {"eur", "eur_foil", "usd", "usd_foil", "usd_etched", "tix"}
        assert FEED_CURRENCIES["eur"] is Currency.EURO

    def test_purchase_location(self) -> None:
        assert "cardmarket.com" in Currency.EURO_FOIL.purchase_location()
        assert "tcgplayer.com" in Currency.USD_ETCHED.purchase_location()
        assert "cardhoarder.com" in Currency.TIX.purchase_location()

    def test_price_field_matches_value(self) -> None:
        for currency in Currency:
            assert currency.price_field == currency.value


class TestCatalogRow:
    def test_price_in(self) -> None:
        row = CatalogRow(id="1", name="Brainstorm", set_code="ice", set_name="Ice Age", usd=1.5)

        assert row.price_in(Currency.USD) == 1.5
        assert row.price_in(Currency.EURO) is None

    def test_str_lists_all_prices(self) -> None:
        row = CatalogRow(id="1", name="Brainstorm", set_code="ice", set_name="Ice Age", usd=1.5)

        text = str(row)

        assert text.startswith("Brainstorm - Ice Age (ICE): ")
        assert "$1.50" in text
        assert "N/A€" in text


class TestPricedResult:
    def test_str(self) -> None:
        result = PricedResult(
            name="Lightning Bolt",
            set_code="m10",
            set_name="Magic 2010",
            price=2.0,
            currency=Currency.USD,
        )

        assert str(result) == "Lightning Bolt - Magic 2010 (M10): $2.00"


class TestDeck:
    def test_power_list(self) -> None:
        assert len(POWER) == 9

    def test_contains_power(self) -> None:
        deck = Deck([DeckEntry(1, "Brainstorm"), DeckEntry(1, "Ancestral Recall")])

        assert deck.contains_power is True

    def test_power_substring_of_longer_name(self) -> None:
        deck = Deck([DeckEntry(1, "Timetwister (Alpha)")])

        assert deck.contains_power is True

    def test_no_power(self) -> None:
        deck = Deck([DeckEntry(4, "Brainstorm")])

        assert deck.contains_power is False

    def test_empty_deck(self) -> None:
        assert Deck().contains_power is False


class TestDeckPriceReport:
    def test_missing_lists_unmatched_lines(self) -> None:
        report = DeckPriceReport(
            deck_name="test",
            currency=Currency.USD,
            lines=[
                DeckLine(1, "Brainstorm", "ice", "Ice Age", 1.5),
                DeckLine(2, "Nonexistent"),
            ],
        )

        assert report.missing == ["Nonexistent"]

    def test_purchase_hint_follows_currency(self) -> None:
        report = DeckPriceReport(deck_name="test", currency=Currency.TIX)

        assert report.purchase_hint == Currency.TIX.purchase_location()
