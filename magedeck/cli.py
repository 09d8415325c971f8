"""
MageDeck command line.

Usage:
    magedeck init
    magedeck sync
    magedeck get "Lightning Bolt"
    magedeck price --card "Brainstorm" --currency usd
    magedeck price --deck burn.txt --currency euro
    magedeck clean
"""

import argparse
import asyncio
import logging
import shutil
import sys
from collections.abc import Sequence
from pathlib import Path

from magedeck.config import Settings, settings
from magedeck.db.store import CatalogStore
from magedeck.jobs.sync_cards import run_sync
from magedeck.models.currency import Currency
from magedeck.models.failure import FailureKind, KnownError, ProjectNotInitialisedError
from magedeck.parsers.decklist import load_deck, sanitise_name
from magedeck.services.pricing import price_card, price_deck, render_card, render_deck_report

logger = logging.getLogger(__name__)


def open_store(config: Settings) -> CatalogStore:
    return CatalogStore(config.database_url, timeout=config.db_timeout, echo=config.debug)


def ensure_initialised(config: Settings) -> None:
    if not config.project_dir.exists():
        raise ProjectNotInitialisedError(str(config.project_dir))


async def cmd_init(config: Settings) -> None:
    config.project_dir.mkdir(parents=True, exist_ok=True)
    async with open_store(config) as store:
        print(f"[*] Initialised MageDeck at {config.project_dir}")
        count = await run_sync(store)
    print(f"[*] Database synced! {count} cards stored")


async def cmd_sync(config: Settings) -> None:
    ensure_initialised(config)
    async with open_store(config) as store:
        count = await run_sync(store)
    print(f"[*] Database synced! {count} cards stored")


def cmd_clean(config: Settings) -> None:
    if not config.project_dir.exists():
        print(f"[*] Nothing to remove at {config.project_dir}")
        return
    shutil.rmtree(config.project_dir)
    print(f"[*] Removed MageDeck ({config.project_dir})")


async def cmd_get(config: Settings, card: str) -> None:
    ensure_initialised(config)
    pattern = sanitise_name(card)
    async with open_store(config) as store:
        rows = await store.list_matches(pattern)

    if not rows:
        print(f"[*] No card matching '{pattern}'")
    for row in rows:
        print(row)


async def cmd_price(
    config: Settings,
    card: str | None,
    deck: Path | None,
    currency: Currency,
    exact_match: bool,
) -> None:
    ensure_initialised(config)
    async with open_store(config) as store:
        if card is not None:
            result = await price_card(store, card, currency, exact_match)
            if result is None:
                print(f"[*] No entry found for '{sanitise_name(card)}'")
            else:
                print(render_card(result))
            return

        if deck is not None:
            try:
                loaded = load_deck(deck)
            except OSError as e:
                raise KnownError(
                    FailureKind.INVALID_INPUT, f"Could not read deck file '{deck}'", detail=str(e)
                ) from e
            report = await price_deck(store, loaded, currency, deck_name=str(deck))
            for line in render_deck_report(report):
                print(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="magedeck",
        description="Price Magic: The Gathering cards and decks from Scryfall data",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init", help="Initialise the project")
    commands.add_parser("sync", help="Synchronise card data with the latest info from Scryfall")
    commands.add_parser("clean", help="Remove the project directory")

    get = commands.add_parser("get", help="Get a card from the database")
    get.add_argument("card", help="Card name (substring match)")

    price = commands.add_parser(
        "price", help="Get the cheapest price for a card / deck in the given currency"
    )
    target = price.add_mutually_exclusive_group(required=True)
    target.add_argument("-c", "--card", help="Individual card to price")
    target.add_argument("-d", "--deck", type=Path, help="Deck file to price")
    price.add_argument(
        "--currency",
        type=Currency,
        choices=list(Currency),
        default=Currency.EURO,
        metavar="{" + ",".join(c.value for c in Currency) + "}",
        help="Currency format to use (default: euro)",
    )
    price.add_argument(
        "-e", "--exact-match", action="store_true", help="Use exact card name for search"
    )

    return parser


async def dispatch(args: argparse.Namespace, config: Settings) -> None:
    if args.command == "init":
        await cmd_init(config)
    elif args.command == "sync":
        await cmd_sync(config)
    elif args.command == "clean":
        cmd_clean(config)
    elif args.command == "get":
        await cmd_get(config, args.card)
    elif args.command == "price":
        await cmd_price(config, args.card, args.deck, args.currency, args.exact_match)


def main(argv: Sequence[str] | None = None, config: Settings | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        asyncio.run(dispatch(args, config or settings))
    except KnownError as e:
        print(f"[*] {e.message}")
        if e.suggestion:
            print(f"[*] {e.suggestion}")
        logger.debug("Known failure: %s (%s)", e.kind.value, e.detail)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
