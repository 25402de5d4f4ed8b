"""
Summarize a deck-list file.

Resolves every card on Gatherer, then prints the deck size, land count and
colours. Optionally validates the deck against a format.

Usage:
    python -m gatherdeck.jobs.summarize_deck decks/hou.dec --format constructed
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from gatherdeck.models.deck import Deck, DeckFormat, DeckValidationError
from gatherdeck.parsers.deck_list import MalformedLineError, parse_deck_file
from gatherdeck.scrapers.gatherer import GathererClient
from gatherdeck.services.deck_assembler import assemble_deck

logger = logging.getLogger(__name__)


async def build_deck(path: Path) -> Deck:
    """
    Parse a deck-list file and resolve its cards.

    Raises:
        OSError: If the file cannot be read
        MalformedLineError: If the file has an invalid line
    """
    main, sideboard = parse_deck_file(path)
    logger.info("Parsed %d maindeck and %d sideboard names", len(main), len(sideboard))

    async with GathererClient() as client:
        return await assemble_deck(main, sideboard, client)


def format_summary(deck: Deck) -> str:
    """Human-readable summary of a resolved deck."""
    _, land_count = deck.lands()
    colors = deck.colors()
    lines = [
        "Finished parsing deck:",
        "----------------------",
        f"  {deck.size()} cards",
        f"   - {land_count} lands",
        f"  {len(colors)} colors: {colors}",
    ]
    if deck.sideboard:
        lines.append(f"  {deck.sideboard_size()} sideboard cards")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = argparse.ArgumentParser(description="Resolve a deck list against Gatherer")
    parser.add_argument("path", type=Path, help="Deck list file (.dec format)")
    parser.add_argument(
        "--format",
        dest="deck_format",
        choices=[f.value for f in DeckFormat],
        help="Validate the deck against this format",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the resolved deck list",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        deck = asyncio.run(build_deck(args.path))
    except (OSError, MalformedLineError) as e:
        logger.error("Could not read deck list %s: %s", args.path, e)
        return 1

    print(format_summary(deck))
    if args.show:
        print()
        print(deck, end="")

    if args.deck_format:
        try:
            deck.validate(args.deck_format)
        except DeckValidationError as e:
            print(f"  not legal in {args.deck_format}: {e}")
            return 1
        print(f"  legal in {args.deck_format}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
