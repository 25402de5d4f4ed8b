"""
Deck assembly: turns parsed name counts into a Deck of resolved Cards.

Every distinct card name is looked up concurrently. A name that cannot be
resolved is logged and left out of the deck; assembly itself never fails
because of a single card.
"""

import asyncio
import logging

from gatherdeck.config import settings
from gatherdeck.models.card import Card
from gatherdeck.models.deck import Deck
from gatherdeck.models.errors import GathererError
from gatherdeck.parsers.deck_list import parse_deck_list
from gatherdeck.scrapers.gatherer import GathererClient

logger = logging.getLogger(__name__)


async def assemble_deck(
    main: dict[str, int],
    sideboard: dict[str, int],
    client: GathererClient,
    *,
    max_concurrency: int | None = None,
    task_timeout: float | None = None,
) -> Deck:
    """
    Resolve deck-list counts into a Deck.

    Each distinct name is resolved once, even if it appears in both the
    maindeck and the sideboard. Returns only after every lookup has
    finished or been dropped. An unexpected error in one lookup cancels
    the rest and is raised in an ExceptionGroup.

    Args:
        main: Maindeck {card name: quantity}
        sideboard: Sideboard {card name: quantity}
        client: Gatherer client used for lookups
        max_concurrency: Lookups in flight at once.
            Defaults to settings.max_concurrency
        task_timeout: Seconds allowed per lookup.
            Defaults to settings.task_timeout

    Returns:
        Deck keyed by resolved Card. Unresolved names are absent.
    """
    if max_concurrency is None:
        max_concurrency = settings.max_concurrency
    if task_timeout is None:
        task_timeout = settings.task_timeout

    deck = Deck()
    merge_lock = asyncio.Lock()
    semaphore = asyncio.Semaphore(max_concurrency)
    names = list(dict.fromkeys([*main, *sideboard]))
    resolved: list[str] = []

    async def resolve(card_name: str) -> None:
        async with semaphore:
            card = await _lookup(client, card_name, task_timeout)
        if card is None:
            return

        async with merge_lock:
            resolved.append(card_name)
            if card_name in main:
                deck.add_main(card, main[card_name])
            if card_name in sideboard:
                deck.add_sideboard(card, sideboard[card_name])

    async with asyncio.TaskGroup() as group:
        for name in names:
            group.create_task(resolve(name))

    logger.info(
        "Assembled deck: %d of %d names resolved, %d maindeck cards",
        len(resolved),
        len(names),
        deck.size(),
    )
    return deck


async def _lookup(client: GathererClient, card_name: str, timeout: float) -> Card | None:
    try:
        return await asyncio.wait_for(client.get_card(card_name), timeout)
    except asyncio.TimeoutError:
        logger.warning("Failed to find card %s: timed out after %.1fs", card_name, timeout)
    except GathererError as e:
        logger.warning("Failed to find card %s: %s", card_name, e)
    return None


async def load_deck(text: str, client: GathererClient) -> Deck:
    """
    Parse deck-list text and resolve it into a Deck.

    Raises:
        MalformedLineError: If the text has an invalid line
    """
    main, sideboard = parse_deck_list(text)
    return await assemble_deck(main, sideboard, client)
