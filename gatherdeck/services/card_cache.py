"""
In-memory cache of resolved cards, keyed by the name they were looked up by.

One instance is shared by every lookup in the process (see get_card_cache).
The cache lives as long as the process; nothing is written to disk.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from threading import Lock

from gatherdeck.models.card import Card

logger = logging.getLogger(__name__)


@dataclass
class CardCache:
    """
    Thread-safe name -> Card map with write-once entries.

    Concurrent lookups of the same uncached name may both fetch the card;
    whichever publishes first wins and later publications are ignored.
    """

    _cards: dict[str, Card] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock)

    def get(self, name: str) -> Card | None:
        """Cached card for name, or None."""
        with self._lock:
            return self._cards.get(name)

    def publish(self, name: str, card: Card) -> Card:
        """
        Store a resolved card unless name already has one.

        Returns:
            The card now cached for name (the earlier one if there was one)
        """
        with self._lock:
            existing = self._cards.get(name)
            if existing is not None:
                logger.debug("Card %r already cached, keeping first result", name)
                return existing
            self._cards[name] = card
            return card

    def clear(self) -> None:
        """
        Drop every cached card.

        Must only be called while no lookups are in flight; a lookup that
        finishes after clear() will repopulate its entry.
        """
        with self._lock:
            count = len(self._cards)
            self._cards.clear()
        logger.info("Cleared %d cached cards", count)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._cards

    def __len__(self) -> int:
        with self._lock:
            return len(self._cards)


@lru_cache(maxsize=1)
def get_card_cache() -> CardCache:
    """
    Get the process-wide card cache.

    Created on first use; every later call returns the same instance.
    """
    return CardCache()
