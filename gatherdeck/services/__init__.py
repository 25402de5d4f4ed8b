"""
gatherdeck services.

Shared card cache and concurrent deck assembly.
"""

from gatherdeck.services.card_cache import CardCache, get_card_cache

__all__ = [
    "CardCache",
    "get_card_cache",
]
