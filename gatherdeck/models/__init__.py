from gatherdeck.models.card import ALL_COLORS, Card
from gatherdeck.models.deck import (
    CardLimitExceededError,
    Deck,
    DeckFormat,
    DeckTooSmallError,
    DeckValidationError,
    UnknownFormatError,
)
from gatherdeck.models.errors import (
    CardExtractionError,
    CardNotFoundError,
    GathererError,
    TransportError,
    UnexpectedResponseError,
)

__all__ = [
    "ALL_COLORS",
    "Card",
    "CardExtractionError",
    "CardLimitExceededError",
    "CardNotFoundError",
    "Deck",
    "DeckFormat",
    "DeckTooSmallError",
    "DeckValidationError",
    "GathererError",
    "TransportError",
    "UnexpectedResponseError",
    "UnknownFormatError",
]
