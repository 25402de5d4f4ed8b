"""
Errors raised while looking cards up on Gatherer.

Single-card lookups surface these to the caller. Deck assembly catches
GathererError per card name and drops the name instead.
"""


class GathererError(Exception):
    """Base class for card lookup failures."""

    pass


class CardNotFoundError(GathererError):
    """The name (or page) does not resolve to a card in Gatherer."""

    def __init__(self, card_name: str, reason: str = "not found"):
        self.card_name = card_name
        self.reason = reason
        super().__init__(f"Card '{card_name}' {reason}" if card_name else reason)


class TransportError(GathererError):
    """The HTTP request itself failed (network error or bad status)."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")


class UnexpectedResponseError(GathererError):
    """Gatherer answered with a page shape we do not know how to handle."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Unexpected response from {url}: {reason}")


class CardExtractionError(GathererError):
    """A card detail page is missing structure every card page must have."""

    pass
