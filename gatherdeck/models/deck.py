from dataclasses import dataclass, field
from enum import Enum

from gatherdeck.config import (
    CONSTRUCTED_MAX_COPIES,
    CONSTRUCTED_MIN_DECK_SIZE,
    LIMITED_MIN_DECK_SIZE,
)
from gatherdeck.models.card import ALL_COLORS, Card


class DeckFormat(str, Enum):
    """Rule sets a deck can be validated against."""

    CONSTRUCTED = "constructed"
    LIMITED = "limited"


class DeckValidationError(Exception):
    """Raised when a deck breaks a rule of the requested format."""

    pass


class DeckTooSmallError(DeckValidationError):
    def __init__(self, size: int, minimum: int):
        self.size = size
        self.minimum = minimum
        super().__init__(f"deck is too small: {size} cards, at least {minimum} required")


class CardLimitExceededError(DeckValidationError):
    def __init__(self, card_name: str, count: int, limit: int):
        self.card_name = card_name
        self.count = count
        self.limit = limit
        super().__init__(f"too many copies of: {card_name} ({count}, limit {limit})")


class UnknownFormatError(DeckValidationError):
    def __init__(self, format_name: object):
        self.format_name = format_name
        super().__init__(f"unknown format: {format_name!r}")


@dataclass
class Deck:
    """
    A deck whose card names have been resolved to Cards.

    Attributes:
        main: Maindeck {card: quantity}
        sideboard: Sideboard {card: quantity}, kept separately from main

    Quantities are always >= 1. Adding a card already present adds to its
    quantity.
    """

    main: dict[Card, int] = field(default_factory=dict)
    sideboard: dict[Card, int] = field(default_factory=dict)

    def add_main(self, card: Card, quantity: int) -> None:
        """Add copies of a card to the maindeck."""
        _add(self.main, card, quantity)

    def add_sideboard(self, card: Card, quantity: int) -> None:
        """Add copies of a card to the sideboard."""
        _add(self.sideboard, card, quantity)

    def size(self) -> int:
        """Total cards in maindeck."""
        return sum(self.main.values())

    def sideboard_size(self) -> int:
        """Total cards in sideboard."""
        return sum(self.sideboard.values())

    def colors(self) -> list[str]:
        """Colours used by maindeck mana costs, in WUBRG order."""
        used = {color for card in self.main for color in card.colors()}
        return [color for color in ALL_COLORS if color in used]

    def lands(self) -> tuple[dict[Card, int], int]:
        """
        Land cards in the maindeck.

        Returns:
            Tuple of ({land card: quantity}, total land count)
        """
        lands = {card: count for card, count in self.main.items() if card.is_land()}
        return lands, sum(lands.values())

    def validate(self, fmt: DeckFormat | str) -> None:
        """
        Check the deck against a format's construction rules.

        Only the first violation found is reported.

        Raises:
            DeckTooSmallError: Maindeck below the format minimum
            CardLimitExceededError: A maindeck card over the copy limit
                (Constructed only; basic lands are not exempt)
            UnknownFormatError: Format is not a DeckFormat
        """
        try:
            deck_format = DeckFormat(fmt.lower() if isinstance(fmt, str) else fmt)
        except ValueError:
            raise UnknownFormatError(fmt) from None

        if deck_format is DeckFormat.CONSTRUCTED:
            if self.size() < CONSTRUCTED_MIN_DECK_SIZE:
                raise DeckTooSmallError(self.size(), CONSTRUCTED_MIN_DECK_SIZE)
            # TODO: exempt basic lands from the copy limit once that rule is signed off
            for card, count in self.main.items():
                if count > CONSTRUCTED_MAX_COPIES:
                    raise CardLimitExceededError(card.name, count, CONSTRUCTED_MAX_COPIES)
            return

        if self.size() < LIMITED_MIN_DECK_SIZE:
            raise DeckTooSmallError(self.size(), LIMITED_MIN_DECK_SIZE)

    def __str__(self) -> str:
        lines = [f"{count} {card}" for card, count in self.main.items()]
        if self.sideboard:
            lines.append("")
            lines.append("Sideboard:")
            lines.extend(f"{count} {card}" for card, count in self.sideboard.items())
        return "".join(line + "\n" for line in lines)

    def to_deck_list(self) -> str:
        """Render as .dec text, sideboard lines prefixed with "SB: "."""
        lines = [f"{count} {card}" for card, count in self.main.items()]
        lines.extend(f"SB: {count} {card}" for card, count in self.sideboard.items())
        return "".join(line + "\n" for line in lines)


def _add(section: dict[Card, int], card: Card, quantity: int) -> None:
    if quantity < 1:
        raise ValueError(f"Quantity must be positive, got {quantity} for {card.name}")
    section[card] = section.get(card, 0) + quantity
