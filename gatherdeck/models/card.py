from dataclasses import dataclass, field

# Fixed colour ordering used everywhere colours are reported
ALL_COLORS = ("W", "U", "B", "R", "G")

LAND_TYPES = ("Land", "Basic Land")


@dataclass(frozen=True, slots=True)
class Card:
    """
    A card as described by its Gatherer detail page.

    Identity is the card name: every other field is excluded from equality
    and hashing, so two printings of the same card count as one deck entry.

    Attributes:
        name: Canonical card name (never empty)
        multiverse_id: Gatherer "multiverseid", 0 when unknown
        mana_cost: Cost symbols left to right, generic amounts as digits
            and colours as W/U/B/R/G (e.g. ("2", "R", "R"))
        converted_mana_cost: Total mana value
        type: Full type line (e.g. "Basic Land — Mountain")
        text: Rules text, one paragraph per line
        rarity: Rarity label (e.g. "Common"), empty when not extracted
    """

    name: str
    multiverse_id: int = field(default=0, compare=False)
    mana_cost: tuple[str, ...] = field(default=(), compare=False)
    converted_mana_cost: int = field(default=0, compare=False)
    type: str = field(default="", compare=False)
    text: str = field(default="", compare=False)
    rarity: str = field(default="", compare=False)

    def __str__(self) -> str:
        return self.name

    @property
    def mana_cost_text(self) -> str:
        """Mana cost as a compact string, e.g. "2RR"."""
        return "".join(self.mana_cost)

    def colors(self) -> list[str]:
        """Colours appearing in the mana cost, in WUBRG order."""
        return [color for color in ALL_COLORS if color in self.mana_cost]

    def is_land(self) -> bool:
        """True for "Land" / "Basic Land" type lines, with or without subtypes."""
        for land_type in LAND_TYPES:
            if self.type == land_type or self.type.startswith(land_type + " "):
                return True
        return False
