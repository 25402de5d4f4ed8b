"""
Card extraction from Gatherer detail pages.

A detail page holds a "cardDetails" table whose rows carry ids ending in
"_nameRow", "_manaRow", and so on. Each row has a "value" element with the
field contents. Only the name row is required; cards without a cost, rules
text or rarity simply omit those rows.
"""

import logging

import bs4
from bs4.element import Comment, NavigableString, PageElement, Tag

from gatherdeck.models.card import Card
from gatherdeck.models.errors import CardExtractionError, CardNotFoundError
from gatherdeck.parsers.html_search import (
    all_of,
    find_all,
    find_first,
    get_attr,
    has_class,
    id_has_suffix,
    is_tag,
)

logger = logging.getLogger(__name__)

# Symbol image alt text -> colour code
MANA_SYMBOLS = {
    "WHITE": "W",
    "BLUE": "U",
    "BLACK": "B",
    "RED": "R",
    "GREEN": "G",
}


def extract_card(page: bs4.BeautifulSoup | str | bytes) -> Card:
    """
    Extract a Card from a Gatherer card detail page.

    The multiverse id is not part of the page body; callers fill it in from
    the page URL.

    Args:
        page: Parsed page, or raw HTML

    Returns:
        Card with every field the page provides

    Raises:
        CardNotFoundError: If the page has no cardDetails table
        CardExtractionError: If the name row is missing or a present row
            has no value element
    """
    if not isinstance(page, bs4.BeautifulSoup):
        page = bs4.BeautifulSoup(page, "html.parser")

    details = find_first(page, all_of(is_tag("table"), has_class("cardDetails")))
    if details is None:
        raise CardNotFoundError("", "page has no cardDetails table")

    name_row = find_first(details, id_has_suffix("_nameRow"))
    if name_row is None:
        raise CardExtractionError("Card detail page has no name row")

    name = _row_value(name_row).get_text(strip=True)
    if not name:
        raise CardExtractionError("Card detail page has an empty name")

    mana_row = find_first(details, id_has_suffix("_manaRow"))
    cmc_row = find_first(details, id_has_suffix("_cmcRow"))
    type_row = find_first(details, id_has_suffix("_typeRow"))
    text_row = find_first(details, id_has_suffix("_textRow"))
    rarity_row = find_first(details, id_has_suffix("_rarityRow"))

    return Card(
        name=name,
        mana_cost=_parse_mana_cost(_row_value(mana_row)) if mana_row is not None else (),
        converted_mana_cost=_parse_cmc(_row_value(cmc_row)) if cmc_row is not None else 0,
        type=_row_value(type_row).get_text(strip=True) if type_row is not None else "",
        text=_parse_rules_text(_row_value(text_row)) if text_row is not None else "",
        rarity=_row_value(rarity_row).get_text(strip=True) if rarity_row is not None else "",
    )


def _row_value(row: PageElement) -> Tag:
    value = find_first(row, has_class("value"))
    if not isinstance(value, Tag):
        raise CardExtractionError(f"Row '{get_attr(row, 'id')}' has no value element")
    return value


def _parse_mana_cost(value: Tag) -> tuple[str, ...]:
    """
    Read cost symbols from the symbol images of a mana cost value.

    Numeric alt text is generic mana ("3"); colour names map to WUBRG.
    Anything else (hybrid, phyrexian, X) is skipped.
    """
    symbols: list[str] = []
    for child in value.find_all(recursive=False):
        part = get_attr(child, "alt")
        if part.isdecimal():
            symbols.append(str(int(part)))
            continue

        color = MANA_SYMBOLS.get(part.upper())
        if color is None:
            logger.warning("Unknown mana cost part: %r", part)
            continue
        symbols.append(color)

    return tuple(symbols)


def _parse_cmc(value: Tag) -> int:
    text = value.get_text(strip=True)
    try:
        return int(text)
    except ValueError:
        logger.debug("Unparsable converted mana cost %r, using 0", text)
        return 0


def _parse_rules_text(value: Tag) -> str:
    """Rules text, one line per text box, with symbols written as {alt}."""
    boxes = list(find_all(value, has_class("cardtextbox")))
    if not boxes:
        return _render_text(value).strip()
    return "\n".join(_render_text(box).strip() for box in boxes).strip()


def _render_text(node: Tag) -> str:
    parts: list[str] = []
    for element in node.descendants:
        if isinstance(element, Comment):
            continue
        if isinstance(element, NavigableString):
            parts.append(str(element))
        elif isinstance(element, Tag) and element.name == "img":
            parts.append("{" + get_attr(element, "alt") + "}")
    return "".join(parts)
