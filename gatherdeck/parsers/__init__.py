from gatherdeck.parsers.card_details import extract_card
from gatherdeck.parsers.deck_list import (
    MalformedLineError,
    parse_deck_file,
    parse_deck_list,
    parse_deck_stream,
)
from gatherdeck.parsers.html_search import find_all, find_first, has_class, id_has_suffix

__all__ = [
    "MalformedLineError",
    "extract_card",
    "find_all",
    "find_first",
    "has_class",
    "id_has_suffix",
    "parse_deck_file",
    "parse_deck_list",
    "parse_deck_stream",
]
