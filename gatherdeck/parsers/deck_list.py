"""
Parser for .dec style deck lists.

Format, one card per line:
    <quantity> <card name>

Example:
    4 Lightning Bolt
    20 Mountain
    SB: 2 Negate

Lines starting with "SB:" belong to the sideboard. Blank lines are ignored;
nothing else (comments, section headers) is recognised.
"""

import io
import re
from collections.abc import Iterable
from pathlib import Path

# Pattern: "4 Lightning Bolt"
# Groups: (quantity, card_name); the name is the rest of the line verbatim
DECK_LINE_PATTERN = re.compile(r"^([0-9]+) (.+)$")

SIDEBOARD_PREFIX = "SB:"


class MalformedLineError(ValueError):
    """Raised when a deck-list line is not a valid card definition."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"line '{line}' is not a valid card definition")


def parse_card_line(line: str) -> tuple[int, str]:
    """
    Parse a single "<quantity> <name>" line.

    Args:
        line: Trimmed line without any sideboard prefix

    Returns:
        Tuple of (quantity, card name)

    Raises:
        MalformedLineError: If the line does not match or the quantity is 0
    """
    match = DECK_LINE_PATTERN.match(line)
    if not match:
        raise MalformedLineError(line)

    quantity_text, name = match.groups()
    try:
        quantity = int(quantity_text)
    except ValueError:
        raise MalformedLineError(line) from None

    if quantity < 1:
        raise MalformedLineError(line)

    return quantity, name


def parse_deck_stream(lines: Iterable[str]) -> tuple[dict[str, int], dict[str, int]]:
    """
    Parse deck-list lines into maindeck and sideboard counts.

    Args:
        lines: Any iterable of lines, such as an open text file. Errors
            raised while reading it propagate unchanged.

    Returns:
        Tuple of ({name: quantity} maindeck, {name: quantity} sideboard).
        Repeated names within a section accumulate.

    Raises:
        MalformedLineError: On the first line that is not a card definition
    """
    main: dict[str, int] = {}
    sideboard: dict[str, int] = {}

    for raw_line in lines:
        line = raw_line.strip()

        if not line:
            continue

        section = main
        if line.startswith(SIDEBOARD_PREFIX):
            section = sideboard
            line = line[len(SIDEBOARD_PREFIX) :].strip()

        quantity, name = parse_card_line(line)
        section[name] = section.get(name, 0) + quantity

    return main, sideboard


def parse_deck_list(text: str) -> tuple[dict[str, int], dict[str, int]]:
    """
    Parse deck-list text into maindeck and sideboard counts.

    Args:
        text: Raw deck-list text

    Returns:
        Tuple of ({name: quantity} maindeck, {name: quantity} sideboard)

    Raises:
        MalformedLineError: On the first invalid line
    """
    return parse_deck_stream(io.StringIO(text, newline=None))


def parse_deck_file(path: Path | str) -> tuple[dict[str, int], dict[str, int]]:
    """
    Parse a UTF-8 deck-list file.

    Raises:
        OSError: If the file cannot be opened or read
        MalformedLineError: On the first invalid line
    """
    with open(path, encoding="utf-8") as f:
        return parse_deck_stream(f)
