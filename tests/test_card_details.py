import logging

import bs4
import pytest

from gatherdeck.models.errors import CardExtractionError, CardNotFoundError
from gatherdeck.parsers.card_details import extract_card


def details_page(*rows: str) -> str:
    """Minimal detail page containing the given rows."""
    return (
        '<html><body><table class="cardDetails"><tr><td class="rightCol">'
        + "".join(rows)
        + "</td></tr></table></body></html>"
    )


def row(suffix: str, value_html: str) -> str:
    return (
        f'<div id="ctl00_MainContent{suffix}" class="row">'
        f'<div class="label">Label:</div><div class="value">{value_html}</div></div>'
    )


class TestExtractCard:
    def test_extracts_all_fields(self, shivan_details_html: str) -> None:
        card = extract_card(shivan_details_html)

        assert card.name == "Shivan Dragon"
        assert card.mana_cost == ("4", "R", "R")
        assert card.converted_mana_cost == 6
        assert card.type == "Creature  — Dragon"
        assert card.rarity == "Rare"
        assert card.multiverse_id == 0

    def test_rules_text_lines_and_symbols(self, shivan_details_html: str) -> None:
        card = extract_card(shivan_details_html)

        assert card.text == "Flying\n{Red}: Shivan Dragon gets +1/+0 until end of turn."

    def test_accepts_parsed_soup(self, shivan_details_html: str) -> None:
        soup = bs4.BeautifulSoup(shivan_details_html, "html.parser")

        assert extract_card(soup).name == "Shivan Dragon"

    def test_accepts_bytes(self, shivan_details_html: str) -> None:
        assert extract_card(shivan_details_html.encode("utf-8")).name == "Shivan Dragon"

    def test_land_without_cost_rows(self, forest_details_html: str) -> None:
        """Missing optional rows leave their fields empty."""
        card = extract_card(forest_details_html)

        assert card.name == "Forest"
        assert card.mana_cost == ()
        assert card.converted_mana_cost == 0
        assert card.type == "Basic Land  — Forest"
        assert card.text == "({Tap}: Add {Green}.)"
        assert card.rarity == "Common"
        assert card.is_land()

    def test_not_a_detail_page(self) -> None:
        with pytest.raises(CardNotFoundError, match="cardDetails"):
            extract_card("<html><body><p>Search results</p></body></html>")

    def test_missing_name_row(self) -> None:
        page = details_page(row("_typeRow", "Instant"))

        with pytest.raises(CardExtractionError, match="name row"):
            extract_card(page)

    def test_empty_name(self) -> None:
        with pytest.raises(CardExtractionError, match="empty name"):
            extract_card(details_page(row("_nameRow", "   ")))

    def test_row_without_value_is_an_error(self) -> None:
        page = details_page(
            row("_nameRow", "Lightning Bolt"),
            '<div id="ctl00_MainContent_typeRow" class="row"><div class="label">Types:</div></div>',
        )

        with pytest.raises(CardExtractionError, match="_typeRow"):
            extract_card(page)

    def test_unknown_mana_symbol_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        page = details_page(
            row("_nameRow", "Endless Ranks"),
            row("_manaRow", '<img alt="Variable Colorless" /><img alt="2" /><img alt="white" />'),
        )

        with caplog.at_level(logging.WARNING, logger="gatherdeck.parsers.card_details"):
            card = extract_card(page)

        assert card.mana_cost == ("2", "W")
        assert "Variable Colorless" in caplog.text

    def test_mana_symbols_are_case_insensitive(self) -> None:
        page = details_page(
            row("_nameRow", "Dimir Signet"),
            row("_manaRow", '<img alt="BLUE" /><img alt="Black" /><img alt="green" />'),
        )

        assert extract_card(page).mana_cost == ("U", "B", "G")

    def test_unparsable_cmc_defaults_to_zero(self) -> None:
        page = details_page(row("_nameRow", "Oddity"), row("_cmcRow", "one half"))

        assert extract_card(page).converted_mana_cost == 0

    def test_text_without_text_boxes(self) -> None:
        page = details_page(row("_nameRow", "Plain Text"), row("_textRow", "  Draw a card.  "))

        assert extract_card(page).text == "Draw a card."

    def test_first_row_in_visiting_order_wins(self) -> None:
        """A name row nested deeper in the table loses to a shallower one."""
        page = (
            '<html><body><table class="cardDetails"><tr><td>'
            '<div><div><div id="x_nameRow"><div class="value">Deep Name</div></div></div></div>'
            '<div id="y_nameRow"><div class="value">Shallow Name</div></div>'
            "</td></tr></table></body></html>"
        )

        assert extract_card(page).name == "Shallow Name"
