from pathlib import Path

import pytest

from gatherdeck.services.card_cache import CardCache, get_card_cache

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clear_process_card_cache():
    """Clear the process-wide card cache between tests.

    GathererClient falls back to the shared cache when none is injected, so
    a card resolved in one test would otherwise be served from cache in the
    next.
    """
    get_card_cache().clear()
    yield
    get_card_cache().clear()


@pytest.fixture
def card_cache() -> CardCache:
    """A fresh, test-local card cache."""
    return CardCache()


@pytest.fixture
def shivan_details_html() -> str:
    return (FIXTURES_DIR / "gatherer_details_shivan.html").read_text(encoding="utf-8")


@pytest.fixture
def forest_details_html() -> str:
    return (FIXTURES_DIR / "gatherer_details_forest.html").read_text(encoding="utf-8")


@pytest.fixture
def forest_search_html() -> str:
    return (FIXTURES_DIR / "gatherer_search_forest.html").read_text(encoding="utf-8")


@pytest.fixture
def sample_deck_list() -> str:
    """Sample .dec deck list for testing."""
    return """4 Shivan Dragon
4 Lightning Bolt
2 Forest

3 Forest
SB: 2 Negate
SB:1 Negate
SB: 3 Forest"""
