from concurrent.futures import ThreadPoolExecutor

from gatherdeck.models.card import Card
from gatherdeck.services.card_cache import CardCache, get_card_cache


class TestCardCache:
    def test_miss_returns_none(self, card_cache: CardCache) -> None:
        assert card_cache.get("Forest") is None
        assert "Forest" not in card_cache

    def test_publish_then_get(self, card_cache: CardCache) -> None:
        forest = Card(name="Forest", multiverse_id=289326)

        stored = card_cache.publish("Forest", forest)

        assert stored is forest
        assert card_cache.get("Forest") is forest
        assert len(card_cache) == 1

    def test_first_publication_wins(self, card_cache: CardCache) -> None:
        first = Card(name="Forest", multiverse_id=1)
        second = Card(name="Forest", multiverse_id=2)

        card_cache.publish("Forest", first)
        stored = card_cache.publish("Forest", second)

        assert stored is first
        assert card_cache.get("Forest").multiverse_id == 1

    def test_keyed_by_queried_name(self, card_cache: CardCache) -> None:
        """The key is the name looked up, not the card's canonical name."""
        card = Card(name="Fire // Ice")

        card_cache.publish("Fire", card)

        assert card_cache.get("Fire") is card
        assert card_cache.get("Fire // Ice") is None

    def test_clear(self, card_cache: CardCache) -> None:
        card_cache.publish("Forest", Card(name="Forest"))
        card_cache.publish("Island", Card(name="Island"))

        card_cache.clear()

        assert len(card_cache) == 0
        assert card_cache.get("Forest") is None

    def test_concurrent_publication_agrees(self, card_cache: CardCache) -> None:
        """Racing publishers all get back the same stored card."""
        candidates = [Card(name="Forest", multiverse_id=i) for i in range(50)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda c: card_cache.publish("Forest", c), candidates))

        stored = card_cache.get("Forest")
        assert all(result is stored for result in results)
        assert len(card_cache) == 1


class TestGetCardCache:
    def test_returns_same_instance(self) -> None:
        assert get_card_cache() is get_card_cache()

    def test_is_a_card_cache(self) -> None:
        assert isinstance(get_card_cache(), CardCache)
