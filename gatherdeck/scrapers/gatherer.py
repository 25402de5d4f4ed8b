"""
Wizards Gatherer card lookup.

Resolves card names to Cards by scraping Gatherer:

1. Search by name. Each word is wrapped as "+[word]" so Gatherer only
   matches whole words.
2. Gatherer either redirects straight to the card's detail page (single
   hit), shows a result table (several hits), or redirects to its error
   page (no hits).
3. From a result table, follow the row whose title is exactly the name.
4. Extract the card from the detail page.

Note: Web scraping is inherently fragile. Page structure may change.
"""

import dataclasses
import logging
from types import TracebackType

import bs4
import httpx

from gatherdeck.config import settings
from gatherdeck.models.card import Card
from gatherdeck.models.errors import (
    CardNotFoundError,
    TransportError,
    UnexpectedResponseError,
)
from gatherdeck.parsers.card_details import extract_card
from gatherdeck.parsers.html_search import (
    all_of,
    find_all,
    find_first,
    get_attr,
    has_class,
    is_tag,
)
from gatherdeck.scrapers.paths import resolve_path
from gatherdeck.services.card_cache import CardCache, get_card_cache

logger = logging.getLogger(__name__)

DETAILS_PATH = "/Pages/Card/Details.aspx"
SEARCH_PATH = "/Pages/Search/Default.aspx"
ERROR_PATH = "/Pages/Error.aspx"


def build_search_query(card_name: str) -> str:
    """
    Build the Gatherer "name" search parameter for a card.

    Example:
        >>> build_search_query("Lightning Bolt")
        '+[Lightning]+[Bolt]'
    """
    return "".join(f"+[{word}]" for word in card_name.split())


def find_result_link(page: bs4.BeautifulSoup, card_name: str) -> str:
    """
    Find the detail link for card_name on a search result page.

    Args:
        page: Parsed search result page
        card_name: Name that must match a result title exactly

    Returns:
        The matching row's href, as found in the page (usually relative)

    Raises:
        CardNotFoundError: If the page has no results or no exact match
    """
    table = find_first(page, all_of(is_tag("table"), has_class("cardItemTable")))
    if table is None:
        raise CardNotFoundError(card_name, "has no search results; perhaps it is misspelled?")

    rows = list(find_all(table, all_of(is_tag("tr"), has_class("cardItem"))))
    if not rows:
        raise CardNotFoundError(card_name, "has no rows in the search result table")

    for row in rows:
        title = find_first(row, all_of(is_tag("span"), has_class("cardTitle")))
        if title is None:
            continue
        link = find_first(title, is_tag("a"))
        if link is None:
            continue
        if link.get_text() == card_name:
            return get_attr(link, "href")

    raise CardNotFoundError(card_name, "not found on search result page")


class GathererClient:
    """
    Async Gatherer client backed by a shared CardCache.

    Use as an async context manager, or call aclose() when done. An injected
    httpx.AsyncClient is left open for its owner to close.

    Args:
        cache: Card cache to read and publish to. Defaults to the
            process-wide cache.
        client: Optional httpx client for connection reuse
        base_url: Gatherer root URL. Defaults to settings.gatherer_base_url
        max_hops: Search result pages to follow per lookup before giving up
    """

    def __init__(
        self,
        cache: CardCache | None = None,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        max_hops: int | None = None,
    ) -> None:
        self.cache = cache if cache is not None else get_card_cache()
        self.base_url = (base_url or settings.gatherer_base_url).rstrip("/")
        self.max_hops = settings.max_search_hops if max_hops is None else max_hops

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": settings.user_agent},
            follow_redirects=True,
            timeout=settings.request_timeout,
        )

    async def __aenter__(self) -> "GathererClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_card(self, card_name: str) -> Card:
        """
        Resolve a card by exact name.

        Served from the cache when possible; otherwise Gatherer is searched
        and the result is cached under card_name.

        Raises:
            CardNotFoundError: If Gatherer has no card with this name
            TransportError: If a request fails (nothing is cached)
            UnexpectedResponseError: If Gatherer returns an unknown page
            CardExtractionError: If the detail page is malformed
        """
        cached = self.cache.get(card_name)
        if cached is not None:
            logger.debug("Cache hit for %r", card_name)
            return cached

        response = await self._get(
            f"{self.base_url}{SEARCH_PATH}",
            params={"name": build_search_query(card_name)},
        )

        hops = 0
        while True:
            path = response.url.path

            if path == DETAILS_PATH:
                try:
                    card = self._card_from_response(response)
                except CardNotFoundError as e:
                    raise CardNotFoundError(card_name, e.reason) from e
                return self.cache.publish(card_name, card)

            if path == ERROR_PATH:
                raise CardNotFoundError(card_name, "does not exist in Gatherer")

            if path != SEARCH_PATH:
                raise UnexpectedResponseError(str(response.url), f"unknown page path {path}")

            if hops >= self.max_hops:
                raise UnexpectedResponseError(
                    str(response.url),
                    f"still on search results after {hops} hops for '{card_name}'",
                )
            hops += 1

            page = bs4.BeautifulSoup(response.content, "html.parser")
            href = find_result_link(page, card_name)
            try:
                next_url = response.url.join(resolve_path(path, href))
            except httpx.InvalidURL as e:
                raise UnexpectedResponseError(
                    str(response.url), f"invalid result link {href!r}: {e}"
                ) from e
            response = await self._get(str(next_url))

    async def fetch_card(self, multiverse_id: int) -> Card:
        """
        Fetch a card by its multiverse id.

        Bypasses the name cache.

        Raises:
            CardNotFoundError: If Gatherer has no card with this id
            TransportError: If the request fails
            UnexpectedResponseError: If Gatherer returns an unknown page
        """
        response = await self._get(
            f"{self.base_url}{DETAILS_PATH}",
            params={"multiverseid": str(multiverse_id)},
        )

        path = response.url.path
        if path == ERROR_PATH:
            raise CardNotFoundError(f"multiverseid={multiverse_id}", "does not exist in Gatherer")
        if path != DETAILS_PATH:
            raise UnexpectedResponseError(str(response.url), f"unknown page path {path}")

        try:
            card = extract_card(bs4.BeautifulSoup(response.content, "html.parser"))
        except CardNotFoundError as e:
            raise CardNotFoundError(f"multiverseid={multiverse_id}", e.reason) from e
        return dataclasses.replace(card, multiverse_id=multiverse_id)

    async def _get(self, url: str, params: dict[str, str] | None = None) -> httpx.Response:
        logger.debug("GET %s params=%s", url, params)
        try:
            response = await self._client.get(url, params=params, follow_redirects=True)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(url, e) from e
        return response

    def _card_from_response(self, response: httpx.Response) -> Card:
        card = extract_card(bs4.BeautifulSoup(response.content, "html.parser"))

        multiverse_id = response.url.params.get("multiverseid")
        if not multiverse_id:
            return card

        try:
            return dataclasses.replace(card, multiverse_id=int(multiverse_id))
        except ValueError:
            logger.warning("Ignoring invalid multiverseid %r in %s", multiverse_id, response.url)
            return card
