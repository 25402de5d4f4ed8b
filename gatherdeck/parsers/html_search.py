"""
Breadth-first search over BeautifulSoup trees.

Gatherer pages repeat the same markers (class tokens, id suffixes) across
nested layout tables, so which element "wins" depends on visiting order.
Everything here visits a node, then its direct children in document order,
level by level.
"""

from collections import deque
from collections.abc import Callable, Iterator

from bs4.element import PageElement, Tag

NodePredicate = Callable[[PageElement], bool]


def _search(root: PageElement, predicate: NodePredicate) -> Iterator[PageElement]:
    queue: deque[PageElement] = deque([root])
    while queue:
        node = queue.popleft()
        if predicate(node):
            yield node
        if isinstance(node, Tag):
            queue.extend(node.children)


def find_first(root: PageElement, predicate: NodePredicate) -> PageElement | None:
    """Return the first node matching predicate in breadth-first order, or None."""
    return next(_search(root, predicate), None)


def find_all(root: PageElement, predicate: NodePredicate) -> Iterator[PageElement]:
    """
    Yield every node matching predicate in breadth-first order.

    The result is a one-shot generator; wrap it in list() to reuse it.
    """
    return _search(root, predicate)


def get_attr(node: PageElement, name: str) -> str:
    """
    Attribute value of a node, or "" if absent or node is not a tag.

    Multi-valued attributes (class, rel, ...) are joined back with spaces.
    """
    if not isinstance(node, Tag):
        return ""
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def has_class(token: str) -> NodePredicate:
    """Match nodes whose class attribute contains token as a whole word."""

    def predicate(node: PageElement) -> bool:
        return token in get_attr(node, "class").split()

    return predicate


def id_has_suffix(suffix: str) -> NodePredicate:
    """Match nodes whose id ends with suffix."""

    def predicate(node: PageElement) -> bool:
        return isinstance(node, Tag) and get_attr(node, "id").endswith(suffix)

    return predicate


def is_tag(name: str) -> NodePredicate:
    """Match element nodes with the given tag name."""

    def predicate(node: PageElement) -> bool:
        return isinstance(node, Tag) and node.name == name

    return predicate


def all_of(*predicates: NodePredicate) -> NodePredicate:
    """Match nodes satisfying every predicate."""

    def predicate(node: PageElement) -> bool:
        return all(p(node) for p in predicates)

    return predicate
