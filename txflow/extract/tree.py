"""
Tree query capability over a parsed page.

`TreeQuery` is the only interface the extractor uses to read the page:
find every match of a selector under a scope, find the next element
sibling matching one of several selectors, find a single descendant,
and read an element's text.  `SoupTreeQuery` implements it on top of
BeautifulSoup's CSS support (soupsieve).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


class TreeQuery(ABC):
    """Read‑only access to a document tree."""

    @abstractmethod
    def find_all_in(self, scope: str, selector: str) -> List[Any]:
        """Return every node matching ``selector`` inside each ``scope`` match, in document order."""
        raise NotImplementedError

    @abstractmethod
    def find_next_sibling_matching(self, node: Any, selectors: Sequence[str]) -> Optional[Any]:
        """Return the next element sibling of ``node`` if it matches any of ``selectors``."""
        raise NotImplementedError

    @abstractmethod
    def select_one(self, node: Any, selector: str) -> Optional[Any]:
        """Return the first descendant of ``node`` matching ``selector``, or ``None``."""
        raise NotImplementedError

    @abstractmethod
    def text_of(self, node: Any) -> str:
        """Return the text content of ``node``."""
        raise NotImplementedError


class SoupTreeQuery(TreeQuery):
    """`TreeQuery` backed by a BeautifulSoup document."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> "SoupTreeQuery":
        return cls(BeautifulSoup(html, "html.parser"))

    def find_all_in(self, scope: str, selector: str) -> List[Tag]:
        # Equivalent to querySelectorAll("<scope> <selector>").
        return self.soup.select(f"{scope} {selector}")

    def find_next_sibling_matching(self, node: Tag, selectors: Sequence[str]) -> Optional[Tag]:
        sibling = node.find_next_sibling()
        if sibling is None or not selectors:
            return None
        if sibling.css.match(", ".join(selectors)):
            return sibling
        return None

    def select_one(self, node: Tag, selector: str) -> Optional[Tag]:
        return node.select_one(selector)

    def text_of(self, node: Tag) -> str:
        # Separate child elements the way innerText separates block elements.
        return node.get_text(" ")


def strip_images(soup: BeautifulSoup, scope: str = "#transaction_grid_wrapper") -> int:
    """Remove every ``<img>`` inside ``scope`` and return how many were removed.

    Check images are embedded in the expanded panels; dropping them keeps
    their alt text out of the extracted fields.  Running this twice is
    harmless.
    """
    images = soup.select(f"{scope} img")
    for img in images:
        img.decompose()
    if images:
        logger.debug("Removed %d images from %s", len(images), scope)
    return len(images)
