"""Read-only view over a parsed HTML page."""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from recipe_card.app.core.config import get_settings

logger = logging.getLogger(__name__)

JSON_LD_SELECTOR = 'script[type="application/ld+json"]'


class ParsedDocument:
    """A parsed page offering JSON-LD blocks and selector lookups.

    Extractors only read from the underlying soup, so the same document can
    be handed to several extraction passes.
    """

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    @classmethod
    def from_html(cls, html: str, parser: Optional[str] = None) -> "ParsedDocument":
        return cls(BeautifulSoup(html or "", parser or get_settings().html_parser))

    def structured_data_blocks(self) -> List[str]:
        """Return the raw text of every JSON-LD script, in document order."""
        blocks = []
        for script in self._soup.select(JSON_LD_SELECTOR):
            blocks.append(script.string or script.get_text() or "")
        return blocks

    def select_texts(self, selector: str) -> List[str]:
        """Return the trimmed text of every element matching ``selector``."""
        try:
            elements = self._soup.select(selector)
        except SelectorSyntaxError as exc:
            logger.warning("Invalid selector %r: %s", selector, exc)
            return []
        return [el.get_text().strip() for el in elements]

    def select_first_text(self, selector: str) -> Optional[str]:
        try:
            element = self._soup.select_one(selector)
        except SelectorSyntaxError as exc:
            logger.warning("Invalid selector %r: %s", selector, exc)
            return None
        if element is None:
            return None
        return element.get_text().strip()
