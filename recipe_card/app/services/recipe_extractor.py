"""Top-level recipe extraction: JSON-LD first, heuristic selectors second."""

import logging
from typing import Any, Optional, Protocol

from pydantic import BaseModel

from recipe_card.app.services.url_parsing.document import ParsedDocument
from recipe_card.app.services.url_parsing.extractors import (
    extract_recipe_from_schema_org,
    extract_recipe_heuristic,
)
from recipe_card.app.services.url_parsing.models import ParseResult, Recipe

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Could not find recipe data on this page. Try a different recipe site."
FETCH_FAILED_MESSAGE = "Failed to fetch the recipe page"


class PageLoadError(Exception):
    """Raised by a page loader when the page cannot be retrieved."""


class PageLoader(Protocol):
    async def load(self, url: str) -> str: ...


class RecipeRenderer(Protocol):
    def render(self, recipe: Recipe) -> Any: ...


def _extract(
    document: ParsedDocument, source_url: Optional[str]
) -> tuple[Optional[Recipe], Optional[str]]:
    recipe = extract_recipe_from_schema_org(document, source_url)
    if recipe:
        return recipe, "schema_org_json_ld"
    recipe = extract_recipe_heuristic(document, source_url)
    if recipe:
        return recipe, "heuristic"
    return None, None


def extract_recipe(document: ParsedDocument, source_url: Optional[str] = None) -> Optional[Recipe]:
    """Extract a recipe from a parsed page, or None when the page has none."""
    recipe, _ = _extract(document, source_url)
    return recipe


def parse_recipe_from_html(html: str, url: Optional[str] = None) -> ParseResult:
    document = ParsedDocument.from_html(html)
    recipe, strategy = _extract(document, url)
    if recipe is None:
        logger.info("No recipe data found for %s", url)
        return ParseResult(
            success=False,
            source_url=url,
            error_code="parse_failed",
            error_message=NOT_FOUND_MESSAGE,
        )
    return ParseResult(success=True, recipe=recipe, parser_strategy=strategy, source_url=url)


class RecipeCardResult(BaseModel):
    """Outcome of loading, extracting and rendering one page."""

    result: ParseResult
    rendered: Any = None


class RecipeCardService:
    """Wires a page loader and a renderer around the extractor."""

    def __init__(self, loader: PageLoader, renderer: RecipeRenderer):
        self.loader = loader
        self.renderer = renderer

    async def load_recipe(self, url: str) -> RecipeCardResult:
        try:
            html = await self.loader.load(url)
        except PageLoadError as exc:
            logger.warning("Failed to load %s: %s", url, exc)
            return RecipeCardResult(
                result=ParseResult(
                    success=False,
                    source_url=url,
                    error_code="fetch_failed",
                    error_message=FETCH_FAILED_MESSAGE,
                )
            )

        result = parse_recipe_from_html(html, url)
        if not result.success or not result.recipe:
            return RecipeCardResult(result=result)
        return RecipeCardResult(result=result, rendered=self.renderer.render(result.recipe))
