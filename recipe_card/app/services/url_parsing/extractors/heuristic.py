"""Heuristic recipe extraction from common recipe-plugin markup."""

import logging
from typing import List, Optional

from recipe_card.app.services.url_parsing.document import ParsedDocument
from recipe_card.app.services.url_parsing.models import Recipe
from recipe_card.app.services.url_parsing.selector_rules import (
    INGREDIENT_SELECTORS,
    INSTRUCTION_SELECTORS,
    TITLE_SELECTORS,
    first_matching_selector,
)

logger = logging.getLogger(__name__)


def find_title(document: ParsedDocument) -> str:
    # A first match with blank text falls through to the next selector.
    return first_matching_selector(TITLE_SELECTORS, document.select_first_text) or ""


def find_ingredients(document: ParsedDocument) -> List[str]:
    return first_matching_selector(INGREDIENT_SELECTORS, document.select_texts) or []


def find_instructions(document: ParsedDocument) -> List[str]:
    return first_matching_selector(INSTRUCTION_SELECTORS, document.select_texts) or []


def extract_recipe_heuristic(
    document: ParsedDocument, url: Optional[str] = None
) -> Optional[Recipe]:
    """Assemble a recipe from known selectors.

    Returns None unless a title and at least one ingredient or instruction
    were found.
    """
    title = find_title(document)
    ingredients = find_ingredients(document)
    instructions = find_instructions(document)
    logger.info(
        "Heuristic scan for %s: title=%s, ingredients=%d, instructions=%d",
        url,
        title[:50] if title else "None",
        len(ingredients),
        len(instructions),
    )

    if title and (ingredients or instructions):
        return Recipe(title=title, ingredients=ingredients, instructions=instructions)
    return None
