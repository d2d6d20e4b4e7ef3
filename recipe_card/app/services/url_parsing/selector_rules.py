"""CSS selectors for heuristic recipe extraction, most specific first."""

from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")

TITLE_SELECTORS = (
    "h1.recipe-title",
    "h1.entry-title",
    ".recipe-name",
    'h1[itemprop="name"]',
    ".tasty-recipes-title",
    "h2.wprm-recipe-name",
    "h1",
)

INGREDIENT_SELECTORS = (
    '[itemprop="recipeIngredient"]',
    ".ingredient",
    ".ingredients li",
    ".recipe-ingredients li",
    ".wprm-recipe-ingredient",
    ".tasty-recipes-ingredients li",
)

INSTRUCTION_SELECTORS = (
    '[itemprop="recipeInstructions"]',
    ".instructions li",
    ".recipe-instructions li",
    ".directions li",
    ".wprm-recipe-instruction",
    ".tasty-recipes-instructions li",
)


def first_matching_selector(
    selectors: Sequence[str], lookup: Callable[[str], Optional[T]]
) -> Optional[T]:
    """Return ``lookup(selector)`` for the first selector giving a truthy result."""
    for selector in selectors:
        result = lookup(selector)
        if result:
            return result
    return None
