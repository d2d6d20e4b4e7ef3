"""Normalization of schema.org Recipe objects into ``Recipe`` records."""

import logging
from typing import Any, List

from recipe_card.app.services.url_parsing.instructions import decode_instruction
from recipe_card.app.services.url_parsing.models import Recipe
from recipe_card.app.services.url_parsing.parsing_utils import (
    clean_instruction,
    split_instruction_blob,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Recipe"


def normalize_title(value: Any) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return DEFAULT_TITLE


def normalize_ingredients(value: Any) -> List[str]:
    """Accept a single ingredient string or a list of them."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [item for item in value if isinstance(item, str)]
    if value is not None:
        logger.debug("Ignoring recipeIngredient of type %s", type(value).__name__)
    return []


def normalize_instructions(value: Any) -> List[str]:
    """Flatten the accepted ``recipeInstructions`` shapes into cleaned steps."""
    if isinstance(value, str):
        raw_steps = split_instruction_blob(value)
    elif isinstance(value, list):
        raw_steps = [decode_instruction(item).resolve() for item in value]
    else:
        if value is not None:
            logger.debug("Ignoring recipeInstructions of type %s", type(value).__name__)
        raw_steps = []

    steps = []
    for raw in raw_steps:
        cleaned = clean_instruction(raw)
        if cleaned:
            steps.append(cleaned)
    return steps


def normalize_recipe(record: dict) -> Recipe:
    """Build a ``Recipe`` from a Recipe-typed JSON-LD object.

    Missing or oddly shaped fields fall back to defaults; this never raises.
    """
    return Recipe(
        title=normalize_title(record.get("name")),
        ingredients=normalize_ingredients(record.get("recipeIngredient")),
        instructions=normalize_instructions(record.get("recipeInstructions")),
    )
