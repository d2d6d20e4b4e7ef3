"""Schema.org JSON-LD recipe extraction."""

import json
import logging
from typing import Any, Optional

from recipe_card.app.services.url_parsing.document import ParsedDocument
from recipe_card.app.services.url_parsing.models import Recipe
from recipe_card.app.services.url_parsing.normalizer import normalize_recipe
from recipe_card.app.services.url_parsing.parsing_utils import has_type

logger = logging.getLogger(__name__)


def _match_recipe(data: Any) -> Optional[dict]:
    """Return the first Recipe-typed object in a decoded JSON-LD value."""
    if isinstance(data, dict) and isinstance(data.get("@graph"), (list, dict)):
        data = data["@graph"]
        logger.debug("Unwrapped @graph container")

    if isinstance(data, list):
        for obj_idx, obj in enumerate(data):
            if has_type(obj, "Recipe"):
                logger.info("Recipe found at list position %d", obj_idx)
                return obj
        return None
    if has_type(data, "Recipe"):
        return data
    return None


def find_recipe_record(document: ParsedDocument) -> Optional[dict]:
    """Scan JSON-LD blocks in order and return the first Recipe object.

    Blocks that fail to decode are skipped.
    """
    blocks = document.structured_data_blocks()
    logger.info("Found %d JSON-LD script blocks", len(blocks))

    for idx, raw_json in enumerate(blocks):
        if not raw_json.strip():
            logger.debug("JSON-LD block %d is empty", idx)
            continue
        try:
            data = json.loads(raw_json)
        except (ValueError, RecursionError) as exc:
            logger.warning(
                "JSON-LD block %d failed to parse: %s (first 200 chars: %s)",
                idx,
                exc,
                raw_json[:200],
            )
            continue

        record = _match_recipe(data)
        if record is not None:
            logger.info("Using Recipe from JSON-LD block %d", idx)
            return record
        logger.debug("JSON-LD block %d has no Recipe", idx)
    return None


def extract_recipe_from_schema_org(
    document: ParsedDocument, url: Optional[str] = None
) -> Optional[Recipe]:
    """Extract and normalize the first schema.org Recipe embedded in the page."""
    record = find_recipe_record(document)
    if record is None:
        return None
    recipe = normalize_recipe(record)
    logger.info(
        "Schema.org recipe for %s: title=%s, ingredients=%d, instructions=%d",
        url,
        recipe.title[:50],
        len(recipe.ingredients),
        len(recipe.instructions),
    )
    return recipe
