"""Recipe extractors for different parsing strategies."""

from recipe_card.app.services.url_parsing.extractors.heuristic import (
    extract_recipe_heuristic,
)
from recipe_card.app.services.url_parsing.extractors.schema_org import (
    extract_recipe_from_schema_org,
    find_recipe_record,
)

__all__ = [
    "extract_recipe_from_schema_org",
    "extract_recipe_heuristic",
    "find_recipe_record",
]
