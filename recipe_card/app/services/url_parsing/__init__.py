"""Recipe page parsing package.

This package extracts recipes from already-loaded HTML using two strategies:
schema.org JSON-LD first, then heuristic selectors over common recipe markup.
"""

from recipe_card.app.services.url_parsing.document import ParsedDocument
from recipe_card.app.services.url_parsing.instructions import (
    InstructionItem,
    PlainInstruction,
    SectionObject,
    StepObject,
    Unrecognized,
    decode_instruction,
)
from recipe_card.app.services.url_parsing.models import ParseResult, Recipe
from recipe_card.app.services.url_parsing.normalizer import (
    DEFAULT_TITLE,
    normalize_ingredients,
    normalize_instructions,
    normalize_recipe,
    normalize_title,
)
from recipe_card.app.services.url_parsing.parsing_utils import (
    clean_instruction,
    clean_text,
    has_type,
    split_instruction_blob,
    strip_tags,
)
from recipe_card.app.services.url_parsing.selector_rules import first_matching_selector

__all__ = [
    # Models
    "ParseResult",
    "Recipe",
    # Document
    "ParsedDocument",
    # Instruction variants
    "InstructionItem",
    "PlainInstruction",
    "SectionObject",
    "StepObject",
    "Unrecognized",
    "decode_instruction",
    # Normalization
    "DEFAULT_TITLE",
    "normalize_ingredients",
    "normalize_instructions",
    "normalize_recipe",
    "normalize_title",
    # Parsing utilities
    "clean_instruction",
    "clean_text",
    "first_matching_selector",
    "has_type",
    "split_instruction_blob",
    "strip_tags",
]
