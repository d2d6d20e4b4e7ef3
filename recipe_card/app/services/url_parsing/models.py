"""Pydantic models for recipe extraction."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Recipe(BaseModel):
    """A normalized recipe extracted from a page."""

    model_config = ConfigDict(frozen=True)

    title: str
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)


class ParseResult(BaseModel):
    """Result of a recipe extraction attempt."""

    success: bool
    recipe: Optional[Recipe] = None
    parser_strategy: Optional[str] = None
    source_url: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
