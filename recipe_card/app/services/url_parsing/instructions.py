"""Decoding of schema.org ``recipeInstructions`` items.

Publishers ship instruction items in several shapes: bare strings,
``HowToStep`` objects and ``HowToSection`` objects wrapping their own steps.
Each item is decoded into one variant below and resolved to a single line of
text.
"""

from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict

from recipe_card.app.services.url_parsing.parsing_utils import has_type, text_field


class PlainInstruction(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str

    def resolve(self) -> str:
        return self.text


class StepObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    name: str = ""

    def resolve(self) -> str:
        return self.text or self.name


class SectionObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    name: str = ""
    steps: List[str] = []

    def resolve(self) -> str:
        # A section's own text or heading takes precedence over its steps.
        return self.text or self.name or " ".join(self.steps)


class Unrecognized(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw: Any = None

    def resolve(self) -> str:
        return ""


InstructionItem = Union[PlainInstruction, StepObject, SectionObject, Unrecognized]


def _section_step_text(step: Any) -> str:
    if isinstance(step, str):
        return step
    if isinstance(step, dict):
        return text_field(step, "text") or text_field(step, "name")
    return ""


def decode_instruction(item: Any) -> InstructionItem:
    """Decode one raw ``recipeInstructions`` entry into a tagged variant."""
    if isinstance(item, str):
        return PlainInstruction(text=item)
    if not isinstance(item, dict):
        return Unrecognized(raw=item)
    if has_type(item, "HowToSection"):
        elements = item.get("itemListElement")
        if not isinstance(elements, list):
            elements = []
        return SectionObject(
            text=text_field(item, "text"),
            name=text_field(item, "name"),
            steps=[_section_step_text(step) for step in elements],
        )
    return StepObject(text=text_field(item, "text"), name=text_field(item, "name"))
