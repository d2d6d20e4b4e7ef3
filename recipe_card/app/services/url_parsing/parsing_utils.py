"""General parsing utilities for recipe extraction."""

import re
from typing import Any, List

TAG_RE = re.compile(r"<[^>]*>")
STEP_BOUNDARY_RE = re.compile(r"(?:\.\s+|\n+)")


def clean_text(text: str) -> str:
    """Normalize whitespace in text."""
    return re.sub(r"\s+", " ", text or "").strip()


def strip_tags(text: str) -> str:
    """Remove markup tags, leaving their inner text."""
    return TAG_RE.sub("", text or "")


def clean_instruction(text: str) -> str:
    """Strip tags and collapse whitespace in a single instruction step."""
    return clean_text(strip_tags(text))


def split_instruction_blob(text: str) -> List[str]:
    """Split a single block of instruction text into steps.

    Splits after a period followed by whitespace, or on newlines. The period
    at a boundary is dropped, so "Mix. Bake." gives ["Mix", "Bake."].
    """
    return [part for part in STEP_BOUNDARY_RE.split(text or "") if part.strip()]


def has_type(obj: Any, type_name: str) -> bool:
    """Check whether a JSON-LD object declares ``type_name`` as its @type."""
    if not isinstance(obj, dict):
        return False
    declared = obj.get("@type")
    if isinstance(declared, list):
        return type_name in declared
    return declared == type_name


def text_field(obj: dict, key: str) -> str:
    """Return ``obj[key]`` if it is a string, else an empty string."""
    value = obj.get(key)
    return value if isinstance(value, str) else ""
