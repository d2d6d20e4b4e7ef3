#!/usr/bin/env python
"""
Extract a recipe card from a saved HTML page.

Usage:
    python scripts/extract_recipe.py page.html --url https://example.com/soup
"""
import argparse
import logging
import sys
from pathlib import Path

from recipe_card.app.core.config import get_settings
from recipe_card.app.services.recipe_extractor import parse_recipe_from_html
from recipe_card.app.services.renderers import PlainTextRenderer

logger = logging.getLogger("extract_recipe")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Extract a recipe from an HTML file")
    parser.add_argument("path", type=Path, help="HTML file to read")
    parser.add_argument("--url", default=None, help="Source URL of the page")
    parser.add_argument("--json", action="store_true", help="Print the recipe as JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_settings().log_level_value)

    try:
        html = args.path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.error("Unable to read %s: %s", args.path, exc)
        return 1

    result = parse_recipe_from_html(html, args.url or args.path.resolve().as_uri())
    if not result.success or not result.recipe:
        print(result.error_message, file=sys.stderr)
        return 1

    if args.json:
        print(result.recipe.model_dump_json(indent=2))
    else:
        print(PlainTextRenderer().render(result.recipe), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
