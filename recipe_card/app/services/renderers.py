"""Renderers that turn a ``Recipe`` into something a user can read."""

from recipe_card.app.services.url_parsing.models import Recipe


class PlainTextRenderer:
    """Render a recipe as a plain-text card."""

    def render(self, recipe: Recipe) -> str:
        lines = [recipe.title, "=" * len(recipe.title), "", "Ingredients"]
        lines.extend(f"  - {ingredient}" for ingredient in recipe.ingredients)
        lines.extend(["", "Instructions"])
        lines.extend(
            f"  {number}. {step}" for number, step in enumerate(recipe.instructions, start=1)
        )
        return "\n".join(lines) + "\n"
