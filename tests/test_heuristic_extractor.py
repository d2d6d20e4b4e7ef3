from recipe_card.app.services.url_parsing.extractors import heuristic
from recipe_card.app.services.url_parsing.selector_rules import first_matching_selector


def test_wprm_markup(make_document):
    doc = make_document(
        """
        <html><body>
          <h1 class="entry-title">  Weeknight Curry </h1>
          <h2 class="wprm-recipe-name">Curry (card)</h2>
          <ul>
            <li class="wprm-recipe-ingredient">1 tbsp oil</li>
            <li class="wprm-recipe-ingredient"> 2 onions </li>
          </ul>
          <div class="wprm-recipe-instruction">Fry the onions.</div>
          <div class="wprm-recipe-instruction">Add the paste.</div>
        </body></html>
        """
    )
    recipe = heuristic.extract_recipe_heuristic(doc, "https://example.com/curry")
    assert recipe is not None
    assert recipe.title == "Weeknight Curry"
    assert recipe.ingredients == ["1 tbsp oil", "2 onions"]
    assert recipe.instructions == ["Fry the onions.", "Add the paste."]


def test_title_and_ingredients_only(make_document):
    doc = make_document(
        """
        <html><body>
          <h1>Garden Salad</h1>
          <ul class="ingredients"><li>Lettuce</li><li>Tomato</li></ul>
        </body></html>
        """
    )
    recipe = heuristic.extract_recipe_heuristic(doc)
    assert recipe is not None
    assert recipe.title == "Garden Salad"
    assert recipe.ingredients == ["Lettuce", "Tomato"]
    assert recipe.instructions == []


def test_higher_priority_selector_wins(make_document):
    doc = make_document(
        """
        <html><body>
          <h1>Generic Heading</h1>
          <div class="recipe-name">Specific Name</div>
          <span itemprop="recipeIngredient">3 apples</span>
          <ul class="ingredients"><li>ignored</li></ul>
          <ol class="directions"><li>Peel</li><li>Slice</li></ol>
        </body></html>
        """
    )
    recipe = heuristic.extract_recipe_heuristic(doc)
    assert recipe.title == "Specific Name"
    assert recipe.ingredients == ["3 apples"]
    assert recipe.instructions == ["Peel", "Slice"]


def test_blank_title_match_falls_through(make_document):
    doc = make_document(
        """
        <html><body>
          <h1 class="recipe-title">   </h1>
          <h1 class="entry-title">Fallback Title</h1>
          <ol class="instructions"><li>Stir</li></ol>
        </body></html>
        """
    )
    recipe = heuristic.extract_recipe_heuristic(doc)
    assert recipe.title == "Fallback Title"
    assert recipe.instructions == ["Stir"]


def test_title_without_content_is_not_a_recipe(make_document):
    doc = make_document("<html><body><h1>About us</h1><p>Hello</p></body></html>")
    assert heuristic.extract_recipe_heuristic(doc) is None


def test_content_without_title_is_not_a_recipe(make_document):
    doc = make_document('<html><body><ul class="ingredients"><li>Salt</li></ul></body></html>')
    assert heuristic.extract_recipe_heuristic(doc) is None


def test_first_matching_selector_order():
    calls = []

    def lookup(selector):
        calls.append(selector)
        return {"b": ["x"], "c": ["y"]}.get(selector)

    assert first_matching_selector(["a", "b", "c"], lookup) == ["x"]
    assert calls == ["a", "b"]
    assert first_matching_selector(["z"], lookup) is None
