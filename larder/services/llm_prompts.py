"""LLM prompt templates for recipe extraction."""

from larder.models.enums import Unit

UNIT_NAMES = ", ".join(unit.value for unit in Unit)

RECIPE_EXTRACTION_SYSTEM_PROMPT = """You are a recipe parser. Extract the recipe name and its ingredients from scraped recipe page text.

Respond ONLY with valid JSON matching this schema:
{
  "name": "Recipe Name",
  "ingredients": [
    {"name": "ingredient name", "quantity": 100, "unit": "g"}
  ]
}"""


def get_recipe_extraction_prompt(scraped_text: str) -> str:
    """Generate prompt for extracting a structured recipe from page text."""
    return f"""Extract the recipe name and ingredients from the recipe content below.

Available units: {UNIT_NAMES}

For each ingredient, extract:
- name: the ingredient name, normalized (e.g., "flour" not "all-purpose flour")
- quantity: the numeric quantity (if not specified, use 1)
- unit: one of the available units. Map other units:
  - cups -> g for solids (1 cup flour ~ 120g), ml for liquids (1 cup ~ 240ml)
  - ounces, oz -> g (1 oz ~ 28g)
  - pounds, lb -> kg (1 lb ~ 0.45kg)
  - tablespoons -> tbsp, teaspoons -> tsp
  - no unit: "piece" for countable items, "g" for solids, "ml" for liquids

Recipe content:
{scraped_text}

Respond with JSON only."""
