"""Structured recipe extraction from scraped page text using the LLM."""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from larder.models.enums import Unit
from larder.schemas.recipe_import import ExtractedIngredient
from larder.services.llm import LLMService
from larder.services.llm_prompts import (
    RECIPE_EXTRACTION_SYSTEM_PROMPT,
    get_recipe_extraction_prompt,
)

logger = logging.getLogger(__name__)

# Preparation words that don't change which ingredient a line refers to
PREPARATION_WORDS = (
    "toasted",
    "roasted",
    "raw",
    "fresh",
    "dried",
    "ground",
    "chopped",
    "sliced",
    "diced",
    "minced",
    "crushed",
)

_PREP = "|".join(PREPARATION_WORDS)
_LEADING_PREP = re.compile(rf"^(?:{_PREP})\s+", re.IGNORECASE)
_TRAILING_PREP = re.compile(rf"\s+(?:{_PREP})$", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


@dataclass
class ExtractedRecipe:
    """Best-effort structured recipe."""

    name: str
    ingredients: list[ExtractedIngredient]
    images: list[str] = field(default_factory=list)


def normalize_ingredient_name(name: str) -> str:
    """Lowercase, collapse whitespace and strip one preparation word at either end."""
    normalized = _WHITESPACE.sub(" ", name.strip().lower())
    normalized = _LEADING_PREP.sub("", normalized)
    normalized = _TRAILING_PREP.sub("", normalized)
    return normalized.strip()


def validate_ingredients(raw_ingredients: list[Any]) -> list[ExtractedIngredient]:
    """Keep entries with a name, a known unit and a positive numeric quantity."""
    valid = []
    for raw in raw_ingredients:
        if not isinstance(raw, dict):
            continue
        name = raw.get("name")
        quantity = raw.get("quantity")
        unit = raw.get("unit")
        if not isinstance(name, str) or not name.strip():
            continue
        if isinstance(quantity, bool) or not isinstance(quantity, int | float) or quantity <= 0:
            continue
        if not math.isfinite(quantity):
            continue
        try:
            unit = Unit(unit)
        except ValueError:
            logger.warning(f"Dropping extracted ingredient '{name}' with unknown unit {unit!r}")
            continue
        try:
            ingredient = ExtractedIngredient(name=name.strip(), quantity=float(quantity), unit=unit)
        except ValidationError as e:
            logger.warning(
                f"Dropping extracted ingredient '{name[:50]}': {e.error_count()} invalid fields"
            )
            continue
        valid.append(ingredient)
    return valid


def _name_rank(name: str) -> tuple[bool, int]:
    return bool(_LEADING_PREP.match(name)), len(name)


def combine_duplicate_ingredients(
    ingredients: list[ExtractedIngredient],
) -> list[ExtractedIngredient]:
    """Sum quantities of entries sharing a normalized name and unit.

    The kept name is one without a leading preparation word, then the shorter.
    """
    combined: dict[tuple[str, Unit], ExtractedIngredient] = {}
    for ingredient in ingredients:
        key = (normalize_ingredient_name(ingredient.name), ingredient.unit)
        existing = combined.get(key)
        if existing is None:
            combined[key] = ingredient.model_copy()
            continue
        existing.quantity += ingredient.quantity
        if _name_rank(ingredient.name) < _name_rank(existing.name):
            existing.name = ingredient.name
    return list(combined.values())


class RecipeExtractor:
    """Turns raw recipe page text into a name and ingredient lines."""

    def __init__(self, llm_service: LLMService | None = None):
        self.llm_service = llm_service or LLMService()

    async def extract(self, text: str, images: list[str] | None = None) -> ExtractedRecipe:
        """Extract a structured recipe.

        Raises ValueError when the model's answer doesn't have the
        expected shape.
        """
        parsed = await self.llm_service.generate_json(
            prompt=get_recipe_extraction_prompt(text),
            system_prompt=RECIPE_EXTRACTION_SYSTEM_PROMPT,
            temperature=0.3,
        )

        name = parsed.get("name") if isinstance(parsed, dict) else None
        raw_ingredients = parsed.get("ingredients") if isinstance(parsed, dict) else None
        if not isinstance(name, str) or not isinstance(raw_ingredients, list):
            raise ValueError("Invalid recipe data structure from model")

        ingredients = combine_duplicate_ingredients(validate_ingredients(raw_ingredients))
        logger.info(
            f"Extracted recipe '{name.strip()}' with {len(ingredients)} ingredients "
            f"({len(raw_ingredients)} raw)"
        )
        return ExtractedRecipe(name=name.strip(), ingredients=ingredients, images=list(images or []))
