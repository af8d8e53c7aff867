"""Tests for LLM-backed recipe extraction."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from larder.models.enums import Unit
from larder.schemas.recipe_import import ExtractedIngredient
from larder.services.llm import LLMService, strip_code_fences
from larder.services.recipe_extractor import (
    RecipeExtractor,
    combine_duplicate_ingredients,
    normalize_ingredient_name,
    validate_ingredients,
)


def make_extractor(response):
    llm = AsyncMock(spec=LLMService)
    llm.generate_json.return_value = response
    return RecipeExtractor(llm), llm


class TestNormalizeIngredientName:
    def test_lowercases_and_collapses_whitespace(self):
        assert normalize_ingredient_name("  Plain   Flour ") == "plain flour"

    def test_strips_preparation_words(self):
        assert normalize_ingredient_name("Chopped onion") == "onion"
        assert normalize_ingredient_name("garlic crushed") == "garlic"

    def test_keeps_words_that_only_contain_preparation_words(self):
        assert normalize_ingredient_name("Rawhide") == "rawhide"


class TestValidateIngredients:
    def test_keeps_valid_entries(self):
        result = validate_ingredients([{"name": " Sugar ", "quantity": 100, "unit": "g"}])

        assert result == [ExtractedIngredient(name="Sugar", quantity=100.0, unit=Unit.G)]

    def test_drops_unknown_units(self):
        result = validate_ingredients(
            [
                {"name": "Flour", "quantity": 2, "unit": "cup"},
                {"name": "Milk", "quantity": 200, "unit": "ml"},
            ]
        )

        assert [i.name for i in result] == ["Milk"]

    def test_drops_bad_quantities(self):
        result = validate_ingredients(
            [
                {"name": "Salt", "quantity": 0, "unit": "g"},
                {"name": "Pepper", "quantity": -1, "unit": "g"},
                {"name": "Oil", "quantity": "2", "unit": "tbsp"},
                {"name": "Eggs", "quantity": True, "unit": "piece"},
                {"name": "Butter", "quantity": 0.5, "unit": "kg"},
            ]
        )

        assert [i.name for i in result] == ["Butter"]

    def test_drops_missing_names_and_non_dicts(self):
        result = validate_ingredients(
            ["flour", {"name": "", "quantity": 1, "unit": "g"}, {"quantity": 1, "unit": "g"}]
        )

        assert result == []

    def test_drops_non_finite_quantities(self):
        result = validate_ingredients(
            [
                {"name": "Salt", "quantity": float("nan"), "unit": "g"},
                {"name": "Pepper", "quantity": float("inf"), "unit": "g"},
                {"name": "Oil", "quantity": 2, "unit": "tbsp"},
            ]
        )

        assert [i.name for i in result] == ["Oil"]

    def test_drops_overlong_names(self):
        result = validate_ingredients(
            [
                {"name": "Leek", "quantity": 1, "unit": "piece"},
                {"name": "x" * 300, "quantity": 1, "unit": "g"},
            ]
        )

        assert [i.name for i in result] == ["Leek"]


class TestCombineDuplicateIngredients:
    def test_sums_same_name_and_unit(self):
        result = combine_duplicate_ingredients(
            [
                ExtractedIngredient(name="Sugar", quantity=100, unit=Unit.G),
                ExtractedIngredient(name="sugar", quantity=50, unit=Unit.G),
            ]
        )

        assert len(result) == 1
        assert result[0].quantity == 150

    def test_keeps_different_units_apart(self):
        result = combine_duplicate_ingredients(
            [
                ExtractedIngredient(name="Butter", quantity=100, unit=Unit.G),
                ExtractedIngredient(name="Butter", quantity=1, unit=Unit.TBSP),
            ]
        )

        assert len(result) == 2

    def test_prefers_name_without_preparation_word(self):
        result = combine_duplicate_ingredients(
            [
                ExtractedIngredient(name="chopped onion", quantity=1, unit=Unit.PIECE),
                ExtractedIngredient(name="onion", quantity=2, unit=Unit.PIECE),
            ]
        )

        assert len(result) == 1
        assert result[0].name == "onion"
        assert result[0].quantity == 3


@pytest.mark.asyncio
async def test_extract_returns_valid_ingredients():
    extractor, llm = make_extractor(
        {
            "name": " Pancakes ",
            "ingredients": [
                {"name": "Plain flour", "quantity": 200, "unit": "g"},
                {"name": "Milk", "quantity": 300, "unit": "ml"},
                {"name": "Eggs", "quantity": 2, "unit": "piece"},
                {"name": "Love", "quantity": 1, "unit": "pinch"},
            ],
        }
    )

    recipe = await extractor.extract("Recipe Name: Pancakes", ["https://example.com/p.jpg"])

    assert recipe.name == "Pancakes"
    assert [i.name for i in recipe.ingredients] == ["Plain flour", "Milk", "Eggs"]
    assert recipe.images == ["https://example.com/p.jpg"]
    llm.generate_json.assert_awaited_once()
    assert "Recipe Name: Pancakes" in llm.generate_json.call_args.kwargs["prompt"]


@pytest.mark.asyncio
async def test_extract_rejects_wrong_shape():
    extractor, _ = make_extractor({"title": "Pancakes", "items": []})

    with pytest.raises(ValueError, match="Invalid recipe data structure"):
        await extractor.extract("text")


@pytest.mark.asyncio
async def test_extract_rejects_non_object_answer():
    extractor, _ = make_extractor(["flour", "milk"])

    with pytest.raises(ValueError):
        await extractor.extract("text")


def test_strip_code_fences():
    assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fences('{"a": 1}') == '{"a": 1}'


@pytest.mark.asyncio
async def test_generate_json_parses_fenced_output():
    service = LLMService()
    payload = {"name": "Soup", "ingredients": []}
    with patch.object(
        service, "generate", AsyncMock(return_value=f"```json\n{json.dumps(payload)}\n```")
    ) as mock_generate:
        result = await service.generate_json("prompt")

    assert result == payload
    assert mock_generate.call_args.kwargs["json_mode"] is True


@pytest.mark.asyncio
async def test_generate_json_raises_on_garbage():
    service = LLMService()
    with patch.object(service, "generate", AsyncMock(return_value="not json")):
        with pytest.raises(json.JSONDecodeError):
            await service.generate_json("prompt")


@pytest.mark.asyncio
async def test_extract_skips_malformed_lines_from_model_output():
    """A NaN quantity or an overlong name only loses that line."""
    raw = json.loads(
        '{"name": "Soup", "ingredients": ['
        '{"name": "Leek", "quantity": 1, "unit": "piece"},'
        '{"name": "Salt", "quantity": NaN, "unit": "g"},'
        f'{{"name": "{"x" * 300}", "quantity": 1, "unit": "g"}}'
        "]}"
    )
    extractor, _ = make_extractor(raw)

    recipe = await extractor.extract("Recipe Name: Soup")

    assert [i.name for i in recipe.ingredients] == ["Leek"]
