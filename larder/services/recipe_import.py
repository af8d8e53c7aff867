"""Recipe import pipeline.

Turns extracted {name, quantity, unit} lines into a persisted Recipe whose
lines are resolved to the user's Ingredients and merged per ingredient.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from larder.config import get_settings
from larder.models.enums import Unit
from larder.models.recipe import Recipe, RecipeIngredient
from larder.schemas.recipe_import import ExtractedIngredient
from larder.services.ingredient_resolver import Classification, IngredientResolver
from larder.services.recipe_extractor import ExtractedRecipe, RecipeExtractor
from larder.services.scraper import RecipeScraper

logger = logging.getLogger(__name__)

EXTRACTION_FAILED_DETAIL = "Could not extract recipe name or ingredients"


@dataclass
class AggregatedLine:
    quantity: float
    unit: Unit


@dataclass
class ImportResult:
    """Created recipe plus which names were matched versus invented."""

    recipe: Recipe
    matched_names: list[str] = field(default_factory=list)
    existing_custom_names: list[str] = field(default_factory=list)
    new_custom_names: list[str] = field(default_factory=list)


class RecipeImportService:
    """Service for importing recipes from extracted lines or URLs."""

    def __init__(
        self,
        db: Session,
        resolver: IngredientResolver | None = None,
        scraper: RecipeScraper | None = None,
        extractor: RecipeExtractor | None = None,
    ):
        self.db = db
        self.resolver = resolver or IngredientResolver(db)
        self.scraper = scraper or RecipeScraper()
        self.extractor = extractor or RecipeExtractor()
        self.settings = get_settings()

    def import_recipe(
        self,
        user_id: int,
        name: str,
        original_url: str | None,
        lines: Sequence[ExtractedIngredient],
        image_url: str | None = None,
    ) -> ImportResult:
        """Resolve and merge the lines, then create the recipe.

        Lines sharing a resolved ingredient and unit have their quantities
        summed. A later line for an already-seen ingredient in a different
        unit is dropped; units are never converted.

        The recipe row is only written after every line has resolved, but
        ingredients created while resolving are committed as they go.
        """
        name = (name or "").strip()
        if not name:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Recipe name is required"
            )
        if not lines:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="At least one ingredient is required",
            )
        if any(not (line.name or "").strip() for line in lines):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Ingredient names must not be empty",
            )

        snapshot = self.resolver.snapshot(user_id)
        aggregated: dict[int, AggregatedLine] = {}
        result_names: dict[Classification, list[str]] = {c: [] for c in Classification}

        for line in lines:
            resolved = self.resolver.resolve(user_id, line.name, snapshot)

            existing = aggregated.get(resolved.ingredient_id)
            if existing is None:
                aggregated[resolved.ingredient_id] = AggregatedLine(line.quantity, line.unit)
            elif existing.unit == line.unit:
                existing.quantity += line.quantity
            else:
                logger.warning(
                    f"Dropping '{line.name}' {line.quantity} {line.unit.value}: "
                    f"already have it in {existing.unit.value}"
                )

            names = result_names[resolved.classification]
            if resolved.name not in names:
                names.append(resolved.name)

        recipe = Recipe(
            user_id=user_id,
            name=name,
            original_url=original_url,
            image=image_url or self.settings.recipe_placeholder_image,
        )
        for ingredient_id, line in aggregated.items():
            recipe.ingredients.append(
                RecipeIngredient(ingredient_id=ingredient_id, quantity=line.quantity, unit=line.unit)
            )
        self.db.add(recipe)
        self.db.commit()
        self.db.refresh(recipe)

        result = ImportResult(
            recipe=recipe,
            matched_names=result_names[Classification.MATCHED_CATALOG],
            existing_custom_names=result_names[Classification.EXISTING_CUSTOM],
            new_custom_names=result_names[Classification.NEW_CUSTOM],
        )
        logger.info(
            f"Imported recipe '{name}' ({recipe.id}) for user {user_id}: "
            f"{len(aggregated)} lines from {len(lines)}, "
            f"{len(result.matched_names)} matched, "
            f"{len(result.existing_custom_names)} existing custom, "
            f"{len(result.new_custom_names)} new custom"
        )
        return result

    async def preview_recipe(self, url: str) -> ExtractedRecipe:
        """Scrape and extract a recipe without saving anything."""
        try:
            page = await self.scraper.scrape(url)
            extracted = await self.extractor.extract(page.text, page.images)
        except Exception as e:
            logger.error(f"Failed to preview recipe from {url}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Failed to preview recipe: {e}",
            ) from e

        if not extracted.name or not extracted.ingredients:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=EXTRACTION_FAILED_DETAIL
            )
        return extracted

    async def import_from_url(
        self,
        user_id: int,
        url: str,
        image_url: str | None = None,
    ) -> ImportResult:
        """Preview a URL and import the result in one go."""
        extracted = await self.preview_recipe(url)
        if image_url is None and extracted.images:
            image_url = extracted.images[0]
        return self.import_recipe(
            user_id,
            extracted.name,
            url.strip(),
            extracted.ingredients,
            image_url=image_url,
        )
