"""Recipe import schemas."""

from pydantic import BaseModel, Field

from larder.models.enums import Unit
from larder.schemas.recipe import RecipeResponse


class ExtractedIngredient(BaseModel):
    """One ingredient line as extracted from a recipe page."""

    name: str = Field(..., max_length=255)
    quantity: float = Field(..., gt=0)
    unit: Unit


class RecipePreviewRequest(BaseModel):
    """Request to scrape and extract a recipe without saving it."""

    url: str = Field(..., max_length=2048)


class RecipePreviewResponse(BaseModel):
    """Extracted recipe, for the user to review before importing."""

    name: str
    ingredients: list[ExtractedIngredient]
    images: list[str] = []


class RecipeImportRequest(BaseModel):
    """Import already-extracted recipe lines."""

    name: str = Field(..., max_length=255)
    original_url: str | None = Field(None, max_length=2048)
    image: str | None = Field(None, max_length=2048)
    ingredients: list[ExtractedIngredient] = []


class RecipeUrlImportRequest(BaseModel):
    """Scrape, extract and import a recipe in one call."""

    url: str = Field(..., max_length=2048)
    image: str | None = Field(None, max_length=2048)


class RecipeImportResponse(BaseModel):
    """Created recipe plus what was matched versus invented."""

    recipe: RecipeResponse
    matched_names: list[str]
    existing_custom_names: list[str]
    new_custom_names: list[str]
