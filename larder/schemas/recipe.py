"""Recipe schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from larder.models.enums import Unit

# --- Ingredient lines (shared by recipes and shopping lists) ---


class IngredientLineCreate(BaseModel):
    """An ingredient line referencing one of the user's ingredients."""

    ingredient_id: int
    quantity: float = Field(..., gt=0)
    unit: Unit


class IngredientLineResponse(BaseModel):
    """Ingredient line response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ingredient_id: int
    ingredient_name: str
    quantity: float
    unit: Unit


# --- Recipe ---


class RecipeCreate(BaseModel):
    """Create a new recipe."""

    name: str = Field(..., max_length=255)
    ingredients: list[IngredientLineCreate] = []


class RecipeUpdate(BaseModel):
    """Update a recipe. The ingredient lines are replaced wholesale."""

    name: str = Field(..., max_length=255)
    ingredients: list[IngredientLineCreate] = []


class RecipeResponse(BaseModel):
    """Recipe response with ingredients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    original_url: str | None
    image: str | None
    ingredients: list[IngredientLineResponse]
    created_at: datetime
    updated_at: datetime


class RecipeListResponse(BaseModel):
    """Recipe list item (without full ingredients)."""

    id: int
    name: str
    original_url: str | None
    image: str | None
    ingredient_count: int
    created_at: datetime
