"""Shopping list schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from larder.schemas.recipe import IngredientLineCreate, IngredientLineResponse


class ShoppingListCreate(BaseModel):
    """Create a shopping list."""

    name: str = Field(..., max_length=255)
    ingredients: list[IngredientLineCreate] = []


class ShoppingListUpdate(BaseModel):
    """Update a shopping list. The ingredient lines are replaced wholesale."""

    name: str = Field(..., max_length=255)
    ingredients: list[IngredientLineCreate] = []


class ShoppingListResponse(BaseModel):
    """Shopping list response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    ingredients: list[IngredientLineResponse]
    created_at: datetime
    updated_at: datetime
