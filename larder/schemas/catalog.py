"""Catalog (shop ingredient) and category schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from larder.models.enums import IngredientType, StorageType

# --- Category ---


class CategoryResponse(BaseModel):
    """Category response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str | None
    icon: str | None


# --- Shop Ingredient ---


class ShopIngredientCreate(BaseModel):
    """Create a catalog entry."""

    name: str = Field(..., max_length=255)
    type: IngredientType = IngredientType.FOOD
    storage_type: StorageType | None = None
    category_id: int | None = None


class ShopIngredientUpdate(BaseModel):
    """Update a catalog entry. Omitted fields are left unchanged."""

    name: str | None = Field(None, max_length=255)
    type: IngredientType | None = None
    storage_type: StorageType | None = None
    category_id: int | None = None


class ShopIngredientResponse(BaseModel):
    """Catalog entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    type: IngredientType
    storage_type: StorageType | None
    category_id: int | None
    created_at: datetime
    updated_at: datetime


class ShopIngredientUsageResponse(BaseModel):
    """Catalog entry with how many users link to it."""

    id: int
    name: str
    type: IngredientType
    storage_type: StorageType | None
    category_id: int | None
    category_name: str | None
    user_count: int
