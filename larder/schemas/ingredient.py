"""User ingredient schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from larder.models.enums import IngredientType, StorageType
from larder.schemas.tag import TagResponse


class IngredientCreate(BaseModel):
    """Add an ingredient to the user's collection by name."""

    name: str = Field(..., max_length=255)
    tag_ids: list[int] = []
    store_links: list[str] = []


class IngredientUpdate(BaseModel):
    """Replace an ingredient's tags and/or store links."""

    tag_ids: list[int] | None = None
    store_links: list[str] | None = None


class StoreLinkResponse(BaseModel):
    """Store link response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    url: str


class IngredientResponse(BaseModel):
    """User ingredient with its catalog or custom details."""

    id: int
    user_id: int
    name: str
    link_kind: str  # "catalog" | "custom"
    shop_ingredient_id: int | None
    custom_user_ingredient_id: int | None
    type: IngredientType
    storage_type: StorageType | None
    category_name: str | None
    tags: list[TagResponse]
    store_links: list[StoreLinkResponse]
    created_at: datetime
