"""Storage location schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from larder.models.enums import StorageType, Unit


class StoredCreate(BaseModel):
    """Create or update a storage location."""

    name: str = Field(..., max_length=255)
    type: StorageType


class StoredIngredientCreate(BaseModel):
    """Put an ingredient into a storage location."""

    ingredient_id: int
    quantity: float
    unit: Unit
    expires_at: datetime | None = None
    store_link: str | None = Field(None, max_length=2048)


class StoredIngredientUpdate(BaseModel):
    """Update a stored ingredient."""

    quantity: float
    unit: Unit
    expires_at: datetime | None = None
    store_link: str | None = Field(None, max_length=2048)


class StoredIngredientResponse(BaseModel):
    """Stored ingredient response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    stored_id: int
    ingredient_id: int
    ingredient_name: str
    quantity: float
    unit: Unit
    expires_at: datetime | None
    store_link: str | None
    created_at: datetime


class StoredResponse(BaseModel):
    """Storage location response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    type: StorageType
    ingredients: list[StoredIngredientResponse]
    created_at: datetime
    updated_at: datetime
