"""Saved product schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from larder.models.enums import Retailer, Unit


class ProductCreate(BaseModel):
    """Create or update a saved product. Price is in pounds."""

    retailer: Retailer
    product_name: str = Field(..., max_length=255)
    url: str | None = Field(None, max_length=2048)
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    size: float | None = Field(None, gt=0)
    unit: Unit | None = None
    image_url: str | None = Field(None, max_length=2048)


class ProductResponse(BaseModel):
    """Saved product response. Price is in pence."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    retailer: Retailer
    product_name: str
    url: str | None
    price: int | None
    size: float | None
    unit: Unit | None
    image_url: str | None
    created_at: datetime
