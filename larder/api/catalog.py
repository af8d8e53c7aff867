"""Catalog (shop ingredient) API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from larder.api.dependencies import get_current_user
from larder.database import get_db
from larder.models.user import User
from larder.schemas.catalog import (
    ShopIngredientCreate,
    ShopIngredientResponse,
    ShopIngredientUpdate,
    ShopIngredientUsageResponse,
)
from larder.services import catalog

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


@router.get("", response_model=list[ShopIngredientUsageResponse])
async def list_shop_ingredients(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List every catalog ingredient with how many users link to it."""
    return catalog.list_shop_ingredients_with_usage(db)


@router.post("", response_model=ShopIngredientResponse, status_code=status.HTTP_201_CREATED)
async def create_shop_ingredient(
    data: ShopIngredientCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Add an ingredient to the shared catalog."""
    return catalog.create_shop_ingredient(
        db,
        name=data.name,
        type=data.type,
        storage_type=data.storage_type,
        category_id=data.category_id,
    )


@router.put("/{shop_ingredient_id}", response_model=ShopIngredientResponse)
async def update_shop_ingredient(
    shop_ingredient_id: int,
    data: ShopIngredientUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update a catalog ingredient. Only fields present in the body change."""
    changes = data.model_dump(exclude_unset=True)
    return catalog.update_shop_ingredient(db, shop_ingredient_id, **changes)
