"""User ingredient API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from larder.api.dependencies import get_current_user
from larder.database import get_db
from larder.models.user import User
from larder.schemas.ingredient import IngredientCreate, IngredientResponse, IngredientUpdate
from larder.services.ingredients import (
    create_user_ingredient,
    delete_user_ingredient,
    get_user_ingredient,
    ingredient_to_dict,
    list_user_ingredients,
    update_user_ingredient,
)

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


@router.get("", response_model=list[IngredientResponse])
async def list_ingredients(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List the user's ingredients."""
    return [ingredient_to_dict(i) for i in list_user_ingredients(db, current_user.id)]


@router.get("/{ingredient_id}", response_model=IngredientResponse)
async def get_ingredient(
    ingredient_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific ingredient."""
    return ingredient_to_dict(get_user_ingredient(db, ingredient_id, current_user.id))


@router.post("", response_model=IngredientResponse, status_code=status.HTTP_201_CREATED)
async def create_ingredient(
    data: IngredientCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Add an ingredient by name, linking it to the catalog when it matches."""
    ingredient = create_user_ingredient(
        db,
        current_user.id,
        data.name,
        tag_ids=data.tag_ids,
        store_links=data.store_links,
    )
    return ingredient_to_dict(ingredient)


@router.put("/{ingredient_id}", response_model=IngredientResponse)
async def update_ingredient(
    ingredient_id: int,
    data: IngredientUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Replace an ingredient's tags and/or store links."""
    ingredient = update_user_ingredient(
        db,
        ingredient_id,
        current_user.id,
        tag_ids=data.tag_ids,
        store_links=data.store_links,
    )
    return ingredient_to_dict(ingredient)


@router.delete("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ingredient(
    ingredient_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete an ingredient along with its recipe, storage and shopping-list lines."""
    delete_user_ingredient(db, ingredient_id, current_user.id)
