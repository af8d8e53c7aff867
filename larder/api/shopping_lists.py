"""Shopping list API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from larder.api.dependencies import get_current_user
from larder.database import get_db
from larder.models.shopping_list import ShoppingList, ShoppingListIngredient
from larder.models.user import User
from larder.schemas.recipe import IngredientLineCreate
from larder.schemas.shopping_list import (
    ShoppingListCreate,
    ShoppingListResponse,
    ShoppingListUpdate,
)
from larder.services.ingredients import validate_user_ingredient_ids

router = APIRouter(prefix="/api/v1/shopping-lists", tags=["shopping-lists"])


def get_user_shopping_list(db: Session, list_id: int, user: User) -> ShoppingList:
    """Get a shopping list that belongs to the user."""
    shopping_list = (
        db.query(ShoppingList)
        .filter(ShoppingList.id == list_id, ShoppingList.user_id == user.id)
        .first()
    )
    if not shopping_list:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shopping list not found")
    return shopping_list


def _clean_name(db: Session, name: str, user: User, exclude_id: int | None = None) -> str:
    name = name.strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Shopping list name is required"
        )
    query = db.query(ShoppingList).filter(
        ShoppingList.user_id == user.id, ShoppingList.name == name
    )
    if exclude_id is not None:
        query = query.filter(ShoppingList.id != exclude_id)
    if query.first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A shopping list with this name already exists",
        )
    return name


def _build_lines(lines: list[IngredientLineCreate]) -> list[ShoppingListIngredient]:
    return [
        ShoppingListIngredient(
            ingredient_id=line.ingredient_id, quantity=line.quantity, unit=line.unit
        )
        for line in lines
    ]


@router.get("", response_model=list[ShoppingListResponse])
async def list_shopping_lists(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List the user's shopping lists."""
    return (
        db.query(ShoppingList)
        .filter(ShoppingList.user_id == current_user.id)
        .order_by(ShoppingList.name)
        .all()
    )


@router.post("", response_model=ShoppingListResponse, status_code=status.HTTP_201_CREATED)
async def create_shopping_list(
    list_data: ShoppingListCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a shopping list."""
    name = _clean_name(db, list_data.name, current_user)
    validate_user_ingredient_ids(
        db, (line.ingredient_id for line in list_data.ingredients), current_user.id
    )

    shopping_list = ShoppingList(user_id=current_user.id, name=name)
    shopping_list.ingredients = _build_lines(list_data.ingredients)
    db.add(shopping_list)
    db.commit()
    db.refresh(shopping_list)
    return shopping_list


@router.get("/{list_id}", response_model=ShoppingListResponse)
async def get_shopping_list(
    list_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific shopping list."""
    return get_user_shopping_list(db, list_id, current_user)


@router.put("/{list_id}", response_model=ShoppingListResponse)
async def update_shopping_list(
    list_id: int,
    list_data: ShoppingListUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Rename a shopping list and replace its lines."""
    shopping_list = get_user_shopping_list(db, list_id, current_user)
    name = _clean_name(db, list_data.name, current_user, exclude_id=shopping_list.id)
    validate_user_ingredient_ids(
        db, (line.ingredient_id for line in list_data.ingredients), current_user.id
    )

    shopping_list.name = name
    shopping_list.ingredients = _build_lines(list_data.ingredients)
    db.commit()
    db.refresh(shopping_list)
    return shopping_list


@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shopping_list(
    list_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a shopping list."""
    shopping_list = get_user_shopping_list(db, list_id, current_user)
    db.delete(shopping_list)
    db.commit()
