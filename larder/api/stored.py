"""Storage location API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from larder.api.dependencies import get_current_user
from larder.database import get_db
from larder.models.stored import Stored, StoredIngredient
from larder.models.user import User
from larder.schemas.stored import (
    StoredCreate,
    StoredIngredientCreate,
    StoredIngredientResponse,
    StoredIngredientUpdate,
    StoredResponse,
)
from larder.services.ingredients import get_user_ingredient

router = APIRouter(prefix="/api/v1/stored", tags=["stored"])
stored_ingredients_router = APIRouter(
    prefix="/api/v1/stored-ingredients", tags=["stored"]
)


def get_user_stored(db: Session, stored_id: int, user: User) -> Stored:
    """Get a storage location that belongs to the user."""
    stored = db.query(Stored).filter(Stored.id == stored_id, Stored.user_id == user.id).first()
    if not stored:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Storage location not found"
        )
    return stored


def get_user_stored_ingredient(db: Session, line_id: int, user: User) -> StoredIngredient:
    """Get a stored ingredient whose storage location belongs to the user."""
    line = (
        db.query(StoredIngredient)
        .join(Stored, StoredIngredient.stored_id == Stored.id)
        .filter(StoredIngredient.id == line_id, Stored.user_id == user.id)
        .first()
    )
    if not line:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Stored ingredient not found"
        )
    return line


def _check_quantity(quantity: float) -> None:
    if quantity <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Quantity must be greater than 0",
        )


def _clean_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Storage location name is required",
        )
    return name


# --- Storage locations ---


@router.get("", response_model=list[StoredResponse])
async def list_stored(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List the user's storage locations."""
    return (
        db.query(Stored)
        .filter(Stored.user_id == current_user.id)
        .order_by(Stored.name)
        .all()
    )


@router.post("", response_model=StoredResponse, status_code=status.HTTP_201_CREATED)
async def create_stored(
    stored_data: StoredCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a storage location."""
    stored = Stored(
        user_id=current_user.id,
        name=_clean_name(stored_data.name),
        type=stored_data.type,
    )
    db.add(stored)
    db.commit()
    db.refresh(stored)
    return stored


@router.get("/{stored_id}", response_model=StoredResponse)
async def get_stored(
    stored_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a storage location with its contents, newest first."""
    return get_user_stored(db, stored_id, current_user)


@router.put("/{stored_id}", response_model=StoredResponse)
async def update_stored(
    stored_id: int,
    stored_data: StoredCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Rename or retype a storage location."""
    stored = get_user_stored(db, stored_id, current_user)
    stored.name = _clean_name(stored_data.name)
    stored.type = stored_data.type
    db.commit()
    db.refresh(stored)
    return stored


@router.delete("/{stored_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_stored(
    stored_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a storage location and everything recorded in it."""
    stored = get_user_stored(db, stored_id, current_user)
    db.delete(stored)
    db.commit()


@router.post(
    "/{stored_id}/ingredients",
    response_model=StoredIngredientResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_stored_ingredient(
    stored_id: int,
    line_data: StoredIngredientCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Put one of the user's ingredients into a storage location."""
    stored = get_user_stored(db, stored_id, current_user)
    get_user_ingredient(db, line_data.ingredient_id, current_user.id)
    _check_quantity(line_data.quantity)

    existing = (
        db.query(StoredIngredient)
        .filter(
            StoredIngredient.stored_id == stored.id,
            StoredIngredient.ingredient_id == line_data.ingredient_id,
        )
        .first()
    )
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Ingredient is already in this storage location",
        )

    line = StoredIngredient(stored_id=stored.id, **line_data.model_dump())
    db.add(line)
    db.commit()
    db.refresh(line)
    return line


# --- Stored ingredients ---


@stored_ingredients_router.put("/{line_id}", response_model=StoredIngredientResponse)
async def update_stored_ingredient(
    line_id: int,
    line_data: StoredIngredientUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update quantity, unit, expiry or store link of a stored ingredient."""
    line = get_user_stored_ingredient(db, line_id, current_user)
    _check_quantity(line_data.quantity)

    for field, value in line_data.model_dump().items():
        setattr(line, field, value)
    db.commit()
    db.refresh(line)
    return line


@stored_ingredients_router.delete("/{line_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_stored_ingredient(
    line_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Remove an ingredient from its storage location."""
    line = get_user_stored_ingredient(db, line_id, current_user)
    db.delete(line)
    db.commit()
