"""Catalog store: shared shop ingredients and per-user custom entries."""

import logging
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from larder.models.category import Category
from larder.models.custom_user_ingredient import CustomUserIngredient
from larder.models.enums import IngredientType, StorageType
from larder.models.ingredient import Ingredient
from larder.models.shop_ingredient import ShopIngredient

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def find_shop_ingredient_by_name(db: Session, name: str) -> ShopIngredient | None:
    """Case-insensitive exact-name lookup in the catalog."""
    normalized = name.strip().lower()
    if not normalized:
        return None
    return (
        db.query(ShopIngredient)
        .filter(func.lower(ShopIngredient.name) == normalized)
        .order_by(ShopIngredient.id)
        .first()
    )


def load_custom_ingredients(db: Session, user_id: int) -> list[CustomUserIngredient]:
    """All of a user's custom ingredients, oldest first."""
    return (
        db.query(CustomUserIngredient)
        .filter(CustomUserIngredient.user_id == user_id)
        .order_by(CustomUserIngredient.id)
        .all()
    )


def list_shop_ingredients_with_usage(db: Session) -> list[dict[str, Any]]:
    """Every catalog entry with its category name and linked-user count."""
    shop_ingredients = db.query(ShopIngredient).order_by(ShopIngredient.name).all()

    usage_counts = (
        db.query(Ingredient.shop_ingredient_id, func.count(Ingredient.id))
        .filter(Ingredient.shop_ingredient_id.isnot(None))
        .group_by(Ingredient.shop_ingredient_id)
        .all()
    )
    count_by_shop_id = dict(usage_counts)

    return [
        {
            "id": si.id,
            "name": si.name,
            "type": si.type,
            "storage_type": si.storage_type,
            "category_id": si.category_id,
            "category_name": si.category.name if si.category else None,
            "user_count": count_by_shop_id.get(si.id, 0),
        }
        for si in shop_ingredients
    ]


def _ensure_category_exists(db: Session, category_id: int | None) -> None:
    if category_id is None:
        return
    if not db.query(Category).filter(Category.id == category_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")


def _ensure_name_available(db: Session, name: str, exclude_id: int | None = None) -> None:
    existing = find_shop_ingredient_by_name(db, name)
    if existing and existing.id != exclude_id:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Catalog ingredient '{existing.name}' already exists",
        )


def create_shop_ingredient(
    db: Session,
    name: str,
    type: IngredientType = IngredientType.FOOD,
    storage_type: StorageType | None = None,
    category_id: int | None = None,
) -> ShopIngredient:
    """Add an entry to the shared catalog."""
    name = (name or "").strip()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name is required")

    _ensure_category_exists(db, category_id)
    _ensure_name_available(db, name)

    shop_ingredient = ShopIngredient(
        name=name,
        type=type,
        storage_type=storage_type,
        category_id=category_id,
    )
    db.add(shop_ingredient)
    db.commit()
    db.refresh(shop_ingredient)
    logger.info(f"Created catalog ingredient '{name}' ({shop_ingredient.id})")
    return shop_ingredient


def update_shop_ingredient(
    db: Session,
    shop_ingredient_id: int,
    name: str | None = None,
    type: IngredientType | None = None,
    storage_type: StorageType | None = _UNSET,
    category_id: int | None = _UNSET,
) -> ShopIngredient:
    """Partially update a catalog entry.

    storage_type and category_id may be explicitly cleared with None;
    leave them out to keep the current value.
    """
    shop_ingredient = (
        db.query(ShopIngredient).filter(ShopIngredient.id == shop_ingredient_id).first()
    )
    if not shop_ingredient:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found")

    if name is not None:
        name = name.strip()
        if not name:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Name is required"
            )
        _ensure_name_available(db, name, exclude_id=shop_ingredient.id)
        shop_ingredient.name = name
    if type is not None:
        shop_ingredient.type = type
    if storage_type is not _UNSET:
        shop_ingredient.storage_type = storage_type
    if category_id is not _UNSET:
        _ensure_category_exists(db, category_id)
        shop_ingredient.category_id = category_id

    db.commit()
    db.refresh(shop_ingredient)
    return shop_ingredient
