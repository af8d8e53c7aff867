"""User ingredient operations shared by the ingredient, recipe and list routes."""

import logging
from collections.abc import Iterable
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, joinedload

from larder.models.enums import IngredientType
from larder.models.ingredient import Ingredient, StoreLink
from larder.models.recipe import RecipeIngredient
from larder.models.shopping_list import ShoppingListIngredient
from larder.models.stored import StoredIngredient
from larder.models.tag import Tag
from larder.services.ingredient_resolver import IngredientResolver

logger = logging.getLogger(__name__)


def get_user_ingredient(db: Session, ingredient_id: int, user_id: int) -> Ingredient:
    """Get an ingredient that belongs to the user."""
    ingredient = (
        db.query(Ingredient)
        .filter(Ingredient.id == ingredient_id, Ingredient.user_id == user_id)
        .first()
    )
    if not ingredient:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found")
    return ingredient


def list_user_ingredients(db: Session, user_id: int) -> list[Ingredient]:
    """The user's ingredients ordered by display name."""
    ingredients = (
        db.query(Ingredient)
        .options(
            joinedload(Ingredient.shop_ingredient),
            joinedload(Ingredient.custom_user_ingredient),
        )
        .filter(Ingredient.user_id == user_id)
        .all()
    )
    return sorted(ingredients, key=lambda i: i.display_name.lower())


def validate_user_ingredient_ids(db: Session, ingredient_ids: Iterable[int], user_id: int) -> None:
    """Raise 400 unless every id is one of the user's ingredients."""
    wanted = set(ingredient_ids)
    if not wanted:
        return
    owned = (
        db.query(Ingredient.id)
        .filter(Ingredient.id.in_(wanted), Ingredient.user_id == user_id)
        .count()
    )
    if owned != len(wanted):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Some ingredients are invalid"
        )


def get_user_tags(db: Session, tag_ids: Iterable[int], user_id: int) -> list[Tag]:
    """Load the given tags, raising 404 if any is missing or not the user's."""
    wanted = set(tag_ids)
    if not wanted:
        return []
    tags = db.query(Tag).filter(Tag.id.in_(wanted), Tag.user_id == user_id).all()
    if len(tags) != len(wanted):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="One or more tags not found or unauthorized",
        )
    return tags


def _store_links(urls: Iterable[str]) -> list[StoreLink]:
    return [StoreLink(url=url.strip()) for url in urls if url and url.strip()]


def create_user_ingredient(
    db: Session,
    user_id: int,
    name: str,
    tag_ids: Iterable[int] = (),
    store_links: Iterable[str] = (),
) -> Ingredient:
    """Add a named ingredient to the user's collection.

    The name goes through the same resolution as recipe imports, so a
    catalog match is linked and anything else becomes a custom entry.
    """
    name = (name or "").strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Ingredient name is required"
        )
    tags = get_user_tags(db, tag_ids, user_id)

    resolved = IngredientResolver(db).resolve(user_id, name)
    if not resolved.created:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Ingredient already exists"
        )

    ingredient = get_user_ingredient(db, resolved.ingredient_id, user_id)
    ingredient.tags = tags
    ingredient.store_links = _store_links(store_links)
    db.commit()
    db.refresh(ingredient)
    return ingredient


def update_user_ingredient(
    db: Session,
    ingredient_id: int,
    user_id: int,
    tag_ids: Iterable[int] | None = None,
    store_links: Iterable[str] | None = None,
) -> Ingredient:
    """Replace an ingredient's tags and/or store links."""
    ingredient = get_user_ingredient(db, ingredient_id, user_id)
    if tag_ids is not None:
        ingredient.tags = get_user_tags(db, tag_ids, user_id)
    if store_links is not None:
        ingredient.store_links = _store_links(store_links)
    db.commit()
    db.refresh(ingredient)
    return ingredient


def delete_user_ingredient(db: Session, ingredient_id: int, user_id: int) -> None:
    """Delete an ingredient and every line that references it.

    The catalog or custom entry it points at is left alone.
    """
    ingredient = get_user_ingredient(db, ingredient_id, user_id)

    db.query(RecipeIngredient).filter(RecipeIngredient.ingredient_id == ingredient_id).delete(
        synchronize_session=False
    )
    db.query(StoredIngredient).filter(StoredIngredient.ingredient_id == ingredient_id).delete(
        synchronize_session=False
    )
    db.query(ShoppingListIngredient).filter(
        ShoppingListIngredient.ingredient_id == ingredient_id
    ).delete(synchronize_session=False)
    db.delete(ingredient)
    db.commit()
    logger.info(f"Deleted ingredient {ingredient_id} for user {user_id}")


def ingredient_to_dict(ingredient: Ingredient) -> dict[str, Any]:
    """Flatten an ingredient and its linked entry for IngredientResponse."""
    shop = ingredient.shop_ingredient
    custom = ingredient.custom_user_ingredient
    if shop is not None:
        ingredient_type = shop.type
    elif custom is not None:
        ingredient_type = custom.type
    else:
        ingredient_type = IngredientType.FOOD
    return {
        "id": ingredient.id,
        "user_id": ingredient.user_id,
        "name": ingredient.display_name,
        "link_kind": ingredient.link.kind.value,
        "shop_ingredient_id": ingredient.shop_ingredient_id,
        "custom_user_ingredient_id": ingredient.custom_user_ingredient_id,
        "type": ingredient_type,
        "storage_type": shop.storage_type if shop is not None else None,
        "category_name": shop.category.name if shop is not None and shop.category else None,
        "tags": sorted(ingredient.tags, key=lambda t: t.name.lower()),
        "store_links": ingredient.store_links,
        "created_at": ingredient.created_at,
    }
