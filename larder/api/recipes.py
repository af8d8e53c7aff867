"""Recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from larder.api.dependencies import get_current_user, get_recipe_import_service
from larder.database import get_db
from larder.models.recipe import Recipe, RecipeIngredient
from larder.models.user import User
from larder.schemas.recipe import (
    IngredientLineCreate,
    RecipeCreate,
    RecipeListResponse,
    RecipeResponse,
    RecipeUpdate,
)
from larder.schemas.recipe_import import (
    RecipeImportRequest,
    RecipeImportResponse,
    RecipePreviewRequest,
    RecipePreviewResponse,
    RecipeUrlImportRequest,
)
from larder.services.ingredients import validate_user_ingredient_ids
from larder.services.recipe_import import ImportResult, RecipeImportService

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


def get_user_recipe(db: Session, recipe_id: int, user: User) -> Recipe:
    """Get a recipe that belongs to the user."""
    recipe = db.query(Recipe).filter(Recipe.id == recipe_id, Recipe.user_id == user.id).first()
    if not recipe:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


def _clean_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Recipe name is required"
        )
    return name


def _build_lines(lines: list[IngredientLineCreate]) -> list[RecipeIngredient]:
    return [
        RecipeIngredient(ingredient_id=line.ingredient_id, quantity=line.quantity, unit=line.unit)
        for line in lines
    ]


def _import_response(result: ImportResult) -> RecipeImportResponse:
    return RecipeImportResponse(
        recipe=RecipeResponse.model_validate(result.recipe),
        matched_names=result.matched_names,
        existing_custom_names=result.existing_custom_names,
        new_custom_names=result.new_custom_names,
    )


# --- Static routes first (before /{recipe_id}) ---


@router.get("", response_model=list[RecipeListResponse])
async def list_recipes(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List all recipes for the current user, newest first."""
    recipes = (
        db.query(Recipe)
        .filter(Recipe.user_id == current_user.id)
        .order_by(Recipe.created_at.desc(), Recipe.id.desc())
        .all()
    )
    return [
        RecipeListResponse(
            id=recipe.id,
            name=recipe.name,
            original_url=recipe.original_url,
            image=recipe.image,
            ingredient_count=len(recipe.ingredients),
            created_at=recipe.created_at,
        )
        for recipe in recipes
    ]


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    recipe_data: RecipeCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a recipe from the user's existing ingredients."""
    name = _clean_name(recipe_data.name)
    validate_user_ingredient_ids(
        db, (line.ingredient_id for line in recipe_data.ingredients), current_user.id
    )

    recipe = Recipe(user_id=current_user.id, name=name)
    recipe.ingredients = _build_lines(recipe_data.ingredients)
    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    return recipe


# --- Import (static routes) ---


@router.post("/preview", response_model=RecipePreviewResponse)
async def preview_recipe(
    data: RecipePreviewRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeImportService, Depends(get_recipe_import_service)],
):
    """Scrape a recipe URL and return what was extracted, without saving."""
    extracted = await service.preview_recipe(data.url)
    return RecipePreviewResponse(
        name=extracted.name,
        ingredients=extracted.ingredients,
        images=extracted.images,
    )


@router.post("/import", response_model=RecipeImportResponse, status_code=status.HTTP_201_CREATED)
async def import_recipe(
    data: RecipeImportRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeImportService, Depends(get_recipe_import_service)],
):
    """Import extracted lines as a recipe, resolving names to ingredients."""
    result = service.import_recipe(
        current_user.id,
        data.name,
        data.original_url,
        data.ingredients,
        image_url=data.image,
    )
    return _import_response(result)


@router.post(
    "/import-url", response_model=RecipeImportResponse, status_code=status.HTTP_201_CREATED
)
async def import_recipe_from_url(
    data: RecipeUrlImportRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeImportService, Depends(get_recipe_import_service)],
):
    """Scrape, extract and import a recipe in one request."""
    result = await service.import_from_url(current_user.id, data.url, image_url=data.image)
    return _import_response(result)


# --- Single recipe routes ---


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific recipe with its ingredient lines."""
    return get_user_recipe(db, recipe_id, current_user)


@router.put("/{recipe_id}", response_model=RecipeResponse)
async def update_recipe(
    recipe_id: int,
    recipe_data: RecipeUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Rename a recipe and replace its ingredient lines."""
    recipe = get_user_recipe(db, recipe_id, current_user)
    name = _clean_name(recipe_data.name)
    validate_user_ingredient_ids(
        db, (line.ingredient_id for line in recipe_data.ingredients), current_user.id
    )

    recipe.name = name
    recipe.ingredients = _build_lines(recipe_data.ingredients)
    db.commit()
    db.refresh(recipe)
    return recipe


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a recipe and its ingredient lines."""
    recipe = get_user_recipe(db, recipe_id, current_user)
    db.delete(recipe)
    db.commit()
