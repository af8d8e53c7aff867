"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from larder.database import get_db
from larder.models.user import User
from larder.services.auth import decode_access_token
from larder.services.ingredient_resolver import IngredientResolver
from larder.services.llm import LLMService
from larder.services.recipe_extractor import RecipeExtractor
from larder.services.recipe_import import RecipeImportService
from larder.services.scraper import RecipeScraper

security = HTTPBearer()


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    token = credentials.credentials
    payload = decode_access_token(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = payload.get("sub")
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = db.query(User).filter(User.id == int(user_id)).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


def get_recipe_scraper() -> RecipeScraper:
    """Get recipe page scraper."""
    return RecipeScraper()


def get_recipe_extractor() -> RecipeExtractor:
    """Get LLM-backed recipe extractor."""
    return RecipeExtractor(LLMService())


def get_recipe_import_service(
    db: Annotated[Session, Depends(get_db)],
    scraper: Annotated[RecipeScraper, Depends(get_recipe_scraper)],
    extractor: Annotated[RecipeExtractor, Depends(get_recipe_extractor)],
) -> RecipeImportService:
    """Get recipe import service with dependencies."""
    return RecipeImportService(
        db,
        resolver=IngredientResolver(db),
        scraper=scraper,
        extractor=extractor,
    )
