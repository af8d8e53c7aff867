"""Pydantic schemas for API requests and responses."""

from larder.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from larder.schemas.catalog import (
    CategoryResponse,
    ShopIngredientCreate,
    ShopIngredientResponse,
    ShopIngredientUpdate,
)
from larder.schemas.ingredient import IngredientCreate, IngredientResponse, IngredientUpdate
from larder.schemas.recipe import RecipeCreate, RecipeResponse, RecipeUpdate
from larder.schemas.recipe_import import (
    ExtractedIngredient,
    RecipeImportRequest,
    RecipeImportResponse,
)
from larder.schemas.shopping_list import (
    ShoppingListCreate,
    ShoppingListResponse,
    ShoppingListUpdate,
)
from larder.schemas.stored import StoredCreate, StoredResponse
from larder.schemas.tag import TagCreate, TagResponse, TagUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "AuthResponse",
    "UserResponse",
    "CategoryResponse",
    "ShopIngredientCreate",
    "ShopIngredientUpdate",
    "ShopIngredientResponse",
    "IngredientCreate",
    "IngredientUpdate",
    "IngredientResponse",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "ExtractedIngredient",
    "RecipeImportRequest",
    "RecipeImportResponse",
    "ShoppingListCreate",
    "ShoppingListUpdate",
    "ShoppingListResponse",
    "StoredCreate",
    "StoredResponse",
    "TagCreate",
    "TagUpdate",
    "TagResponse",
]
