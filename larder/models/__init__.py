"""SQLAlchemy models."""

from larder.models.category import Category
from larder.models.custom_user_ingredient import CustomUserIngredient
from larder.models.ingredient import Ingredient, IngredientLink, StoreLink
from larder.models.product import ShopProduct
from larder.models.recipe import Recipe, RecipeIngredient
from larder.models.shop_ingredient import ShopIngredient
from larder.models.shopping_list import ShoppingList, ShoppingListIngredient
from larder.models.stored import Stored, StoredIngredient
from larder.models.tag import Tag
from larder.models.user import User

__all__ = [
    "User",
    "Category",
    "ShopIngredient",
    "CustomUserIngredient",
    "Ingredient",
    "IngredientLink",
    "StoreLink",
    "Tag",
    "Recipe",
    "RecipeIngredient",
    "ShoppingList",
    "ShoppingListIngredient",
    "Stored",
    "StoredIngredient",
    "ShopProduct",
]
