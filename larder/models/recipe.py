"""Recipe and RecipeIngredient models."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from larder.database import Base
from larder.models.enums import Unit, db_enum
from larder.models.mixins import TimestampMixin


class Recipe(Base, TimestampMixin):
    """Recipe model, created by hand or by the URL import pipeline."""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    original_url = Column(String(2048), nullable=True)
    image = Column(String(2048), nullable=True)

    # Relationships
    user = relationship("User", backref="recipes")
    ingredients = relationship(
        "RecipeIngredient", back_populates="recipe", cascade="all, delete-orphan"
    )


class RecipeIngredient(Base, TimestampMixin):
    """One ingredient line within a recipe."""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=False, index=True)
    quantity = Column(Float, nullable=False)
    unit = Column(db_enum(Unit, "unit"), nullable=False)

    # Relationships
    recipe = relationship("Recipe", back_populates="ingredients")
    ingredient = relationship("Ingredient")

    @property
    def ingredient_name(self) -> str:
        return self.ingredient.display_name if self.ingredient else "Unnamed"
