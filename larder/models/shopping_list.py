"""ShoppingList and ShoppingListIngredient models."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from larder.database import Base
from larder.models.enums import Unit, db_enum
from larder.models.mixins import TimestampMixin


class ShoppingList(Base, TimestampMixin):
    """Named shopping list; names are unique per user."""

    __tablename__ = "shopping_lists"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_shopping_list_user_name"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)

    # Relationships
    user = relationship("User", backref="shopping_lists")
    ingredients = relationship(
        "ShoppingListIngredient", back_populates="shopping_list", cascade="all, delete-orphan"
    )


class ShoppingListIngredient(Base, TimestampMixin):
    """Ingredient line on a shopping list."""

    __tablename__ = "shopping_list_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    shopping_list_id = Column(
        Integer, ForeignKey("shopping_lists.id"), nullable=False, index=True
    )
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=False, index=True)
    quantity = Column(Float, nullable=False)
    unit = Column(db_enum(Unit, "unit"), nullable=False)

    # Relationships
    shopping_list = relationship("ShoppingList", back_populates="ingredients")
    ingredient = relationship("Ingredient")

    @property
    def ingredient_name(self) -> str:
        return self.ingredient.display_name if self.ingredient else "Unnamed"
