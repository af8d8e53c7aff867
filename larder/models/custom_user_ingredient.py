"""CustomUserIngredient model for names missing from the catalog."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from larder.database import Base
from larder.models.enums import IngredientType, db_enum
from larder.models.mixins import TimestampMixin


class CustomUserIngredient(Base, TimestampMixin):
    """Per-user fallback entry, created lazily on the first unmatched name.

    Never shared across users and never deleted automatically.
    """

    __tablename__ = "custom_user_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(
        db_enum(IngredientType, "ingredient_type"),
        nullable=False,
        default=IngredientType.FOOD,
    )

    # Relationships
    user = relationship("User", backref="custom_ingredients")
    ingredients = relationship("Ingredient", back_populates="custom_user_ingredient")
