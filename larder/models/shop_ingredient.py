"""ShopIngredient model: the shared ingredient catalog."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from larder.database import Base
from larder.models.enums import IngredientType, StorageType, db_enum
from larder.models.mixins import TimestampMixin


class ShopIngredient(Base, TimestampMixin):
    """Canonical catalog entry, shared by every user.

    Names are unique and matched case-insensitively during resolution.
    """

    __tablename__ = "shop_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False, index=True)
    type = Column(
        db_enum(IngredientType, "ingredient_type"),
        nullable=False,
        default=IngredientType.FOOD,
    )
    storage_type = Column(db_enum(StorageType, "storage_type"), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)

    # Relationships
    category = relationship("Category", back_populates="shop_ingredients")
    ingredients = relationship("Ingredient", back_populates="shop_ingredient")
