"""Category model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from larder.database import Base
from larder.models.mixins import TimestampMixin


class Category(Base, TimestampMixin):
    """Global grouping for catalog ingredients (Meat, Dairy, ...)."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    color = Column(String(20), nullable=True)
    icon = Column(String(50), nullable=True)

    # Relationships
    shop_ingredients = relationship("ShopIngredient", back_populates="category")
