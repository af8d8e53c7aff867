"""Tag model and the ingredient/tag association table."""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from larder.database import Base
from larder.models.mixins import TimestampMixin

DEFAULT_TAG_COLOR = "#3b82f6"

ingredient_tags = Table(
    "ingredient_tags",
    Base.metadata,
    Column("ingredient_id", Integer, ForeignKey("ingredients.id"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Tag(Base, TimestampMixin):
    """User-defined label attached to ingredients."""

    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    color = Column(String(20), nullable=False, default=DEFAULT_TAG_COLOR)

    # Relationships
    user = relationship("User", backref="tags")
    ingredients = relationship("Ingredient", secondary=ingredient_tags, back_populates="tags")
