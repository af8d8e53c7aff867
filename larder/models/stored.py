"""Stored (storage location) and StoredIngredient models."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from larder.database import Base
from larder.models.enums import StorageType, Unit, db_enum
from larder.models.mixins import TimestampMixin


class Stored(Base, TimestampMixin):
    """A place at home where ingredients are kept (a cupboard, the freezer)."""

    __tablename__ = "stored"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(db_enum(StorageType, "storage_type"), nullable=False)

    # Relationships
    user = relationship("User", backref="stored")
    ingredients = relationship(
        "StoredIngredient",
        back_populates="stored",
        cascade="all, delete-orphan",
        order_by="StoredIngredient.id.desc()",
    )


class StoredIngredient(Base, TimestampMixin):
    """How much of an ingredient sits in a storage location."""

    __tablename__ = "stored_ingredients"
    __table_args__ = (
        UniqueConstraint("stored_id", "ingredient_id", name="uq_stored_ingredient"),
    )

    id = Column(Integer, primary_key=True, index=True)
    stored_id = Column(Integer, ForeignKey("stored.id"), nullable=False, index=True)
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=False, index=True)
    quantity = Column(Float, nullable=False)
    unit = Column(db_enum(Unit, "unit"), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=True)
    store_link = Column(String(2048), nullable=True)

    # Relationships
    stored = relationship("Stored", back_populates="ingredients")
    ingredient = relationship("Ingredient")

    @property
    def ingredient_name(self) -> str:
        return self.ingredient.display_name if self.ingredient else "Unnamed"
