"""Ingredient model: a user's pointer into the catalog or their custom entries."""

from dataclasses import dataclass

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from larder.database import Base
from larder.models.enums import LinkKind
from larder.models.mixins import TimestampMixin
from larder.models.tag import ingredient_tags


@dataclass(frozen=True)
class IngredientLink:
    """What an Ingredient points at: a catalog entry or a custom entry."""

    kind: LinkKind
    target_id: int

    @classmethod
    def catalog(cls, shop_ingredient_id: int) -> "IngredientLink":
        return cls(LinkKind.CATALOG, shop_ingredient_id)

    @classmethod
    def custom(cls, custom_user_ingredient_id: int) -> "IngredientLink":
        return cls(LinkKind.CUSTOM, custom_user_ingredient_id)


class Ingredient(Base, TimestampMixin):
    """The entity recipes, storage and shopping lists refer to.

    Exactly one of shop_ingredient_id / custom_user_ingredient_id is set,
    and a user has at most one Ingredient per linked entry.
    """

    __tablename__ = "ingredients"
    __table_args__ = (
        CheckConstraint(
            "(shop_ingredient_id IS NULL) <> (custom_user_ingredient_id IS NULL)",
            name="ck_ingredient_exactly_one_link",
        ),
        UniqueConstraint("user_id", "shop_ingredient_id", name="uq_ingredient_user_shop"),
        UniqueConstraint("user_id", "custom_user_ingredient_id", name="uq_ingredient_user_custom"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    shop_ingredient_id = Column(
        Integer, ForeignKey("shop_ingredients.id"), nullable=True, index=True
    )
    custom_user_ingredient_id = Column(
        Integer, ForeignKey("custom_user_ingredients.id"), nullable=True, index=True
    )

    # Relationships
    user = relationship("User", backref="ingredients")
    shop_ingredient = relationship("ShopIngredient", back_populates="ingredients")
    custom_user_ingredient = relationship("CustomUserIngredient", back_populates="ingredients")
    tags = relationship("Tag", secondary=ingredient_tags, back_populates="ingredients")
    store_links = relationship(
        "StoreLink", back_populates="ingredient", cascade="all, delete-orphan"
    )

    @classmethod
    def for_link(cls, user_id: int, link: IngredientLink) -> "Ingredient":
        """Build an unsaved Ingredient for the given link."""
        if link.kind == LinkKind.CATALOG:
            return cls(user_id=user_id, shop_ingredient_id=link.target_id)
        return cls(user_id=user_id, custom_user_ingredient_id=link.target_id)

    @property
    def link(self) -> IngredientLink:
        if self.shop_ingredient_id is not None:
            return IngredientLink.catalog(self.shop_ingredient_id)
        if self.custom_user_ingredient_id is not None:
            return IngredientLink.custom(self.custom_user_ingredient_id)
        raise ValueError(f"Ingredient {self.id} has no link")

    @property
    def display_name(self) -> str:
        if self.shop_ingredient is not None:
            return self.shop_ingredient.name
        if self.custom_user_ingredient is not None:
            return self.custom_user_ingredient.name
        return "Unnamed"


class StoreLink(Base, TimestampMixin):
    """Product page a user keeps for one of their ingredients."""

    __tablename__ = "store_links"

    id = Column(Integer, primary_key=True, index=True)
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=False, index=True)
    url = Column(String(2048), nullable=False)

    # Relationships
    ingredient = relationship("Ingredient", back_populates="store_links")
