"""initial schema

Revision ID: 4c2e9a7d1b30
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c2e9a7d1b30"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

unit_enum = postgresql.ENUM(
    "g", "kg", "ml", "l", "tbsp", "tsp", "piece", name="unit", create_type=False
)
ingredient_type_enum = postgresql.ENUM(
    "food", "drink", "condiment", "cleaning", "household",
    name="ingredient_type",
    create_type=False,
)
storage_type_enum = postgresql.ENUM(
    "pantry", "fridge", "freezer", "none", name="storage_type", create_type=False
)

ENUMS = [unit_enum, ingredient_type_enum, storage_type_enum]


def timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
            onupdate=sa.func.now(),
        ),
    ]


def line_columns() -> list[sa.Column]:
    """Columns shared by recipe, shopping-list and stored lines."""
    return [
        sa.Column(
            "ingredient_id",
            sa.Integer(),
            sa.ForeignKey("ingredients.id"),
            nullable=False,
            index=True,
        ),
        sa.Column("quantity", sa.Float(), nullable=False),
        sa.Column("unit", unit_enum, nullable=False),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    for enum in ENUMS:
        enum.create(bind, checkfirst=True)

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        *timestamps(),
    )

    # Global catalog
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("color", sa.String(20), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        *timestamps(),
    )
    op.create_table(
        "shop_ingredients",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("type", ingredient_type_enum, nullable=False),
        sa.Column("storage_type", storage_type_enum, nullable=True),
        sa.Column(
            "category_id",
            sa.Integer(),
            sa.ForeignKey("categories.id"),
            nullable=True,
            index=True,
        ),
        *timestamps(),
    )

    # Per-user ingredients
    op.create_table(
        "custom_user_ingredients",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", ingredient_type_enum, nullable=False),
        *timestamps(),
    )
    op.create_table(
        "ingredients",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column(
            "shop_ingredient_id",
            sa.Integer(),
            sa.ForeignKey("shop_ingredients.id"),
            nullable=True,
            index=True,
        ),
        sa.Column(
            "custom_user_ingredient_id",
            sa.Integer(),
            sa.ForeignKey("custom_user_ingredients.id"),
            nullable=True,
            index=True,
        ),
        *timestamps(),
        sa.CheckConstraint(
            "(shop_ingredient_id IS NULL) <> (custom_user_ingredient_id IS NULL)",
            name="ck_ingredient_exactly_one_link",
        ),
        sa.UniqueConstraint("user_id", "shop_ingredient_id", name="uq_ingredient_user_shop"),
        sa.UniqueConstraint(
            "user_id", "custom_user_ingredient_id", name="uq_ingredient_user_custom"
        ),
    )
    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("color", sa.String(20), nullable=False),
        *timestamps(),
    )
    op.create_table(
        "ingredient_tags",
        sa.Column(
            "ingredient_id", sa.Integer(), sa.ForeignKey("ingredients.id"), primary_key=True
        ),
        sa.Column(
            "tag_id",
            sa.Integer(),
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    op.create_table(
        "store_links",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "ingredient_id",
            sa.Integer(),
            sa.ForeignKey("ingredients.id"),
            nullable=False,
            index=True,
        ),
        sa.Column("url", sa.String(2048), nullable=False),
        *timestamps(),
    )

    # Recipes
    op.create_table(
        "recipes",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("original_url", sa.String(2048), nullable=True),
        sa.Column("image", sa.String(2048), nullable=True),
        *timestamps(),
    )
    op.create_table(
        "recipe_ingredients",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "recipe_id", sa.Integer(), sa.ForeignKey("recipes.id"), nullable=False, index=True
        ),
        *line_columns(),
        *timestamps(),
    )

    # Shopping lists
    op.create_table(
        "shopping_lists",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        *timestamps(),
        sa.UniqueConstraint("user_id", "name", name="uq_shopping_list_user_name"),
    )
    op.create_table(
        "shopping_list_ingredients",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "shopping_list_id",
            sa.Integer(),
            sa.ForeignKey("shopping_lists.id"),
            nullable=False,
            index=True,
        ),
        *line_columns(),
        *timestamps(),
    )

    # Home storage
    op.create_table(
        "stored",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", storage_type_enum, nullable=False),
        *timestamps(),
    )
    op.create_table(
        "stored_ingredients",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("stored_id", sa.Integer(), sa.ForeignKey("stored.id"), nullable=False, index=True),
        *line_columns(),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("store_link", sa.String(2048), nullable=True),
        *timestamps(),
        sa.UniqueConstraint("stored_id", "ingredient_id", name="uq_stored_ingredient"),
    )


def downgrade() -> None:
    op.drop_table("stored_ingredients")
    op.drop_table("stored")
    op.drop_table("shopping_list_ingredients")
    op.drop_table("shopping_lists")
    op.drop_table("recipe_ingredients")
    op.drop_table("recipes")
    op.drop_table("store_links")
    op.drop_table("ingredient_tags")
    op.drop_table("tags")
    op.drop_table("ingredients")
    op.drop_table("custom_user_ingredients")
    op.drop_table("shop_ingredients")
    op.drop_table("categories")
    op.drop_table("users")

    bind = op.get_bind()
    for enum in reversed(ENUMS):
        enum.drop(bind, checkfirst=True)
