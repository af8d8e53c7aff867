"""add shop products

Revision ID: 9b51f0e3c6a2
Revises: 4c2e9a7d1b30
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "9b51f0e3c6a2"
down_revision: str | None = "4c2e9a7d1b30"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

retailer_enum = postgresql.ENUM(
    "tesco", "morrisons", "sainsburys", "asda", name="retailer", create_type=False
)
unit_enum = postgresql.ENUM(
    "g", "kg", "ml", "l", "tbsp", "tsp", "piece", name="unit", create_type=False
)


def upgrade() -> None:
    retailer_enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "shop_products",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column("retailer", retailer_enum, nullable=False),
        sa.Column("product_name", sa.String(255), nullable=False),
        sa.Column("url", sa.String(2048), nullable=True),
        sa.Column("price", sa.Integer(), nullable=True),
        sa.Column("size", sa.Float(), nullable=True),
        sa.Column("unit", unit_enum, nullable=True),
        sa.Column("image_url", sa.String(2048), nullable=True),
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
    )


def downgrade() -> None:
    op.drop_table("shop_products")
    retailer_enum.drop(op.get_bind(), checkfirst=True)
