"""Saved product API endpoints."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from larder.api.dependencies import get_current_user
from larder.database import get_db
from larder.models.product import ShopProduct
from larder.models.user import User
from larder.schemas.product import ProductCreate, ProductResponse

router = APIRouter(prefix="/api/v1/products", tags=["products"])


def get_user_product(db: Session, product_id: int, user: User) -> ShopProduct:
    """Get a saved product that belongs to the user."""
    product = (
        db.query(ShopProduct)
        .filter(ShopProduct.id == product_id, ShopProduct.user_id == user.id)
        .first()
    )
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


def to_pence(price: Decimal | None) -> int | None:
    if price is None:
        return None
    return int((price * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def _apply(product: ShopProduct, data: ProductCreate) -> None:
    product_name = data.product_name.strip()
    if not product_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Product name is required"
        )
    product.retailer = data.retailer
    product.product_name = product_name
    product.url = _optional(data.url)
    product.price = to_pence(data.price)
    product.size = data.size
    product.unit = data.unit
    product.image_url = _optional(data.image_url)


@router.get("", response_model=list[ProductResponse])
async def list_products(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List the user's saved products, newest first."""
    return (
        db.query(ShopProduct)
        .filter(ShopProduct.user_id == current_user.id)
        .order_by(ShopProduct.created_at.desc(), ShopProduct.id.desc())
        .all()
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a saved product."""
    return get_user_product(db, product_id, current_user)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Save a product."""
    product = ShopProduct(user_id=current_user.id)
    _apply(product, data)
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    data: ProductCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Replace a saved product's details."""
    product = get_user_product(db, product_id, current_user)
    _apply(product, data)
    db.commit()
    db.refresh(product)
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a saved product."""
    product = get_user_product(db, product_id, current_user)
    db.delete(product)
    db.commit()
