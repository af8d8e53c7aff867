"""ShopProduct model."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from larder.database import Base
from larder.models.enums import Retailer, Unit, db_enum
from larder.models.mixins import TimestampMixin


class ShopProduct(Base, TimestampMixin):
    """A retailer product the user saved, e.g. a particular brand of oats."""

    __tablename__ = "shop_products"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    retailer = Column(db_enum(Retailer, "retailer"), nullable=False)
    product_name = Column(String(255), nullable=False)
    url = Column(String(2048), nullable=True)
    price = Column(Integer, nullable=True)  # pence
    size = Column(Float, nullable=True)
    unit = Column(db_enum(Unit, "unit"), nullable=True)
    image_url = Column(String(2048), nullable=True)

    # Relationships
    user = relationship("User", backref="products")
