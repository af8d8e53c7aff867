"""User model."""

from sqlalchemy import Column, Integer, String

from larder.database import Base
from larder.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Account that owns ingredients, recipes, shopping lists and storage.

    Emails are stored lowercased.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
