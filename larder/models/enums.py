"""Enums for model fields."""

from enum import Enum

from sqlalchemy import Enum as SAEnum


class Unit(str, Enum):
    """Measurement units for recipe, shopping-list and storage lines.

    No conversion between units is performed anywhere.
    """

    G = "g"
    KG = "kg"
    ML = "ml"
    L = "l"
    TBSP = "tbsp"
    TSP = "tsp"
    PIECE = "piece"


class IngredientType(str, Enum):
    """Kind of product an ingredient is."""

    FOOD = "food"
    DRINK = "drink"
    CONDIMENT = "condiment"
    CLEANING = "cleaning"
    HOUSEHOLD = "household"


class StorageType(str, Enum):
    """Where an ingredient or storage location keeps things."""

    PANTRY = "pantry"
    FRIDGE = "fridge"
    FREEZER = "freezer"
    NONE = "none"


class Retailer(str, Enum):
    """Supermarkets a saved product can come from."""

    TESCO = "tesco"
    MORRISONS = "morrisons"
    SAINSBURYS = "sainsburys"
    ASDA = "asda"


class LinkKind(str, Enum):
    """Which kind of entry a user's ingredient points at."""

    CATALOG = "catalog"
    CUSTOM = "custom"


def db_enum(enum_cls: type[Enum], name: str) -> SAEnum:
    """Column type that stores an enum by its value."""
    return SAEnum(
        enum_cls,
        name=name,
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
    )
