"""Resolve free-text ingredient names to a user's Ingredient rows.

Lookup order for a name:
    1. the shared catalog (case-insensitive exact match)
    2. the user's custom ingredients (case-insensitive exact match against a
       snapshot taken once per batch)
    3. a new custom ingredient for the user

Whatever the entry, the user's Ingredient pointing at it is found or created.
Every creation path is find-or-create and commits on its own, so repeating a
resolution never duplicates rows and a failure later in a batch leaves
earlier rows in place.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from larder.models.custom_user_ingredient import CustomUserIngredient
from larder.models.enums import IngredientType, LinkKind
from larder.models.ingredient import Ingredient, IngredientLink
from larder.services.catalog import find_shop_ingredient_by_name, load_custom_ingredients

logger = logging.getLogger(__name__)


class Classification(str, Enum):
    """How a name was resolved."""

    MATCHED_CATALOG = "matched-catalog"
    EXISTING_CUSTOM = "existing-custom"
    NEW_CUSTOM = "new-custom"


@dataclass(frozen=True)
class ResolvedIngredient:
    """Outcome of resolving one name."""

    ingredient_id: int
    classification: Classification
    name: str  # canonical catalog name, or the stored custom name
    created: bool = False  # True when the Ingredient row was inserted by this call


@dataclass(frozen=True)
class CustomEntry:
    id: int
    name: str
    preexisting: bool


class CustomIngredientSnapshot:
    """In-memory lookup of one user's custom ingredients for a single batch.

    Keyed by lowercased, trimmed name. Entries added during the batch are
    remembered as new so callers can tell them apart from entries that
    existed when the snapshot was taken. First entry wins on duplicate names.
    """

    def __init__(self, user_id: int, custom_ingredients: Iterable[CustomUserIngredient] = ()):
        self.user_id = user_id
        self._by_name: dict[str, CustomEntry] = {}
        for custom in custom_ingredients:
            self._put(CustomEntry(id=custom.id, name=custom.name, preexisting=True))

    @classmethod
    def load(cls, db: Session, user_id: int) -> "CustomIngredientSnapshot":
        """Fetch the user's custom ingredients once."""
        return cls(user_id, load_custom_ingredients(db, user_id))

    @staticmethod
    def key(name: str) -> str:
        return name.strip().lower()

    def _put(self, entry: CustomEntry) -> None:
        self._by_name.setdefault(self.key(entry.name), entry)

    def find(self, name: str) -> CustomEntry | None:
        return self._by_name.get(self.key(name))

    def add(self, custom: CustomUserIngredient) -> CustomEntry:
        """Record a custom ingredient created during this batch."""
        entry = CustomEntry(id=custom.id, name=custom.name, preexisting=False)
        self._put(entry)
        return self.find(entry.name) or entry

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: str) -> bool:
        return self.key(name) in self._by_name


class IngredientResolver:
    """Find-or-create a user's Ingredient for a free-text name."""

    def __init__(self, db: Session):
        self.db = db

    def snapshot(self, user_id: int) -> CustomIngredientSnapshot:
        """Take the batch snapshot of a user's custom ingredients."""
        return CustomIngredientSnapshot.load(self.db, user_id)

    def resolve(
        self,
        user_id: int,
        raw_name: str,
        snapshot: CustomIngredientSnapshot | None = None,
    ) -> ResolvedIngredient:
        """Resolve one name for a user.

        Pass the same snapshot for every name in a batch; without one a
        single-use snapshot is loaded for this call.
        """
        name = (raw_name or "").strip()
        if not name:
            raise ValueError("Ingredient name must not be empty")

        shop_ingredient = find_shop_ingredient_by_name(self.db, name)
        if shop_ingredient:
            canonical_name = shop_ingredient.name
            ingredient_id, created = self._find_or_create_ingredient(
                user_id, IngredientLink.catalog(shop_ingredient.id)
            )
            return ResolvedIngredient(
                ingredient_id=ingredient_id,
                classification=Classification.MATCHED_CATALOG,
                name=canonical_name,
                created=created,
            )

        if snapshot is None:
            snapshot = self.snapshot(user_id)
        elif snapshot.user_id != user_id:
            raise ValueError(
                f"Snapshot belongs to user {snapshot.user_id}, not user {user_id}"
            )

        entry = snapshot.find(name)
        if entry is None:
            entry = snapshot.add(self._create_custom_ingredient(user_id, name))
            classification = Classification.NEW_CUSTOM
        elif entry.preexisting:
            classification = Classification.EXISTING_CUSTOM
        else:
            classification = Classification.NEW_CUSTOM

        ingredient_id, created = self._find_or_create_ingredient(
            user_id, IngredientLink.custom(entry.id)
        )
        return ResolvedIngredient(
            ingredient_id=ingredient_id,
            classification=classification,
            name=entry.name,
            created=created,
        )

    def _create_custom_ingredient(self, user_id: int, name: str) -> CustomUserIngredient:
        custom = CustomUserIngredient(user_id=user_id, name=name, type=IngredientType.FOOD)
        self.db.add(custom)
        self.db.commit()
        self.db.refresh(custom)
        logger.info(f"Created custom ingredient '{name}' ({custom.id}) for user {user_id}")
        return custom

    def _find_ingredient_id(self, user_id: int, link: IngredientLink) -> int | None:
        query = self.db.query(Ingredient.id).filter(Ingredient.user_id == user_id)
        if link.kind == LinkKind.CATALOG:
            query = query.filter(Ingredient.shop_ingredient_id == link.target_id)
        else:
            query = query.filter(Ingredient.custom_user_ingredient_id == link.target_id)
        row = query.first()
        return row[0] if row else None

    def _find_or_create_ingredient(self, user_id: int, link: IngredientLink) -> tuple[int, bool]:
        """Return (ingredient_id, created)."""
        existing_id = self._find_ingredient_id(user_id, link)
        if existing_id is not None:
            return existing_id, False

        ingredient = Ingredient.for_link(user_id, link)
        self.db.add(ingredient)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Another request linked the same entry first; use its row.
            logger.warning(
                f"Concurrent link of {link.kind.value} ingredient {link.target_id} "
                f"for user {user_id}: {e}"
            )
            self.db.rollback()
            existing_id = self._find_ingredient_id(user_id, link)
            if existing_id is None:
                raise
            return existing_id, False

        logger.info(
            f"Linked user {user_id} to {link.kind.value} ingredient {link.target_id} "
            f"(ingredient {ingredient.id})"
        )
        return ingredient.id, True
