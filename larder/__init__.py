"""Recipe, ingredient, storage and shopping-list service."""
