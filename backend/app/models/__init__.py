"""
Flavorbase Backend: ORM Models Package
========================================

Importing this package registers every table with Base.metadata, which is
what Alembic and the test fixtures rely on.
"""

from app.models.flavor import DataSupplier, Flavor, FlavorIdentifier, Vendor
from app.models.ingredient import Ingredient, IngredientCategory
from app.models.preparation import Preparation
from app.models.user import UserFlavorNote, UserProfile

__all__ = [
    "DataSupplier",
    "Flavor",
    "FlavorIdentifier",
    "Ingredient",
    "IngredientCategory",
    "Preparation",
    "UserFlavorNote",
    "UserProfile",
    "Vendor",
]
