"""
Flavorbase Backend: Ingredient Response Schemas
=================================================
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class IngredientCategoryResponse(BaseModel):
    id: int
    name: str
    ordinal: int

    model_config = {"from_attributes": True}


class IngredientResponse(BaseModel):
    """Ingredient with its category; both list and lookup include it."""

    id: int
    ingredient_category_id: int
    name: str
    cas_number: Optional[str] = None
    description: Optional[str] = None
    density: Optional[Decimal] = None
    ingredient_category: IngredientCategoryResponse

    model_config = {"from_attributes": True}
