# Routes package init
"""
Flavorbase Backend: API Routes Package
========================================

What:  HTTP route handlers, one module per resource, assembled into the
       authenticated `api_router`.
How:   Every resource router is mounted behind the authentication gate, so
       the gate runs before any request validation or data access.

Route Inventory (under settings.api_prefix):
    - flavor.py:                 /flavor/...             (CRUD, identifiers, notes)
    - ingredient.py:             /ingredient/{id}
    - ingredients.py:            /ingredients, /ingredients/count
    - ingredient_categories.py:  /ingredientCategories, /ingredientCategories/count
    - preparations.py:           /preparations
    - health.py:                 GET /health             (unauthenticated, no prefix)

Design Principle:
    Routes are THIN: validate, make one repository call, shape the outcome
    with app.responses.respond().
"""

from fastapi import APIRouter, Depends

from app.auth import authenticate
from app.routes import (
    flavor,
    ingredient,
    ingredient_categories,
    ingredients,
    preparations,
)

api_router = APIRouter(dependencies=[Depends(authenticate())])

api_router.include_router(flavor.router, prefix="/flavor")
api_router.include_router(ingredient.router, prefix="/ingredient")
api_router.include_router(ingredients.router, prefix="/ingredients")
api_router.include_router(ingredient_categories.router, prefix="/ingredientCategories")
api_router.include_router(preparations.router, prefix="/preparations")
