"""
Flavorbase Backend: Ingredient Route Handler
==============================================

What:  GET /ingredient/{id}, one ingredient with its category.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.dependencies import repository
from app.models import Ingredient
from app.responses import respond
from app.routes.flavor import COMMON_RESPONSES
from app.schemas.ingredient import IngredientResponse
from app.services.repository import Repository
from app.validation import path_int, validate

log = logging.getLogger("ingredient")

router = APIRouter(tags=["Ingredients"])


@router.get(
    "/{id}",
    responses={200: {"model": IngredientResponse}, **COMMON_RESPONSES},
    summary="Get an ingredient with its category",
)
async def get_ingredient(
    params: Dict[str, Any] = Depends(validate(path_int("id", min_value=0))),
    ingredients: Repository[Ingredient] = Depends(repository(Ingredient)),
) -> Response:
    ingredient_id = params["id"]
    log.info("request for %s", ingredient_id)
    return await respond(
        log,
        ingredients.find_one({"id": ingredient_id}, include=[Ingredient.ingredient_category]),
        IngredientResponse,
    )
