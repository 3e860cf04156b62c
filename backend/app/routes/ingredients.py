"""
Flavorbase Backend: Ingredients List Route Handlers
=====================================================

What:  Paginated ingredient listing and the ingredient count.

Pagination:
    GET /ingredients?offset=1&limit=20
    offset is a 1-based row position, limit defaults to the configured page
    size (see app.pagination). A page past the last row is still 200 with [].
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.dependencies import repository
from app.models import Ingredient
from app.pagination import resolve_page
from app.responses import respond
from app.routes.flavor import COMMON_RESPONSES
from app.schemas.ingredient import IngredientResponse
from app.services.repository import Repository
from app.validation import PAGINATION_RULES, validate

log = logging.getLogger("ingredients")

router = APIRouter(tags=["Ingredients"])


@router.get("/", include_in_schema=False)
@router.get(
    "",
    responses={200: {"model": IngredientResponse}, **COMMON_RESPONSES},
    summary="List ingredients with their categories",
)
async def list_ingredients(
    params: Dict[str, Any] = Depends(validate(*PAGINATION_RULES)),
    ingredients: Repository[Ingredient] = Depends(repository(Ingredient)),
) -> Response:
    limit, skip = resolve_page(params)
    log.info("request for ingredients %s", limit)
    return await respond(
        log,
        ingredients.find_all(
            include=[Ingredient.ingredient_category],
            limit=limit,
            offset=skip,
            order_by=[Ingredient.id],
        ),
        IngredientResponse,
        allow_empty=True,
    )


@router.get(
    "/count",
    responses={200: {"description": "Total number of ingredients"}, 500: COMMON_RESPONSES[500]},
    summary="Count ingredients",
)
async def count_ingredients(
    ingredients: Repository[Ingredient] = Depends(repository(Ingredient)),
) -> Response:
    log.info("request for ingredient stats")
    return await respond(log, ingredients.count(), allow_empty=True)
