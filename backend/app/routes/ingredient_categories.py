"""
Flavorbase Backend: Ingredient Category Route Handlers
========================================================

What:  Paginated category listing (ordered by id) and the category count.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.dependencies import repository
from app.models import IngredientCategory
from app.pagination import resolve_page
from app.responses import respond
from app.routes.flavor import COMMON_RESPONSES
from app.schemas.ingredient import IngredientCategoryResponse
from app.services.repository import Repository
from app.validation import PAGINATION_RULES, validate

log = logging.getLogger("ingredient_categories")

router = APIRouter(tags=["Ingredients"])


@router.get("/", include_in_schema=False)
@router.get(
    "",
    responses={200: {"model": IngredientCategoryResponse}, **COMMON_RESPONSES},
    summary="List ingredient categories",
)
async def list_ingredient_categories(
    params: Dict[str, Any] = Depends(validate(*PAGINATION_RULES)),
    categories: Repository[IngredientCategory] = Depends(repository(IngredientCategory)),
) -> Response:
    limit, skip = resolve_page(params)
    log.info("request for ingredient categories %s", limit)
    return await respond(
        log,
        categories.find_all(limit=limit, offset=skip, order_by=[IngredientCategory.id.asc()]),
        IngredientCategoryResponse,
        allow_empty=True,
    )


@router.get(
    "/count",
    responses={200: {"description": "Total number of categories"}, 500: COMMON_RESPONSES[500]},
    summary="Count ingredient categories",
)
async def count_ingredient_categories(
    categories: Repository[IngredientCategory] = Depends(repository(IngredientCategory)),
) -> Response:
    log.info("request for ingredient categories stats")
    return await respond(log, categories.count(), allow_empty=True)
