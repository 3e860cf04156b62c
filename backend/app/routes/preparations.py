"""
Flavorbase Backend: Preparations Route Handler
================================================

What:  GET /preparations, paginated like the ingredient lists.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.dependencies import repository
from app.models import Preparation
from app.pagination import resolve_page
from app.responses import respond
from app.routes.flavor import COMMON_RESPONSES
from app.schemas.preparation import PreparationResponse
from app.services.repository import Repository
from app.validation import PAGINATION_RULES, validate

log = logging.getLogger("preparations")

router = APIRouter(tags=["Preparations"])


@router.get("/", include_in_schema=False)
@router.get(
    "",
    responses={200: {"model": PreparationResponse}, **COMMON_RESPONSES},
    summary="List preparations",
)
async def list_preparations(
    params: Dict[str, Any] = Depends(validate(*PAGINATION_RULES)),
    preparations: Repository[Preparation] = Depends(repository(Preparation)),
) -> Response:
    limit, skip = resolve_page(params)
    log.info("request for preparations %s", limit)
    return await respond(
        log,
        preparations.find_all(limit=limit, offset=skip, order_by=[Preparation.id]),
        PreparationResponse,
        allow_empty=True,
    )
