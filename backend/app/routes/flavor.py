"""
Flavorbase Backend: Flavor Route Handlers
===========================================

What:  Flavor CRUD plus the flavor's data supplier identifiers and user notes.
How:   Each handler validates its declared rules, issues exactly one
       repository call, and returns app.responses.respond()'s shaped outcome.
Who:   Mounted under /flavor by app.routes.

Route Inventory:
    GET    /flavor/{id}                                  flavor + vendor
    POST   /flavor                                       create flavor
    PUT    /flavor/{id}                                  update flavor
    DELETE /flavor/{id}                                  delete flavor
    GET    /flavor/{flavorId}/identifiers                identifiers + supplier
    GET    /flavor/{flavorId}/identifier/{dataSupplierId}
    POST   /flavor/{flavorId}/identifier                 create identifier
    PUT    /flavor/{flavorId}/identifier/{dataSupplierId}
    DELETE /flavor/{flavorId}/identifier/{dataSupplierId}
    GET    /flavor/{flavorId}/notes                      notes + flavor + author
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.dependencies import repository
from app.models import Flavor, FlavorIdentifier, UserFlavorNote
from app.responses import respond
from app.schemas.common import ValidationErrorResponse
from app.schemas.flavor import (
    FlavorDetailResponse,
    FlavorIdentifierDetailResponse,
    FlavorIdentifierResponse,
    FlavorResponse,
)
from app.schemas.user import UserFlavorNoteResponse
from app.services.repository import Repository
from app.validation import body_decimal, body_int, body_str, path_int, validate

log = logging.getLogger("flavor")

router = APIRouter(tags=["Flavor"])

COMMON_RESPONSES: Dict[int, Dict[str, Any]] = {
    204: {"description": "No matching rows"},
    400: {"description": "Invalid parameters", "model": ValidationErrorResponse},
    500: {"description": "Database fault (plain-text message)"},
}

FLAVOR_BODY = (
    body_int("vendorId"),
    body_str("name"),
    body_str("slug"),
    body_decimal("density"),
)

IDENTIFIER_KEY = (path_int("flavorId"), path_int("dataSupplierId"))


def _flavor_values(params: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "vendor_id": params["vendor_id"],
        "name": params["name"],
        "slug": params["slug"],
        "density": params["density"],
    }


# ══════════════════════════════════════════════════════════════════════════
# Flavor
# ══════════════════════════════════════════════════════════════════════════

@router.get(
    "/{id}",
    responses={200: {"model": FlavorDetailResponse}, **COMMON_RESPONSES},
    summary="Get a flavor with its vendor",
)
async def get_flavor(
    # 0 is a well-formed id that never exists: it answers 204, not 400
    params: Dict[str, Any] = Depends(validate(path_int("id", min_value=0))),
    flavors: Repository[Flavor] = Depends(repository(Flavor)),
) -> Response:
    flavor_id = params["id"]
    log.info("request for %s", flavor_id)
    return await respond(
        log,
        flavors.find_one({"id": flavor_id}, include=[Flavor.vendor]),
        FlavorDetailResponse,
    )


@router.post("/", include_in_schema=False)
@router.post(
    "",
    responses={200: {"model": FlavorResponse}, **COMMON_RESPONSES},
    summary="Create a flavor",
)
async def create_flavor(
    params: Dict[str, Any] = Depends(validate(*FLAVOR_BODY)),
    flavors: Repository[Flavor] = Depends(repository(Flavor)),
) -> Response:
    log.info("request for new flavor")
    return await respond(log, flavors.create(_flavor_values(params)), FlavorResponse)


@router.put(
    "/{id}",
    responses={200: {"description": "Number of updated rows"}, **COMMON_RESPONSES},
    summary="Update a flavor",
)
async def update_flavor(
    params: Dict[str, Any] = Depends(validate(path_int("id"), *FLAVOR_BODY)),
    flavors: Repository[Flavor] = Depends(repository(Flavor)),
) -> Response:
    flavor_id = params["id"]
    log.info("request to update flavor id %s", flavor_id)
    return await respond(log, flavors.update(_flavor_values(params), {"id": flavor_id}))


@router.delete(
    "/{id}",
    responses={200: {"description": "Number of deleted rows"}, **COMMON_RESPONSES},
    summary="Delete a flavor",
)
async def delete_flavor(
    params: Dict[str, Any] = Depends(validate(path_int("id"))),
    flavors: Repository[Flavor] = Depends(repository(Flavor)),
) -> Response:
    flavor_id = params["id"]
    log.info("request to delete flavor id %s", flavor_id)
    return await respond(log, flavors.destroy({"id": flavor_id}))


# ══════════════════════════════════════════════════════════════════════════
# Flavor identifiers
# ══════════════════════════════════════════════════════════════════════════

@router.get(
    "/{flavorId}/identifiers",
    responses={200: {"model": FlavorIdentifierDetailResponse}, **COMMON_RESPONSES},
    summary="List a flavor's data supplier identifiers",
)
async def list_flavor_identifiers(
    params: Dict[str, Any] = Depends(validate(path_int("flavorId"))),
    identifiers: Repository[FlavorIdentifier] = Depends(repository(FlavorIdentifier)),
) -> Response:
    flavor_id = params["flavor_id"]
    log.info("request for flavor id %s identifiers", flavor_id)
    return await respond(
        log,
        identifiers.find_all(
            {"flavor_id": flavor_id},
            include=[FlavorIdentifier.data_supplier],
            order_by=[FlavorIdentifier.data_supplier_id],
        ),
        FlavorIdentifierDetailResponse,
    )


@router.get(
    "/{flavorId}/identifier/{dataSupplierId}",
    responses={200: {"model": FlavorIdentifierDetailResponse}, **COMMON_RESPONSES},
    summary="Get one data supplier's identifier for a flavor",
)
async def get_flavor_identifier(
    params: Dict[str, Any] = Depends(validate(*IDENTIFIER_KEY)),
    identifiers: Repository[FlavorIdentifier] = Depends(repository(FlavorIdentifier)),
) -> Response:
    flavor_id, data_supplier_id = params["flavor_id"], params["data_supplier_id"]
    log.info(
        "request for flavor id %s data supplier id %s identifier",
        flavor_id,
        data_supplier_id,
    )
    return await respond(
        log,
        identifiers.find_one(
            {"flavor_id": flavor_id, "data_supplier_id": data_supplier_id},
            include=[FlavorIdentifier.data_supplier],
        ),
        FlavorIdentifierDetailResponse,
    )


@router.post(
    "/{flavorId}/identifier",
    responses={200: {"model": FlavorIdentifierResponse}, **COMMON_RESPONSES},
    summary="Create a data supplier identifier for a flavor",
)
async def create_flavor_identifier(
    params: Dict[str, Any] = Depends(
        validate(path_int("flavorId"), body_int("dataSupplierId"), body_str("identifier"))
    ),
    identifiers: Repository[FlavorIdentifier] = Depends(repository(FlavorIdentifier)),
) -> Response:
    flavor_id = params["flavor_id"]
    log.info("request for new flavor identifier for flavor id %s", flavor_id)
    return await respond(
        log,
        identifiers.create(
            {
                "flavor_id": flavor_id,
                "data_supplier_id": params["data_supplier_id"],
                "identifier": params["identifier"],
            }
        ),
        FlavorIdentifierResponse,
    )


@router.put(
    "/{flavorId}/identifier/{dataSupplierId}",
    responses={200: {"description": "Number of updated rows"}, **COMMON_RESPONSES},
    summary="Update a data supplier identifier",
)
async def update_flavor_identifier(
    params: Dict[str, Any] = Depends(validate(*IDENTIFIER_KEY, body_str("identifier"))),
    identifiers: Repository[FlavorIdentifier] = Depends(repository(FlavorIdentifier)),
) -> Response:
    flavor_id, data_supplier_id = params["flavor_id"], params["data_supplier_id"]
    log.info(
        "request to update flavor id %s identifier id %s", flavor_id, data_supplier_id
    )
    return await respond(
        log,
        identifiers.update(
            {"identifier": params["identifier"]},
            {"flavor_id": flavor_id, "data_supplier_id": data_supplier_id},
        ),
    )


@router.delete(
    "/{flavorId}/identifier/{dataSupplierId}",
    responses={200: {"description": "Number of deleted rows"}, **COMMON_RESPONSES},
    summary="Delete a data supplier identifier",
)
async def delete_flavor_identifier(
    params: Dict[str, Any] = Depends(validate(*IDENTIFIER_KEY)),
    identifiers: Repository[FlavorIdentifier] = Depends(repository(FlavorIdentifier)),
) -> Response:
    flavor_id, data_supplier_id = params["flavor_id"], params["data_supplier_id"]
    log.info(
        "request to delete flavor id %s identifier id %s", flavor_id, data_supplier_id
    )
    return await respond(
        log,
        identifiers.destroy({"flavor_id": flavor_id, "data_supplier_id": data_supplier_id}),
    )


# ══════════════════════════════════════════════════════════════════════════
# Flavor notes
# ══════════════════════════════════════════════════════════════════════════

@router.get(
    "/{flavorId}/notes",
    responses={200: {"model": UserFlavorNoteResponse}, **COMMON_RESPONSES},
    summary="List user notes on a flavor",
)
async def list_flavor_notes(
    params: Dict[str, Any] = Depends(validate(path_int("flavorId"))),
    notes: Repository[UserFlavorNote] = Depends(repository(UserFlavorNote)),
) -> Response:
    flavor_id = params["flavor_id"]
    log.info("request for flavor id %s notes", flavor_id)
    return await respond(
        log,
        notes.find_all(
            {"flavor_id": flavor_id},
            include=[UserFlavorNote.flavor, UserFlavorNote.user_profile],
            order_by=[UserFlavorNote.created],
        ),
        UserFlavorNoteResponse,
    )
