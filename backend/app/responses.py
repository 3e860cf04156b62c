"""
Flavorbase Backend: Response Shaping
======================================

What:  The single place where the outcome of a repository call becomes an
       HTTP response.
How:   `respond()` awaits the facade call and hands the outcome to
       `shape_response()`. A DataAccessError from the call, or a pydantic
       ValidationError while serializing its rows, becomes the 500 fault.

Outcome → response:
    fault (DataAccessError, serialization)  500, text/plain fault message
    None                                    204, empty body
    empty list / 0 (allow_empty=False)      204, empty body
    anything else                           200, application/json

allow_empty=True is used where an empty result is still content: paged
lists answer 200 with [] past the last row, and counts answer 200 with 0.
"""

import logging
from typing import Any, Awaitable, Optional, Type

from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel, ValidationError

from app.exceptions import DataAccessError


def is_empty(result: Any) -> bool:
    """Zero-length list or zero affected rows."""
    if isinstance(result, bool):
        return False
    if isinstance(result, int):
        return result == 0
    if isinstance(result, (list, tuple)):
        return len(result) == 0
    return False


def serialize(result: Any, schema: Optional[Type[BaseModel]] = None) -> Any:
    """ORM row(s) → JSON-ready data through `schema`; scalars pass through."""
    if schema is None:
        return result
    if isinstance(result, (list, tuple)):
        return [schema.model_validate(item).model_dump(mode="json") for item in result]
    return schema.model_validate(result).model_dump(mode="json")


def shape_response(
    result: Any = None,
    schema: Optional[Type[BaseModel]] = None,
    fault: Optional[Exception] = None,
    allow_empty: bool = False,
) -> Response:
    if fault is not None:
        message = fault.message if isinstance(fault, DataAccessError) else str(fault)
        return PlainTextResponse(message, status_code=500)

    if result is None or (not allow_empty and is_empty(result)):
        return Response(status_code=204)

    return JSONResponse(status_code=200, content=serialize(result, schema))


async def respond(
    log: logging.Logger,
    operation: Awaitable[Any],
    schema: Optional[Type[BaseModel]] = None,
    allow_empty: bool = False,
) -> Response:
    """
    Await one repository operation and shape its outcome.

    Args:
        log:        The resource's logger; faults are logged with the message only
        operation:  The pending facade call, e.g. repo.find_one({"id": 3})
        schema:     Response schema for ORM rows (None for counts)
        allow_empty: Treat [] / 0 as content (200) instead of 204
    """
    try:
        result = await operation
        return shape_response(result, schema=schema, allow_empty=allow_empty)
    except DataAccessError as exc:
        log.error(exc.message)
        return shape_response(fault=exc)
    except ValidationError as exc:
        # a stored row that does not fit its response schema
        log.error("unserializable %s: %s", exc.title, exc)
        return shape_response(fault=exc)
