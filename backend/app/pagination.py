"""
Flavorbase Backend: List Pagination
=====================================

What:  Turns the validated `offset` / `limit` query values of a list route
       into the (limit, skip) pair passed to Repository.find_all().

Rules:
    limit   defaults to settings.default_page_size when absent or < 1
    offset  1-based row position; skip = max(offset - 1, 0), 0 when absent

    ?offset=1&limit=2   → (2, 0)   first two rows
    ?offset=3           → (20, 2)  rows 3..22
    ?offset=0           → (20, 0)  same as absent
"""

from typing import Any, Mapping, Tuple

from app.config import settings


def resolve_page(params: Mapping[str, Any]) -> Tuple[int, int]:
    limit = params.get("limit") or 0
    if limit < 1:
        limit = settings.default_page_size

    offset = params.get("offset")
    skip = max(offset - 1, 0) if offset else 0
    return limit, skip
