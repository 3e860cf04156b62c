"""
Flavorbase Backend: Request Validation Rules
==============================================

What:  Statically declared per-route field rules and the adapter that runs
       them against an incoming request.
How:   A route lists its Rules; each rule maps to a pydantic field, and the
       rules of one route compile into a single pydantic model. `validate()`
       turns them into a FastAPI dependency that either returns the coerced
       values keyed by canonical snake_case name, or raises
       RequestValidationFailed with pydantic's errors rendered as descriptors
       (mapped to 400 in main.py).
Who:   Every resource handler in app.routes.
When:  After the authentication gate, before any repository call.

Checks:
    integer   whole number, coerced to int; min_value and the INTEGER column range
    numeric   number, truncated to int (used for offset / limit)
    string    must be a JSON string; optional min_length
    decimal   finite decimal, coerced to Decimal

Error descriptor:
    {"location": "params" | "query" | "body", "field": <name>,
     "message": <text>, "value": <raw value, omitted when absent>}
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Annotated, Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from fastapi import Request
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Field,
    StrictStr,
    ValidationError,
    create_model,
)

from app.exceptions import RequestValidationFailed

DEFAULT_MESSAGE = "Invalid value"
LENGTH_MESSAGE = "length"

# Range of the INTEGER columns every id and page value is compared against
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")

_MISSING = object()


class Location(str, Enum):
    PATH = "params"
    QUERY = "query"
    BODY = "body"


class Check(str, Enum):
    INTEGER = "integer"
    NUMERIC = "numeric"
    STRING = "string"
    DECIMAL = "decimal"


def canonical_name(field: str) -> str:
    """flavorId → flavor_id"""
    return _CAMEL_RE.sub("_", field).lower()


@dataclass(frozen=True)
class Rule:
    """One declared field constraint."""

    field: str
    location: Location
    check: Check
    optional: bool = False
    min_value: Optional[int] = None
    min_length: Optional[int] = None

    @property
    def key(self) -> str:
        return canonical_name(self.field)


# ── Rule constructors ─────────────────────────────────────────────────────

def path_int(field: str, min_value: Optional[int] = 1) -> Rule:
    return Rule(field, Location.PATH, Check.INTEGER, min_value=min_value)


def query_number(field: str) -> Rule:
    """Optional numeric query parameter, truncated to int (offset / limit)."""
    return Rule(field, Location.QUERY, Check.NUMERIC, optional=True)


def body_int(field: str, min_value: Optional[int] = 1) -> Rule:
    return Rule(field, Location.BODY, Check.INTEGER, min_value=min_value)


def body_str(field: str, min_length: Optional[int] = 1) -> Rule:
    return Rule(field, Location.BODY, Check.STRING, min_length=min_length)


def body_decimal(field: str) -> Rule:
    return Rule(field, Location.BODY, Check.DECIMAL)


PAGINATION_RULES: Tuple[Rule, ...] = (query_number("offset"), query_number("limit"))


# ── Field types ───────────────────────────────────────────────────────────

def _plain_number(value: Any) -> Any:
    """Rejects what pydantic's lax number parsing would otherwise let through."""
    if isinstance(value, bool):
        raise ValueError("booleans are not numbers")
    if isinstance(value, str) and value != value.strip():
        raise ValueError("surrounding whitespace")
    return value


def _truncate(value: Decimal) -> int:
    number = int(value)
    if not INTEGER_MIN <= number <= INTEGER_MAX:
        raise ValueError("out of range")
    return number


def _field_type(rule: Rule) -> Any:
    if rule.check is Check.INTEGER:
        return Annotated[
            int,
            BeforeValidator(_plain_number),
            Field(ge=rule.min_value if rule.min_value is not None else INTEGER_MIN, le=INTEGER_MAX),
        ]
    if rule.check is Check.NUMERIC:
        return Annotated[
            Decimal,
            BeforeValidator(_plain_number),
            Field(allow_inf_nan=False),
            AfterValidator(_truncate),
        ]
    if rule.check is Check.STRING:
        return Annotated[StrictStr, Field(min_length=rule.min_length)]
    return Annotated[Decimal, BeforeValidator(_plain_number), Field(allow_inf_nan=False)]


@lru_cache(maxsize=None)
def params_model(rules: Tuple[Rule, ...]) -> Type[BaseModel]:
    """One pydantic model per rule list; fields keep declaration order."""
    fields: Dict[str, Any] = {}
    for rule in rules:
        annotation = _field_type(rule)
        if rule.optional:
            fields[rule.key] = (Optional[annotation], None)
        else:
            fields[rule.key] = (annotation, ...)
    return create_model("RequestParams", **fields)


def _message(rule: Rule, error_type: str) -> str:
    if rule.check is Check.STRING and error_type == "string_too_short":
        return LENGTH_MESSAGE
    return DEFAULT_MESSAGE


def describe_errors(
    exc: ValidationError,
    rules: Tuple[Rule, ...],
    data: Mapping[str, Any],
) -> List[Dict[str, Any]]:
    """pydantic errors → descriptors, carrying the raw value as sent."""
    by_key = {rule.key: rule for rule in rules}
    described = []
    for error in exc.errors():
        rule = by_key[error["loc"][0]]
        descriptor: Dict[str, Any] = {
            "location": rule.location.value,
            "field": rule.field,
            "message": _message(rule, error["type"]),
        }
        if error["type"] != "missing":
            descriptor["value"] = data.get(rule.key)
        described.append(descriptor)
    return described


def run_rules(
    rules: Tuple[Rule, ...],
    path: Mapping[str, Any],
    query: Mapping[str, Any],
    body: Mapping[str, Any],
) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
    """
    Evaluate rules in declaration order.

    Returns (values, errors). `errors` is empty exactly when every rule held;
    optional fields that are absent (or null) are left out of `values`.
    """
    sources = {Location.PATH: path, Location.QUERY: query, Location.BODY: body}
    data: Dict[str, Any] = {}
    for rule in rules:
        raw = sources[rule.location].get(rule.field, _MISSING)
        if raw is _MISSING or (rule.optional and raw is None):
            continue
        data[rule.key] = raw

    try:
        params = params_model(tuple(rules)).model_validate(data)
    except ValidationError as exc:
        return {}, describe_errors(exc, tuple(rules), data)
    return params.model_dump(exclude_unset=True), []


async def _read_json_object(request: Request) -> Dict[str, Any]:
    """Request body as a dict; anything that is not a JSON object reads as {}."""
    if not await request.body():
        return {}
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def validate(*rules: Rule) -> Callable[..., Any]:
    """
    Build the FastAPI dependency enforcing `rules`.

    Usage:
        @router.get("/{id}")
        async def get_thing(params: dict = Depends(validate(path_int("id")))):
            thing_id = params["id"]
    """
    reads_body = any(rule.location is Location.BODY for rule in rules)
    params_model(rules)

    async def dependency(request: Request) -> Dict[str, Any]:
        body = await _read_json_object(request) if reads_body else {}
        values, errors = run_rules(
            rules,
            path=request.path_params,
            query=request.query_params,
            body=body,
        )
        if errors:
            raise RequestValidationFailed(errors, context={"path": request.url.path})
        return values

    return dependency
