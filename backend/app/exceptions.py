"""
Flavorbase Backend: Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a message and optional context dict. Global
       exception handlers (registered in main.py) map them to HTTP responses;
       DataAccessError is instead caught at the handler boundary by
       app.responses.respond().

Exception Hierarchy:
    FlavorbaseError (base)
    ├── RequestValidationFailed  → 400 Bad Request, {"errors": [...]}
    ├── AuthenticationError      → 401 Unauthorized (owned by the auth gate)
    └── DataAccessError          → 500 Internal Server Error, text/plain message

A lookup or mutation that matches no rows is not an exception: the response
shaping layer answers it with 204 No Content.
"""

from typing import Any, Dict, List, Optional


class FlavorbaseError(Exception):
    """
    Base exception for all Flavorbase application errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class RequestValidationFailed(FlavorbaseError):
    """
    Raised when one or more declared field rules are unmet.

    HTTP:    400 Bad Request
    Body:    {"errors": [<descriptor>, ...]}, the descriptors verbatim and
             in rule declaration order.

    Example response:
        {
            "errors": [
                {"location": "params", "field": "id", "message": "Invalid value", "value": "ham"}
            ]
        }
    """

    def __init__(
        self,
        errors: List[Dict[str, Any]],
        context: Optional[Dict[str, Any]] = None,
    ):
        fields = ", ".join(str(e.get("field")) for e in errors)
        super().__init__(message=f"Validation failed for: {fields}", context=context)
        self.errors = errors


class AuthenticationError(FlavorbaseError):
    """
    Raised by the authentication gate when a caller cannot be admitted.

    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Authentication required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DataAccessError(FlavorbaseError):
    """
    Raised when a repository (data access facade) operation fails.

    What:    Constraint violation, connectivity loss, timeout, bad SQL.
    HTTP:    500 Internal Server Error, the message as a plain-text body.
    Retry:   Never retried automatically.

    Attributes:
        operation: Facade operation that failed (find_one, create, ...)
        entity:    Model name the operation targeted
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        if entity:
            ctx["entity"] = entity
        super().__init__(message=message, context=ctx)
        self.operation = operation
        self.entity = entity
