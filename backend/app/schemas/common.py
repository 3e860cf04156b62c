"""
Flavorbase Backend: Shared Response Schemas
=============================================

What:  Error and health payloads shared by every route.
Why:   Referenced from route `responses=` declarations so the OpenAPI document
       describes the 400 / 401 bodies clients must parse.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """
    One unmet field rule.

    Example:
        {"location": "query", "field": "limit", "message": "Invalid value", "value": "stop"}
    """

    location: str = Field(description="Where the field was read from: params, query or body")
    field: str = Field(description="Field name as sent by the client")
    message: str = Field(description="What was wrong with the value")
    value: Optional[Any] = Field(default=None, description="The raw value (omitted when absent)")


class ValidationErrorResponse(BaseModel):
    """400 body: the error descriptors in rule declaration order."""

    errors: List[FieldError]


class ErrorResponse(BaseModel):
    """
    Body of errors produced outside the resource handlers (e.g. 401).

    Fields:
        error: Machine-readable error code (e.g. "unauthorized")
        message: Human-readable description
        request_id: Correlation ID for tracing this error in server logs
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
