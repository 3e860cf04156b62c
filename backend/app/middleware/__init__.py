# Middleware package init
"""
Flavorbase Backend: Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID for logging and the X-Request-ID header
    2. Logging: one access line per request with status and duration

    Responses pass back through the chain in reverse, so the access log sees
    the final status code and the request ID header is set last.
"""
