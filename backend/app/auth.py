"""
Flavorbase Backend: Authentication Gate
=========================================

What:  `authenticate()` returns the FastAPI dependency that guards every
       resource router.
How:   Reads the Authorization header and admits the caller when it carries
       one of the configured bearer tokens (settings.auth_tokens). With no
       tokens configured the gate is open and callers are admitted
       anonymously.
Who:   Mounted router-wide in app.routes (runs before request validation).

Failure: raises AuthenticationError, which main.py answers with 401 and a
WWW-Authenticate: Bearer header. Handlers never see the failure.
"""

import hmac
import logging
from typing import Awaitable, Callable, Optional

from fastapi import Header

from app.config import settings
from app.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def _token_matches(token: str) -> bool:
    return any(hmac.compare_digest(token, known) for known in settings.auth_tokens_list)


def authenticate() -> Callable[..., Awaitable[None]]:
    """Build the authentication dependency."""

    async def gate(authorization: Optional[str] = Header(default=None)) -> None:
        if not settings.auth_tokens_list:
            return

        if not authorization:
            raise AuthenticationError("Missing authorization header")

        if not authorization.startswith(BEARER_PREFIX):
            raise AuthenticationError("Invalid authorization format")

        token = authorization[len(BEARER_PREFIX):].strip()
        if not _token_matches(token):
            logger.warning("Rejected bearer token ending in ...%s", token[-4:])
            raise AuthenticationError("Invalid or expired token")

    return gate
