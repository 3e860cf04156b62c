"""
Flavorbase Backend: Shared FastAPI Dependencies
=================================================

What:  Per-request construction of the data access facade.
How:   `repository(Model)` returns a dependency yielding a Repository bound
       to the request's AsyncSession, so handlers receive the facade as a
       parameter instead of reaching for module-level model objects.

Usage:
    @router.get("/{id}")
    async def get_flavor(
        flavors: Repository[Flavor] = Depends(repository(Flavor)),
    ): ...
"""

from typing import Callable, Type

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.services.repository import ModelT, Repository


def repository(model: Type[ModelT]) -> Callable[..., Repository[ModelT]]:
    async def provide(session: AsyncSession = Depends(get_db_session)) -> Repository[ModelT]:
        return Repository(session, model)

    provide.__name__ = f"{model.__name__.lower()}_repository"
    return provide

