"""
Flavorbase Backend: Repository (Data Access Facade)
=====================================================

What:  Generic async repository exposing the six operations every resource
       handler needs: find_one, find_all, count, create, update, destroy.
How:   Thin wrapper over an AsyncSession. Criteria are attribute/value
       mappings (filter_by), relations are included with selectinload, and
       every SQLAlchemy (or driver binding) failure is raised as DataAccessError.
Who:   Built per request by app.dependencies.repository(); called exactly once
       by each resource handler.

Operation contract:
    find_one(where, include)                    → row | None
    find_all(where, include, limit, offset,
             order_by)                          → list of rows
    count()                                     → int
    create(values)                              → the inserted row
    update(values, where)                       → affected-row count
    destroy(where)                              → affected-row count

Transactions:
    create/update/destroy commit on success and roll back on failure, so each
    facade call is its own unit of work. Reads never commit.
"""

import logging
from typing import Any, Generic, List, Mapping, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import Base
from app.exceptions import DataAccessError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# OverflowError: an integer the driver cannot bind (e.g. beyond 64 bits)
DATABASE_FAULTS = (SQLAlchemyError, OverflowError)


def fault_message(exc: Exception) -> str:
    """Driver-level message when there is one, SQLAlchemy's otherwise."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class Repository(Generic[ModelT]):
    """
    Data access facade for one ORM model.

    Example:
        flavors = Repository(session, Flavor)
        pear = await flavors.find_one({"id": 123}, include=[Flavor.vendor])
    """

    def __init__(self, session: AsyncSession, model: Type[ModelT]):
        self.session = session
        self.model = model

    @property
    def entity(self) -> str:
        return self.model.__name__

    def _fault(self, operation: str, exc: Exception) -> DataAccessError:
        logger.debug("%s.%s failed: %r", self.entity, operation, exc)
        return DataAccessError(
            message=fault_message(exc),
            operation=operation,
            entity=self.entity,
        )

    def _select(self, where: Optional[Mapping[str, Any]], include: Sequence[Any]):
        query = select(self.model)
        if where:
            query = query.filter_by(**where)
        for relation in include:
            query = query.options(selectinload(relation))
        return query

    # ── Reads ─────────────────────────────────────────────────────────────

    async def find_one(
        self,
        where: Mapping[str, Any],
        include: Sequence[Any] = (),
    ) -> Optional[ModelT]:
        try:
            result = await self.session.execute(self._select(where, include).limit(1))
            return result.scalars().first()
        except DATABASE_FAULTS as exc:
            raise self._fault("find_one", exc) from exc

    async def find_all(
        self,
        where: Optional[Mapping[str, Any]] = None,
        include: Sequence[Any] = (),
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        order_by: Sequence[Any] = (),
    ) -> List[ModelT]:
        """
        Rows matching `where`, optionally paged.

        `offset` is a 0-based skip count; paging callers should pass an
        `order_by` so pages are stable.
        """
        query = self._select(where, include)
        if order_by:
            query = query.order_by(*order_by)
        if limit is not None:
            query = query.limit(limit)
        if offset:
            query = query.offset(offset)
        try:
            result = await self.session.execute(query)
            return list(result.scalars().all())
        except DATABASE_FAULTS as exc:
            raise self._fault("find_all", exc) from exc

    async def count(self) -> int:
        try:
            result = await self.session.execute(select(func.count()).select_from(self.model))
            return result.scalar_one()
        except DATABASE_FAULTS as exc:
            raise self._fault("count", exc) from exc

    # ── Mutations ─────────────────────────────────────────────────────────

    async def create(self, values: Mapping[str, Any]) -> ModelT:
        row = self.model(**values)
        try:
            self.session.add(row)
            await self.session.commit()
            await self.session.refresh(row)
            return row
        except DATABASE_FAULTS as exc:
            await self.session.rollback()
            raise self._fault("create", exc) from exc

    async def update(self, values: Mapping[str, Any], where: Mapping[str, Any]) -> int:
        statement = (
            update(self.model)
            .filter_by(**where)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(statement)
            await self.session.commit()
            return result.rowcount
        except DATABASE_FAULTS as exc:
            await self.session.rollback()
            raise self._fault("update", exc) from exc

    async def destroy(self, where: Mapping[str, Any]) -> int:
        statement = (
            delete(self.model)
            .filter_by(**where)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(statement)
            await self.session.commit()
            return result.rowcount
        except DATABASE_FAULTS as exc:
            await self.session.rollback()
            raise self._fault("destroy", exc) from exc
