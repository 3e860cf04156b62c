"""
Flavorbase Backend: Repository Unit Tests
===========================================

What:  The data access facade, against both a mock session (fault handling)
       and the seeded in-memory database (query behavior).

What we test:
    ✅ SQLAlchemy and integer binding failures become DataAccessError
    ✅ Failed mutations roll back
    ✅ find_one / find_all / count / create / update / destroy results
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.exceptions import DataAccessError
from app.models import Flavor, Ingredient, IngredientCategory
from app.services.repository import Repository, fault_message


def operational_error(message):
    return OperationalError("SELECT 1", {}, Exception(message))


class TestFaults:

    def test_fault_message_prefers_driver_message(self):
        assert fault_message(operational_error("database is locked")) == "database is locked"

    @pytest.mark.asyncio
    async def test_read_failure_raises_data_access_error(self, mock_db_session):
        mock_db_session.execute.side_effect = operational_error("connection refused")
        repo = Repository(mock_db_session, Flavor)

        with pytest.raises(DataAccessError) as exc_info:
            await repo.find_one({"id": 1})

        assert exc_info.value.message == "connection refused"
        assert exc_info.value.operation == "find_one"
        assert exc_info.value.entity == "Flavor"

    @pytest.mark.asyncio
    async def test_unbindable_integer_raises_data_access_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OverflowError(
            "Python int too large to convert to SQLite INTEGER"
        )
        repo = Repository(mock_db_session, Flavor)

        with pytest.raises(DataAccessError) as exc_info:
            await repo.find_one({"id": 10**20})

        assert "too large" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_failed_update_rolls_back(self, mock_db_session):
        mock_db_session.execute.side_effect = operational_error("deadlock detected")
        repo = Repository(mock_db_session, Flavor)

        with pytest.raises(DataAccessError):
            await repo.update({"name": "x"}, {"id": 1})

        mock_db_session.rollback.assert_awaited_once()
        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_create_rolls_back(self, mock_db_session):
        mock_db_session.commit.side_effect = operational_error("disk I/O error")
        repo = Repository(mock_db_session, IngredientCategory)

        with pytest.raises(DataAccessError) as exc_info:
            await repo.create({"name": "Other", "ordinal": 9})

        assert exc_info.value.operation == "create"
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_count_uses_scalar(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock()
        mock_db_session.execute.return_value.scalar_one.return_value = 5

        assert await Repository(mock_db_session, Ingredient).count() == 5


class TestQueries:

    @pytest.mark.asyncio
    async def test_find_one_with_include(self, session_factory):
        async with session_factory() as session:
            flavor = await Repository(session, Flavor).find_one({"id": 123}, include=[Flavor.vendor])

        assert flavor.vendor.code == "CAP"

    @pytest.mark.asyncio
    async def test_find_one_without_match(self, session_factory):
        async with session_factory() as session:
            assert await Repository(session, Flavor).find_one({"id": 0}) is None

    @pytest.mark.asyncio
    async def test_find_all_pages(self, session_factory):
        async with session_factory() as session:
            rows = await Repository(session, Ingredient).find_all(
                limit=2, offset=1, order_by=[Ingredient.id]
            )

        assert [row.id for row in rows] == [2, 3]

    @pytest.mark.asyncio
    async def test_find_all_with_criteria(self, session_factory):
        async with session_factory() as session:
            rows = await Repository(session, Ingredient).find_all(
                {"ingredient_category_id": 1}, order_by=[Ingredient.id]
            )

        assert [row.id for row in rows] == [1, 2, 5]

    @pytest.mark.asyncio
    async def test_count(self, session_factory):
        async with session_factory() as session:
            assert await Repository(session, IngredientCategory).count() == 3

    @pytest.mark.asyncio
    async def test_create_update_destroy(self, session_factory):
        async with session_factory() as session:
            repo = Repository(session, IngredientCategory)

            created = await repo.create({"name": "Flavoring", "ordinal": 4})
            assert created.id == 4

            assert await repo.update({"name": "Flavouring"}, {"id": created.id}) == 1
            assert await repo.update({"name": "Nothing"}, {"id": 999}) == 0
            assert await repo.destroy({"id": created.id}) == 1
            assert await repo.destroy({"id": created.id}) == 0
