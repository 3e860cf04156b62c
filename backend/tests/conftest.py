"""
Flavorbase Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite with a
       static pool), seeded with a small catalogue, and the app's session
       dependency is overridden to use it.

Fixture Hierarchy (all function-scoped):
    ├── db_engine:        in-memory engine with every table created
    ├── session_factory:  async_sessionmaker bound to db_engine, seeded
    ├── test_client:      HTTPX AsyncClient talking to the app over ASGI
    └── mock_db_session:  AsyncMock session for repository unit tests

Seeded catalogue:
    vendor 1 CAP/Capella, vendor 2 TPA/The Flavor Apprentice
    flavor 7 "Strawberry" (TPA), flavor 123 "Pear" (CAP)
    data suppliers 1 ELR, 2 ATF; identifier (123, 1) = "capella-pear"
    categories 1..3, ingredients 1..5, user 1 with a note on flavor 123
    preparations 1..3
"""

import os
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["AUTH_TOKENS"] = ""
os.environ["API_PREFIX"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

from app.database import Base, build_engine, get_db_session  # noqa: E402
from app.main import app  # noqa: E402
from app.models import (  # noqa: E402
    DataSupplier,
    Flavor,
    FlavorIdentifier,
    Ingredient,
    IngredientCategory,
    Preparation,
    UserFlavorNote,
    UserProfile,
    Vendor,
)

TEST_DATABASE_URL = "sqlite+aiosqlite://"


def seed_rows():
    created = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    return [
        Vendor(id=1, code="CAP", name="Capella"),
        Vendor(id=2, code="TPA", name="The Flavor Apprentice"),
        Flavor(id=7, vendor_id=2, name="Strawberry", slug="strawberry", density=Decimal("1.0300")),
        Flavor(id=123, vendor_id=1, name="Pear", slug="pear", density=Decimal("1.0120")),
        DataSupplier(id=1, name="E-Liquid Recipes", code="ELR"),
        DataSupplier(id=2, name="All The Flavors", code="ATF"),
        FlavorIdentifier(flavor_id=123, data_supplier_id=1, identifier="capella-pear"),
        IngredientCategory(id=1, name="Base", ordinal=1),
        IngredientCategory(id=2, name="Nicotine", ordinal=2),
        IngredientCategory(id=3, name="Additive", ordinal=3),
        Ingredient(id=1, ingredient_category_id=1, name="Propylene Glycol", cas_number="57-55-6",
                   density=Decimal("1.0360")),
        Ingredient(id=2, ingredient_category_id=1, name="Vegetable Glycerin", cas_number="56-81-5",
                   density=Decimal("1.2610")),
        Ingredient(id=3, ingredient_category_id=2, name="Nicotine Base", cas_number="54-11-5",
                   density=Decimal("1.0100")),
        Ingredient(id=4, ingredient_category_id=3, name="Sucralose", cas_number="56038-13-2"),
        Ingredient(id=5, ingredient_category_id=1, name="Distilled Water", cas_number="7732-18-5",
                   density=Decimal("1.0000")),
        UserProfile(id=1, name="tinker", location="Leeds", bio="Mixes on weekends"),
        UserFlavorNote(user_id=1, flavor_id=123, note="Great in custards", created=created),
        Preparation(id=1, user_id=1, name="Pear Custard", created=created),
        Preparation(id=2, user_id=1, name="Strawberry Milk", created=created),
        Preparation(id=3, user_id=None, name="Plain Base", description="50/50", created=created),
    ]


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """In-memory database with the full schema; dropped with the engine."""
    engine = build_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        rows = seed_rows()
        # Flush table by table in foreign-key order; the unit of work only
        # orders inserts across mappers linked by relationship().
        for table in Base.metadata.sorted_tables:
            session.add_all([row for row in rows if row.__table__ is table])
            await session.flush()
        await session.commit()
    return factory


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_count(mock_db_session):
            mock_db_session.execute.return_value.scalar_one.return_value = 5
            assert await Repository(mock_db_session, Flavor).count() == 5
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient routed straight into the app, with every request's
    session drawn from the seeded test database.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """

    async def override_get_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
