"""Root conftest: shared fixtures for every suite.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the schema created
    - The app under test gets a ProductService composed over that database,
      the same way the lifespan composes it in production
    - The same DatabaseSessionManager is placed on app.state for the readiness check
"""

import os

# Keep tests off any real database configured in the environment
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

import product_service.models  # noqa: F401
from product_service.core.product import Product
from product_service.db.base import Base
from product_service.infrastructure.database import DatabaseSessionManager
from product_service.infrastructure.product_repository import (
    SqlAlchemyProductStore,
)
from product_service.main import app, compose_product_service


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_db(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def store(test_db):
    return SqlAlchemyProductStore(test_db)


@pytest.fixture
def service(test_db):
    return compose_product_service(test_db)


@pytest.fixture
def seed_products(store):
    """Insert products directly through the storage adapter; returns the persisted values."""

    async def _seed(*pairs: tuple[str, str]) -> list[Product]:
        pairs = pairs or (
            ("Milk", "Best milk in the world"),
            ("Butter", "Best butter in the world"),
            ("Cottage", "Best cottage in the world"),
        )
        async with store.transaction() as repo:
            return [
                await repo.insert(Product.new(title, details))
                for title, details in pairs
            ]

    return _seed


@pytest.fixture
async def client(test_db, service):
    """FastAPI test client bound to the per-test database."""
    app.state.db_manager = test_db
    app.state.product_service = service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.product_service = None
    app.state.db_manager = None
