"""Shared fixtures: in-memory SQLite database and an ASGI test client."""

import os

# Settings are read at import time, so point them at SQLite first
os.environ["DB_URL"] = "sqlite+aiosqlite://"
os.environ["ENVIRONMENT"] = "dev"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_admin.infra.database import close_db_engine, create_tables, get_session_factory
from catalog_admin.main import app
from catalog_admin.models import Category, Product


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[None, None]:
    """Fresh schema per test; disposing the engine discards the in-memory DB."""
    await create_tables()
    yield
    await close_db_engine()


@pytest_asyncio.fixture
async def db_session(database) -> AsyncGenerator[AsyncSession, None]:
    async with get_session_factory()() as session:
        yield session


@pytest_asyncio.fixture
async def client(database) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def category(db_session: AsyncSession) -> Category:
    row = Category(name="Electronics")
    db_session.add(row)
    await db_session.commit()
    return row


@pytest_asyncio.fixture
async def product(db_session: AsyncSession, category: Category) -> Product:
    row = Product(name="Laptop", category_id=category.id)
    db_session.add(row)
    await db_session.commit()
    return row


@pytest_asyncio.fixture
async def make_products(db_session: AsyncSession, category: Category):
    """Factory inserting ``count`` products named Item 1..count."""

    async def _make(count: int) -> None:
        db_session.add_all(
            [Product(name=f"Item {i}", category_id=category.id) for i in range(1, count + 1)]
        )
        await db_session.commit()

    return _make


@pytest.fixture
def fail_next_commit(monkeypatch):
    """Arm a single failing commit on every session, e.g. a full disk mid-request.

    Later commits (such as the request scope's own) go through untouched.
    """
    original_commit = AsyncSession.commit

    def _arm(message: str = "disk full") -> None:
        pending = {"fail": True}

        async def commit(self: AsyncSession) -> None:
            if pending["fail"]:
                pending["fail"] = False
                raise OperationalError("COMMIT", {}, Exception(message))
            await original_commit(self)

        monkeypatch.setattr(AsyncSession, "commit", commit)

    return _arm
