"""
Tests for schema creation and teardown.

Dependencies: pytest, sqlalchemy, aiosqlite
System role: Verification of database schema lifecycle
"""

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from enrollments_service.boundary.db.create_tables import create_all_tables, drop_all_tables


@pytest.fixture
async def empty_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    await engine.dispose()


async def table_names(engine) -> list[str]:
    async with engine.connect() as conn:
        return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())


@pytest.mark.asyncio
async def test_create_all_tables_creates_enrollments(empty_engine) -> None:
    await create_all_tables(empty_engine)

    assert "enrollments" in await table_names(empty_engine)


@pytest.mark.asyncio
async def test_create_all_tables_is_idempotent(empty_engine) -> None:
    await create_all_tables(empty_engine)
    await create_all_tables(empty_engine)

    assert await table_names(empty_engine) == ["enrollments"]


@pytest.mark.asyncio
async def test_drop_all_tables_removes_enrollments(empty_engine) -> None:
    await create_all_tables(empty_engine)
    await drop_all_tables(empty_engine)

    assert await table_names(empty_engine) == []
