"""Integration test fixtures.

Each test gets a fresh SQLite database file under tmp_path with the schema
created from the models. Repositories talk to it through the real
Database/session machinery.
"""

import pytest_asyncio

from invoice_approval.infrastructure.persistence.database import Database
from invoice_approval.infrastructure.persistence.repositories import (
    ApprovalRepository,
    InvoiceRepository,
)


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Fresh database instance per test (schema created, disposed after)."""
    database = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await database.create_all()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def invoice_repo(test_database):
    return InvoiceRepository(database=test_database)


@pytest_asyncio.fixture
async def approval_repo(test_database):
    return ApprovalRepository(database=test_database)
