"""Integration test configuration.

Every test module here defines an `integration_env` fixture with real
persistence. Tables are truncated before each test; the seeded windows
are left alone.
"""

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)

    try:
        # Truncate all tables (CASCADE removes foreign key constraints)
        await session.execute(
            text(
                "TRUNCATE TABLE reactions, moments, invitations, friendships, "
                "profiles CASCADE"
            )
        )
        await session.commit()
    except (OSError, DBAPIError) as e:
        await session.rollback()
        pytest.skip(f"Migrated Postgres database not reachable: {e}")

    yield
    # No cleanup needed after test since next test will truncate
