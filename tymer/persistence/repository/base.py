"""Shared plumbing for PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from tymer.domain.error import TransientError


class PostgresRepository:
    """Base class holding the request session.

    Connection failures and timeouts surface as `TransientError`.
    Constraint violations (`IntegrityError`) pass through unchanged for
    the services to classify.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Executable) -> Any:
        try:
            return await self.session.execute(stmt)
        except (OperationalError, InterfaceError, TimeoutError, OSError) as e:
            logfire.warn("Database unavailable", error=str(e))
            raise TransientError("Database unavailable") from e

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except (OperationalError, InterfaceError, TimeoutError, OSError) as e:
            logfire.warn("Database unavailable", error=str(e))
            raise TransientError("Database unavailable") from e

    async def _insert(self, stmt: Executable) -> Any:
        """Run an insert inside a SAVEPOINT.

        A constraint violation rolls back to the savepoint only, so the
        request transaction stays usable for a retry or a compensation.

        Raises:
            IntegrityError: On a constraint violation
        """
        async with self.session.begin_nested():
            return await self._execute(stmt)
