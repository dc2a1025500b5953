"""PostgreSQL implementation of Window repository."""

from sqlalchemy import select

from tymer.domain.model import TimeWindow
from tymer.domain.repository import WindowRepository
from tymer.persistence.mappers import row_to_window
from tymer.persistence.tables import windows_table

from .base import PostgresRepository


class PostgresWindowRepository(PostgresRepository, WindowRepository):
    """PostgreSQL implementation of WindowRepository."""

    async def list_all(self) -> list[TimeWindow]:
        stmt = select(windows_table).order_by(
            windows_table.c.start_hour, windows_table.c.end_hour
        )
        result = await self._execute(stmt)
        return [row_to_window(dict(row)) for row in result.mappings().all()]
