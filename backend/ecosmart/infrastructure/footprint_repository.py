"""Footprint Repository — SQL implementation of the FootprintRepository protocol.

Invariants:
    - upsert_increment is ONE statement: INSERT ... ON CONFLICT (user_id, date)
      DO UPDATE SET <category> = <category> + delta
    - total is a generated column, so the database keeps it equal to the
      category sum; it is never written here
    - No read-modify-write in Python — concurrent increments never lose updates
    - Caller owns the transaction (commit/rollback happen in the service/session)
    - Range queries are inclusive on both ends and ordered by date ascending

Design Decisions:
    - Dialect-specific insert (postgresql/sqlite) from dialect_insert(); an
      unsupported dialect raises DatabaseError
    - Row re-read with populate_existing so an identity-mapped instance
      reflects the increment just applied
"""

import logging
import uuid
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecosmart.core.domain_types import CATEGORY_ORDER, Category, CarbonKg, UserId
from ecosmart.infrastructure.database import dialect_insert
from ecosmart.models.carbon_footprint import CarbonFootprint

logger = logging.getLogger(__name__)

class SqlFootprintRepository:
    """DailyFootprint persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_user_and_range(
        self, user_id: UserId, start: date, end: date,
    ) -> list[CarbonFootprint]:
        result = await self.db.execute(
            select(CarbonFootprint)
            .where(CarbonFootprint.user_id == user_id)
            .where(CarbonFootprint.date >= start)
            .where(CarbonFootprint.date <= end)
            .order_by(CarbonFootprint.date.asc()),
        )
        return list(result.scalars().all())

    async def upsert_increment(
        self, user_id: UserId, day: date, category: Category, delta: CarbonKg,
    ) -> CarbonFootprint:
        """Create the (user, day) row or add delta to it, atomically."""
        stmt = self._build_upsert(user_id, day, category, delta)
        await self.db.execute(stmt)

        result = await self.db.execute(
            select(CarbonFootprint)
            .where(CarbonFootprint.user_id == user_id)
            .where(CarbonFootprint.date == day)
            .execution_options(populate_existing=True),
        )
        row = result.scalar_one()
        logger.debug(
            f"Footprint {day} += {delta} ({category.value})",
            extra={"user_id": user_id, "category": category.value},
        )
        return row

    def _build_upsert(
        self, user_id: UserId, day: date, category: Category, delta: CarbonKg,
    ):
        table = CarbonFootprint.__table__
        values = {c.value: 0.0 for c in CATEGORY_ORDER}
        values[category.value] = delta
        stmt = dialect_insert(self.db, table).values(
            id=uuid.uuid4(), user_id=user_id, date=day, **values,
        )
        return stmt.on_conflict_do_update(
            index_elements=[table.c.user_id, table.c.date],
            set_={category.value: table.c[category.value] + delta},
        )
