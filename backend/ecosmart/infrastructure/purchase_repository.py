"""Purchase Repository — SQL implementation of the PurchaseRepository protocol.

Invariants:
    - ensure_user is ONE statement: INSERT ... ON CONFLICT (id) DO NOTHING, so
      concurrent first writes for a new user both succeed
    - find_by_user() is newest first; count_by_user() applies the same filters
    - add() flushes but never commits — caller owns the transaction
"""

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ecosmart.core.domain_types import Category, UserId
from ecosmart.infrastructure.database import dialect_insert
from ecosmart.models.purchase import Purchase
from ecosmart.models.user import User


class SqlPurchaseRepository:
    """Purchase and user persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def ensure_user(self, user_id: UserId) -> None:
        stmt = (
            dialect_insert(self.db, User.__table__)
            .values(id=user_id, email="", name="")
            .on_conflict_do_nothing(index_elements=[User.__table__.c.id])
        )
        await self.db.execute(stmt)

    async def add(self, purchase_data: dict, user_id: UserId) -> Purchase:
        purchase = Purchase(user_id=user_id, **purchase_data)
        self.db.add(purchase)
        await self.db.flush()
        return purchase

    async def find_by_user(
        self,
        user_id: UserId,
        *,
        category: Category | None = None,
        since: date | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Purchase]:
        query = self._filtered(select(Purchase), user_id, category, since)
        query = (
            query.order_by(Purchase.date.desc(), Purchase.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count_by_user(
        self,
        user_id: UserId,
        *,
        category: Category | None = None,
        since: date | None = None,
    ) -> int:
        query = self._filtered(
            select(func.count()).select_from(Purchase), user_id, category, since,
        )
        result = await self.db.execute(query)
        return int(result.scalar_one())

    @staticmethod
    def _filtered(query, user_id, category, since):
        query = query.where(Purchase.user_id == user_id)
        if category is not None:
            query = query.where(Purchase.category == category.value)
        if since is not None:
            query = query.where(Purchase.date >= since)
        return query
