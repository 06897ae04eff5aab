"""Purchase Logging — persist a purchase or journey and fold it into the daily footprint.

Invariants:
    - Category and impact validated before the user upsert or any insert
    - Purchase row + footprint increment committed in ONE transaction
    - A failure anywhere rolls back both (session manager rollback)
    - Missing carbon_impact is estimated from the static factor table
"""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from ecosmart.core.carbon_event import CarbonEvent, check_impact, parse_category
from ecosmart.core.carbon_factors import (
    calculate_carbon_impact, describe_journey, transport_impact,
)
from ecosmart.core.domain_types import Category, TransportMode, UserId
from ecosmart.core.period_presets import list_since
from ecosmart.core.repository_protocols import PurchaseLike
from ecosmart.infrastructure.footprint_repository import SqlFootprintRepository
from ecosmart.infrastructure.purchase_repository import SqlPurchaseRepository
from ecosmart.services.carbon_aggregation import CarbonAggregationService

logger = logging.getLogger(__name__)


class PurchaseLogger:
    """Write path shared by manual purchases, transport journeys, and receipt items."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.purchases = SqlPurchaseRepository(db)
        self.engine = CarbonAggregationService(SqlFootprintRepository(db))

    async def log_purchase(
        self,
        user_id: UserId,
        *,
        amount: float,
        description: str,
        category: str,
        carbon_impact: float | None,
        on: date,
        subcategory: str | None = None,
    ) -> PurchaseLike:
        parsed = parse_category(category, user_id)
        if carbon_impact is None:
            carbon_impact = calculate_carbon_impact(
                parsed.value, subcategory or "", amount,
            )
        impact = check_impact(carbon_impact, user_id)

        await self.purchases.ensure_user(user_id)
        purchase = await self.purchases.add(
            {
                "amount": amount,
                "description": description,
                "category": parsed.value,
                "subcategory": subcategory,
                "carbon_impact": impact,
                "date": on,
            },
            user_id,
        )
        await self.engine.record_event(CarbonEvent(
            user_id=user_id, date=on, category=parsed,
            carbon_impact=impact, amount=amount,
        ))
        await self.db.commit()
        await self.db.refresh(purchase)
        logger.info(
            f"Purchase logged: {description[:60]}",
            extra={"user_id": user_id, "category": parsed.value},
        )
        return purchase

    async def log_journey(
        self,
        user_id: UserId,
        *,
        mode: TransportMode,
        distance_km: float,
        origin: str,
        destination: str,
        on: date,
    ) -> PurchaseLike:
        impact = transport_impact(mode, distance_km)
        return await self.log_purchase(
            user_id,
            amount=0.0,
            description=describe_journey(mode, origin, destination, distance_km),
            category=Category.TRANSPORT.value,
            subcategory=mode.value,
            carbon_impact=impact,
            on=on,
        )

    async def list_purchases(
        self,
        user_id: UserId,
        *,
        today: date,
        category: str | None = None,
        date_range: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[PurchaseLike], int]:
        """Page of purchases plus the unpaged count for the same filters."""
        parsed = (
            None if category in (None, "all")
            else parse_category(category, user_id)
        )
        since = list_since(date_range, today)
        rows = await self.purchases.find_by_user(
            user_id, category=parsed, since=since, limit=limit, offset=offset,
        )
        total = await self.purchases.count_by_user(
            user_id, category=parsed, since=since,
        )
        return rows, total
