"""Carbon Aggregation Service — recordEvent, summarize, and chartSeries over a FootprintRepository.

Invariants:
    - record_event validates BEFORE touching the repository (no partial state)
    - The day row is mutated only through repository.upsert_increment (atomic)
    - summarize/chart_series are pure reads; no locking
    - Repository errors propagate unmodified (no retry, no swallowing)

Design Decisions:
    - Service does IO, core/footprint_aggregation does math (ADR: impureim sandwich)
    - Transaction boundaries owned by the caller: record_event never commits,
      so a purchase insert and its footprint increment commit together
"""

import logging
from datetime import date

from ecosmart.core.carbon_event import CarbonEvent, validate_event
from ecosmart.core.domain_types import UserId
from ecosmart.core.footprint_aggregation import (
    ChartPoint, PeriodSummary,
    build_chart_series, build_period_summary, check_window,
)
from ecosmart.core.repository_protocols import FootprintLike, FootprintRepository

logger = logging.getLogger(__name__)


class CarbonAggregationService:
    """Carbon Aggregation Engine — one mutable accumulation point, read-only rollups."""

    def __init__(self, repository: FootprintRepository):
        self.repository = repository

    async def record_event(self, event: CarbonEvent) -> FootprintLike:
        """Add an event's impact to its (user, day) footprint."""
        category, impact = validate_event(event)
        footprint = await self.repository.upsert_increment(
            event.user_id, event.day, category, impact,
        )
        logger.info(
            f"Recorded {impact:.3f} kg CO2e on {event.day}",
            extra={"user_id": event.user_id, "category": category.value},
        )
        return footprint

    async def summarize(
        self,
        user_id: UserId,
        period_start: date,
        period_end: date,
        previous_start: date,
        previous_end: date,
    ) -> PeriodSummary:
        """Compare the current window against the previous one."""
        check_window(period_start, period_end)
        check_window(previous_start, previous_end)
        current = await self.repository.find_by_user_and_range(
            user_id, period_start, period_end,
        )
        previous = await self.repository.find_by_user_and_range(
            user_id, previous_start, previous_end,
        )
        return build_period_summary(current, previous)

    async def chart_series(
        self, user_id: UserId, start: date, end: date,
    ) -> list[ChartPoint]:
        """One point per stored day in [start, end], ascending."""
        check_window(start, end)
        rows = await self.repository.find_by_user_and_range(user_id, start, end)
        return build_chart_series(rows)
