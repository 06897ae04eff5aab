"""Carbon Aggregation Service against a real (SQLite) footprint table.

Tests cover:
    - record_event creates the day row, then increments it in place
    - total always equals the sum of the five category columns
    - invalid events raise before any row is written
    - summarize compares two windows; chart_series is ascending
"""

from datetime import date, datetime

import pytest
from sqlalchemy import func, select

from ecosmart.core.carbon_event import CarbonEvent
from ecosmart.core.domain_types import Category, Trend, UserId
from ecosmart.core.errors import (
    InvalidCategoryError, InvalidImpactError, InvalidPeriodError,
)
from ecosmart.infrastructure.footprint_repository import SqlFootprintRepository
from ecosmart.models.carbon_footprint import CarbonFootprint
from ecosmart.services.carbon_aggregation import CarbonAggregationService

USER = UserId("user_1")


@pytest.fixture
def engine(test_db):
    return CarbonAggregationService(SqlFootprintRepository(test_db))


async def _record(engine, db, on, category, impact, user=USER):
    row = await engine.record_event(CarbonEvent(
        user_id=user, date=on, category=category, carbon_impact=impact,
    ))
    await db.commit()
    return row


async def _row_count(db) -> int:
    return (await db.execute(select(func.count(CarbonFootprint.id)))).scalar_one()


async def test_first_event_creates_day_row(engine, test_db):
    row = await _record(engine, test_db, date(2026, 5, 1), "food", 50.0)

    assert row.user_id == USER
    assert row.date == date(2026, 5, 1)
    assert row.food == 50.0
    assert row.transport == 0.0
    assert row.total == 50.0


async def test_same_day_events_fold_into_one_row(engine, test_db):
    day = date(2026, 5, 1)
    await _record(engine, test_db, day, "transport", 10.0)
    await _record(engine, test_db, day, "food", 50.0)
    row = await _record(engine, test_db, day, "transport", 5.0)

    assert await _row_count(test_db) == 1
    assert row.transport == 15.0
    assert row.food == 50.0
    assert row.total == 65.0
    assert row.total == (
        row.transport + row.food + row.energy + row.shopping + row.other
    )


async def test_total_matches_category_sum_for_inexact_amounts(engine, test_db):
    day = date(2026, 5, 1)
    for category, impact in (
        ("transport", 0.1), ("food", 0.2), ("transport", 0.3),
        ("energy", 0.7), ("food", 0.11),
    ):
        row = await _record(engine, test_db, day, category, impact)

    assert row.total == (
        row.transport + row.food + row.energy + row.shopping + row.other
    )


async def test_time_of_day_is_ignored(engine, test_db):
    await _record(engine, test_db, datetime(2026, 5, 1, 8, 30), "energy", 2.0)
    row = await _record(engine, test_db, datetime(2026, 5, 1, 22, 15), "energy", 3.0)

    assert await _row_count(test_db) == 1
    assert row.energy == 5.0


async def test_users_do_not_share_rows(engine, test_db):
    day = date(2026, 5, 1)
    await _record(engine, test_db, day, "food", 1.0, user=UserId("user_a"))
    await _record(engine, test_db, day, "food", 2.0, user=UserId("user_b"))

    assert await _row_count(test_db) == 2


async def test_invalid_category_writes_nothing(engine, test_db):
    with pytest.raises(InvalidCategoryError):
        await _record(engine, test_db, date(2026, 5, 1), "invalid", 5.0)
    assert await _row_count(test_db) == 0


async def test_negative_impact_leaves_existing_row_untouched(engine, test_db):
    day = date(2026, 5, 1)
    await _record(engine, test_db, day, "food", 4.0)
    with pytest.raises(InvalidImpactError):
        await _record(engine, test_db, day, "food", -1)

    rows = await engine.repository.find_by_user_and_range(USER, day, day)
    assert rows[0].food == 4.0
    assert rows[0].total == 4.0


async def test_summarize_compares_windows(engine, test_db):
    await _record(engine, test_db, date(2026, 4, 10), "energy", 100.0)
    await _record(engine, test_db, date(2026, 5, 2), "food", 50.0)
    await _record(engine, test_db, date(2026, 5, 3), "transport", 60.0)

    summary = await engine.summarize(
        USER,
        date(2026, 5, 1), date(2026, 5, 31),
        date(2026, 4, 1), date(2026, 4, 30),
    )

    assert summary.current_total == 110.0
    assert summary.previous_total == 100.0
    assert summary.trend is Trend.UP
    assert summary.change_percentage == pytest.approx(10.0)
    assert summary.top_category is Category.TRANSPORT
    assert summary.by_category[Category.ENERGY] == 0.0


async def test_summarize_window_bounds_are_inclusive(engine, test_db):
    await _record(engine, test_db, date(2026, 5, 1), "other", 1.0)
    await _record(engine, test_db, date(2026, 5, 31), "other", 2.0)

    summary = await engine.summarize(
        USER,
        date(2026, 5, 1), date(2026, 5, 31),
        date(2026, 4, 1), date(2026, 4, 30),
    )
    assert summary.current_total == 3.0
    assert summary.trend is Trend.STABLE
    assert summary.change_percentage == 0.0


async def test_summarize_rejects_reversed_window(engine):
    with pytest.raises(InvalidPeriodError):
        await engine.summarize(
            USER,
            date(2026, 5, 31), date(2026, 5, 1),
            date(2026, 4, 1), date(2026, 4, 30),
        )


async def test_chart_series_is_ascending(engine, test_db):
    for day, impact in ((3, 3.0), (1, 1.0), (2, 2.0)):
        await _record(engine, test_db, date(2026, 5, day), "shopping", impact)

    points = await engine.chart_series(USER, date(2026, 5, 1), date(2026, 5, 2))

    assert [p.date for p in points] == [date(2026, 5, 1), date(2026, 5, 2)]
    assert points[1].by_category[Category.SHOPPING] == 2.0
