"""Footprint Aggregation — pure rollups, trend classification, and chart series.

Invariants:
    - No IO: callers pass already-fetched DailyFootprint rows
    - by_category always contains all 5 categories (missing → 0.0)
    - previous_total == 0 → trend STABLE, change_percentage 0.0
    - change_percentage reported as abs(); the sign lives in trend
    - Highest-category tie-break follows Category declaration order
    - Chart points sorted by ascending date

Design Decisions:
    - Rows consumed through FootprintLike protocol: ORM rows and plain
      dataclasses both work, tests need no DB
    - current_total sums row.total (not the category columns) — the two are
      equal by the DailyFootprint invariant
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from ecosmart.core.domain_types import (
    CATEGORY_ORDER, Category, CarbonKg, ChangePercentage, Trend,
)
from ecosmart.core.errors import InvalidPeriodError
from ecosmart.core.recommendations import recommendations_for
from ecosmart.core.repository_protocols import FootprintLike

TREND_BAND_PERCENT = 5.0


@dataclass
class PeriodSummary:
    """Current vs previous window comparison. Derived, never persisted."""
    current_total: CarbonKg
    previous_total: CarbonKg
    trend: Trend
    change_percentage: ChangePercentage
    by_category: dict[Category, float]
    top_category: Category
    recommendations: list[str] = field(default_factory=list)


@dataclass
class ChartPoint:
    """One day of the chart series."""
    date: date
    total: float
    by_category: dict[Category, float]


def check_window(start: date, end: date) -> None:
    """Raise InvalidPeriodError if start is after end."""
    if start > end:
        raise InvalidPeriodError(start, end)


def category_values(row: FootprintLike) -> dict[Category, float]:
    """Read the 5 category columns of one row, keyed by Category."""
    return {c: float(getattr(row, c.value) or 0.0) for c in CATEGORY_ORDER}


def sum_by_category(rows: Iterable[FootprintLike]) -> dict[Category, float]:
    totals = {c: 0.0 for c in CATEGORY_ORDER}
    for row in rows:
        for category, value in category_values(row).items():
            totals[category] += value
    return totals


def sum_total(rows: Iterable[FootprintLike]) -> CarbonKg:
    return CarbonKg(sum(float(row.total or 0.0) for row in rows))


def compute_trend(
    current_total: float, previous_total: float,
) -> tuple[Trend, ChangePercentage]:
    """Classify change between windows using the ±5% band."""
    if previous_total <= 0:
        return Trend.STABLE, ChangePercentage(0.0)

    change = (current_total - previous_total) / previous_total * 100
    if change > TREND_BAND_PERCENT:
        trend = Trend.UP
    elif change < -TREND_BAND_PERCENT:
        trend = Trend.DOWN
    else:
        trend = Trend.STABLE
    return trend, ChangePercentage(abs(change))


def highest_category(by_category: dict[Category, float]) -> Category:
    """Category with the largest total; first in declaration order wins ties."""
    best = CATEGORY_ORDER[0]
    for category in CATEGORY_ORDER[1:]:
        if by_category.get(category, 0.0) > by_category.get(best, 0.0):
            best = category
    return best


def build_period_summary(
    current_rows: Iterable[FootprintLike],
    previous_rows: Iterable[FootprintLike],
) -> PeriodSummary:
    """Aggregate two windows of rows into a PeriodSummary."""
    current_rows = list(current_rows)
    by_category = sum_by_category(current_rows)
    current_total = sum_total(current_rows)
    previous_total = sum_total(previous_rows)
    trend, change = compute_trend(current_total, previous_total)
    top = highest_category(by_category)
    return PeriodSummary(
        current_total=current_total,
        previous_total=previous_total,
        trend=trend,
        change_percentage=change,
        by_category=by_category,
        top_category=top,
        recommendations=recommendations_for(top),
    )


def build_chart_series(rows: Iterable[FootprintLike]) -> list[ChartPoint]:
    """One point per row, ascending by date."""
    return [
        ChartPoint(
            date=row.date,
            total=float(row.total or 0.0),
            by_category=category_values(row),
        )
        for row in sorted(rows, key=lambda r: r.date)
    ]
