"""Carbon Footprint Dashboard — chart series, period summary, and carbon level.

Invariants:
    - Preset → windows resolution happens here, never in the engine
    - Unknown period strings fall back to 6months
    - Chart covers the current window only
"""

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ecosmart.api.dependencies import get_current_user_id, get_today
from ecosmart.core.carbon_factors import carbon_level, format_carbon_value
from ecosmart.core.domain_types import UserId
from ecosmart.core.footprint_aggregation import ChartPoint, PeriodSummary
from ecosmart.core.period_presets import ReportWindows, parse_preset, resolve_windows
from ecosmart.infrastructure.database import get_db
from ecosmart.infrastructure.footprint_repository import SqlFootprintRepository
from ecosmart.schemas.footprint import (
    CarbonLevelResponse, CategoryBreakdown, ChartPointResponse,
    FootprintDashboardResponse, SummaryResponse, WindowResponse,
)
from ecosmart.services.carbon_aggregation import CarbonAggregationService

router = APIRouter(prefix="/api/v1/carbon-footprint", tags=["carbon-footprint"])


@router.get("", response_model=FootprintDashboardResponse)
async def get_carbon_footprint(
    period: str | None = Query(None),
    user_id: UserId = Depends(get_current_user_id),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Dashboard data for the selected period vs the period before it."""
    preset = parse_preset(period)
    windows = resolve_windows(preset, today)
    engine = CarbonAggregationService(SqlFootprintRepository(db))

    chart = await engine.chart_series(
        user_id, windows.current_start, windows.current_end,
    )
    summary = await engine.summarize(
        user_id,
        windows.current_start, windows.current_end,
        windows.previous_start, windows.previous_end,
    )
    level = carbon_level(summary.current_total)

    return FootprintDashboardResponse(
        period=preset,
        chart_data=[_chart_point(p) for p in chart],
        summary=_summary(summary, windows),
        level=CarbonLevelResponse(
            level=level.level,
            description=level.description,
            formatted_total=format_carbon_value(summary.current_total),
        ),
    )


def _breakdown(by_category: dict) -> CategoryBreakdown:
    return CategoryBreakdown(**{c.value: v for c, v in by_category.items()})


def _chart_point(point: ChartPoint) -> ChartPointResponse:
    return ChartPointResponse(
        date=point.date,
        total=point.total,
        by_category=_breakdown(point.by_category),
    )


def _summary(summary: PeriodSummary, windows: ReportWindows) -> SummaryResponse:
    return SummaryResponse(
        current=WindowResponse(
            start=windows.current_start, end=windows.current_end,
            total=summary.current_total,
        ),
        previous=WindowResponse(
            start=windows.previous_start, end=windows.previous_end,
            total=summary.previous_total,
        ),
        by_category=_breakdown(summary.by_category),
        trend=summary.trend,
        change_percentage=summary.change_percentage,
        top_category=summary.top_category.value,
        recommendations=summary.recommendations,
    )
