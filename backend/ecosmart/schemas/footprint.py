"""Footprint Schemas — dashboard chart series and period summary."""

from datetime import date as Date

from pydantic import BaseModel

from ecosmart.core.domain_types import PeriodPreset, Trend


class CategoryBreakdown(BaseModel):
    transport: float = 0.0
    food: float = 0.0
    energy: float = 0.0
    shopping: float = 0.0
    other: float = 0.0


class ChartPointResponse(BaseModel):
    date: Date
    total: float
    by_category: CategoryBreakdown


class WindowResponse(BaseModel):
    start: Date
    end: Date
    total: float


class SummaryResponse(BaseModel):
    current: WindowResponse
    previous: WindowResponse
    by_category: CategoryBreakdown
    trend: Trend
    change_percentage: float
    top_category: str
    recommendations: list[str]


class CarbonLevelResponse(BaseModel):
    level: str
    description: str
    formatted_total: str


class FootprintDashboardResponse(BaseModel):
    period: PeriodPreset
    chart_data: list[ChartPointResponse]
    summary: SummaryResponse
    level: CarbonLevelResponse
