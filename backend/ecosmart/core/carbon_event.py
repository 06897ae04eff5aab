"""Carbon Event — the immutable unit of carbon-generating activity, and its validation.

Invariants:
    - category is always a Category member after validation
    - carbon_impact is finite and >= 0 after validation
    - day is a calendar date; time-of-day is discarded
    - Validation raises before any datastore call (no partial state)
"""

import math
from dataclasses import dataclass
from datetime import date, datetime

from ecosmart.core.domain_types import Category, CarbonKg, UserId
from ecosmart.core.errors import (
    ErrorContext, InvalidCategoryError, InvalidImpactError,
)


@dataclass(frozen=True)
class CarbonEvent:
    """One purchase or journey, already converted to kg CO2e upstream."""
    user_id: UserId
    date: date | datetime
    category: Category | str
    carbon_impact: float
    amount: float | None = None

    @property
    def day(self) -> date:
        return truncate_to_day(self.date)


def truncate_to_day(value: date | datetime) -> date:
    """Drop the time component (datetime is a subclass of date)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_category(value: object, user_id: str | None = None) -> Category:
    """Map a raw value to Category or raise InvalidCategoryError."""
    if isinstance(value, Category):
        return value
    try:
        return Category(value)
    except ValueError:
        raise InvalidCategoryError(value, ErrorContext(user_id=user_id))


def check_impact(value: object, user_id: str | None = None) -> CarbonKg:
    """Return the impact as CarbonKg or raise InvalidImpactError."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidImpactError(value, ErrorContext(user_id=user_id))
    if not math.isfinite(value) or value < 0:
        raise InvalidImpactError(value, ErrorContext(user_id=user_id))
    return CarbonKg(float(value))


def validate_event(event: CarbonEvent) -> tuple[Category, CarbonKg]:
    """Validate category and impact. Pure, raises domain errors."""
    category = parse_category(event.category, event.user_id)
    impact = check_impact(event.carbon_impact, event.user_id)
    return category, impact
