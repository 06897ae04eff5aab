"""Carbon Event validation — category and impact checks, day truncation."""

import math
from datetime import date, datetime

import pytest

from ecosmart.core.carbon_event import (
    CarbonEvent, check_impact, parse_category, truncate_to_day, validate_event,
)
from ecosmart.core.domain_types import Category, UserId
from ecosmart.core.errors import InvalidCategoryError, InvalidImpactError


def _event(**overrides) -> CarbonEvent:
    data = {
        "user_id": UserId("user_1"),
        "date": date(2026, 3, 14),
        "category": "food",
        "carbon_impact": 2.5,
    }
    data.update(overrides)
    return CarbonEvent(**data)


def test_validate_event_returns_enum_and_impact():
    category, impact = validate_event(_event())
    assert category is Category.FOOD
    assert impact == 2.5


def test_zero_impact_is_valid():
    _, impact = validate_event(_event(carbon_impact=0))
    assert impact == 0.0


def test_invalid_category_raises():
    with pytest.raises(InvalidCategoryError) as exc:
        validate_event(_event(category="invalid"))
    assert exc.value.code == "INVALID_CATEGORY"
    assert exc.value.http_status == 400
    assert exc.value.context.user_id == "user_1"


def test_negative_impact_raises():
    with pytest.raises(InvalidImpactError) as exc:
        validate_event(_event(carbon_impact=-1))
    assert exc.value.code == "INVALID_IMPACT"


@pytest.mark.parametrize("bad", [math.nan, math.inf, "3", None, True])
def test_non_finite_or_non_numeric_impact_raises(bad):
    with pytest.raises(InvalidImpactError):
        check_impact(bad)


def test_category_checked_before_impact():
    with pytest.raises(InvalidCategoryError):
        validate_event(_event(category="travel", carbon_impact=-5))


def test_parse_category_accepts_enum_member():
    assert parse_category(Category.ENERGY) is Category.ENERGY


def test_day_drops_time_of_day():
    event = _event(date=datetime(2026, 3, 14, 23, 59, 59))
    assert event.day == date(2026, 3, 14)
    assert truncate_to_day(date(2026, 1, 1)) == date(2026, 1, 1)
