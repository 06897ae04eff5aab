"""Domain Types — verifies enum members, order, and serialization.

Tests:
    - Category has exactly 5 members in the fixed tie-break order
    - Trend, PeriodPreset, TransportMode values match the API strings
    - NewType wrappers are transparent at runtime
"""

from ecosmart.core.domain_types import (
    CATEGORY_ORDER, CarbonKg, Category, ChangePercentage, PeriodPreset,
    TransportMode, Trend, UserId,
)


def test_category_order_is_fixed():
    assert [c.value for c in CATEGORY_ORDER] == [
        "transport", "food", "energy", "shopping", "other",
    ]


def test_category_compares_equal_to_its_string():
    assert Category.FOOD == "food"
    assert Category("shopping") is Category.SHOPPING


def test_trend_has_three_states():
    assert {t.value for t in Trend} == {"up", "down", "stable"}


def test_period_presets_match_query_strings():
    assert {p.value for p in PeriodPreset} == {
        "7days", "30days", "3months", "6months", "1year",
    }


def test_transport_modes():
    assert TransportMode("electric-car") is TransportMode.ELECTRIC_CAR
    assert len(TransportMode) == 7


def test_value_types_wrap_primitives():
    assert UserId("user_123") == "user_123"
    assert CarbonKg(1.5) == 1.5
    assert ChangePercentage(10.0) == 10.0
