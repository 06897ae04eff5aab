"""Carbon Factors — journey impact, factor lookup, level bands, formatting."""

import pytest

from ecosmart.core.carbon_factors import (
    DEFAULT_FACTOR, calculate_carbon_impact, carbon_level, describe_journey,
    format_carbon_value, transport_impact,
)
from ecosmart.core.domain_types import TransportMode
from ecosmart.core.errors import InvalidDistanceError


def test_car_journey_impact():
    assert transport_impact(TransportMode.CAR, 10) == pytest.approx(2.1)


def test_zero_emission_modes():
    assert transport_impact(TransportMode.BIKE, 12) == 0.0
    assert transport_impact(TransportMode.WALK, 3) == 0.0


@pytest.mark.parametrize("distance", [0, -4])
def test_non_positive_distance_rejected(distance):
    with pytest.raises(InvalidDistanceError):
        transport_impact(TransportMode.BUS, distance)


def test_describe_journey():
    text = describe_journey(TransportMode.TRAIN, "Lyon", "Paris", 465.0)
    assert text == "Train/Metro: Lyon → Paris (465km)"


def test_factor_lookup_by_category_and_subcategory():
    assert calculate_carbon_impact("car", "gasoline", 100) == pytest.approx(21.0)
    assert calculate_carbon_impact("car", "diesel", 10, quantity=2) == pytest.approx(3.4)


def test_unknown_factor_uses_default():
    assert calculate_carbon_impact("shopping", "toys", 20) == pytest.approx(
        20 * DEFAULT_FACTOR,
    )


@pytest.mark.parametrize("total,level", [
    (0, "Excellent"), (49.9, "Excellent"), (50, "Good"),
    (150, "Average"), (200, "High"),
])
def test_carbon_level_bands(total, level):
    assert carbon_level(total).level == level


def test_format_carbon_value():
    assert format_carbon_value(0.35) == "350g CO₂"
    assert format_carbon_value(12.34) == "12.3kg CO₂"


def test_bare_subcategory_factor_used_when_no_compound_key():
    assert calculate_carbon_impact("food", "beef", 2) == pytest.approx(54.0)
