"""Carbon Factors — static emission factors and display helpers.

Invariants:
    - Factors are kg CO2e per unit (km for transport, kWh for energy,
      serving/kg for food, currency unit for shopping)
    - Unknown <category>_<subcategory> keys use DEFAULT_FACTOR
    - transport_impact rejects non-positive distances
"""

from dataclasses import dataclass

from ecosmart.core.domain_types import CarbonKg, TransportMode
from ecosmart.core.errors import InvalidDistanceError

DEFAULT_FACTOR = 0.1


@dataclass(frozen=True)
class TransportModeInfo:
    name: str
    factor_per_km: float
    description: str


TRANSPORT_MODES: dict[TransportMode, TransportModeInfo] = {
    TransportMode.CAR: TransportModeInfo("Car (Gasoline)", 0.21, "Personal vehicle"),
    TransportMode.ELECTRIC_CAR: TransportModeInfo("Electric Car", 0.05, "Zero-emission vehicle"),
    TransportMode.BUS: TransportModeInfo("Bus", 0.08, "Public transport"),
    TransportMode.TRAIN: TransportModeInfo("Train/Metro", 0.04, "Rail transport"),
    TransportMode.BIKE: TransportModeInfo("Bicycle", 0.0, "Zero emissions"),
    TransportMode.WALK: TransportModeInfo("Walking", 0.0, "Zero emissions"),
    TransportMode.PLANE: TransportModeInfo("Airplane", 0.25, "Domestic flights"),
}

CARBON_FACTORS: dict[str, float] = {
    # Transport (kg CO2 per km)
    "car_gasoline": 0.21,
    "car_diesel": 0.17,
    "car_electric": 0.05,
    "bus": 0.08,
    "train": 0.04,
    "plane_domestic": 0.25,
    "plane_international": 0.18,
    # Food (kg CO2 per serving/kg)
    "beef": 27.0,
    "pork": 12.1,
    "chicken": 6.9,
    "fish": 6.1,
    "dairy": 3.2,
    "vegetables": 2.0,
    "fruits": 1.1,
    "grains": 1.4,
    # Energy (kg CO2 per kWh)
    "electricity_grid": 0.5,
    "natural_gas": 0.18,
    "heating_oil": 0.27,
    # Shopping (kg CO2 per currency unit spent)
    "clothing": 0.5,
    "electronics": 0.3,
    "home_goods": 0.2,
    "books_media": 0.1,
}


def transport_impact(mode: TransportMode, distance_km: float) -> CarbonKg:
    """kg CO2e for a journey of distance_km using mode."""
    if distance_km <= 0:
        raise InvalidDistanceError(distance_km)
    return CarbonKg(TRANSPORT_MODES[mode].factor_per_km * distance_km)


def describe_journey(
    mode: TransportMode, origin: str, destination: str, distance_km: float,
) -> str:
    return (
        f"{TRANSPORT_MODES[mode].name}: {origin} → {destination} "
        f"({distance_km:g}km)"
    )


def calculate_carbon_impact(
    category: str,
    subcategory: str,
    amount: float,
    quantity: float | None = None,
) -> CarbonKg:
    """Factor lookup by "<category>_<subcategory>", then "<subcategory>",
    times amount and quantity.
    """
    factor = CARBON_FACTORS.get(
        f"{category}_{subcategory}",
        CARBON_FACTORS.get(subcategory, DEFAULT_FACTOR),
    )
    return CarbonKg((quantity or 1) * amount * factor)


@dataclass(frozen=True)
class CarbonLevel:
    level: str
    description: str


def carbon_level(total_kg: float) -> CarbonLevel:
    """Coarse rating of a period total."""
    if total_kg < 50:
        return CarbonLevel("Excellent", "Your carbon footprint is very low!")
    if total_kg < 100:
        return CarbonLevel("Good", "You're doing well, keep it up!")
    if total_kg < 200:
        return CarbonLevel("Average", "There's room for improvement")
    return CarbonLevel("High", "Consider reducing your carbon footprint")


def format_carbon_value(kg: float) -> str:
    """Grams below 1 kg, otherwise kg to one decimal."""
    if kg < 1:
        return f"{round(kg * 1000)}g CO₂"
    return f"{kg:.1f}kg CO₂"
