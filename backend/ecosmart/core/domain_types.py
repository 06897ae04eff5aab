"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the identity provider's opaque id — never parsed or generated here
    - CarbonKg is kilograms of CO2-equivalent, never negative once validated
    - Category order is fixed: transport, food, energy, shopping, other
      (tie-break order for the highest-category rule)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)


# ─── Value Types ─────────────────────────────────────────────────

CarbonKg = NewType("CarbonKg", float)            # kg CO2e, >= 0
ChangePercentage = NewType("ChangePercentage", float)  # abs(% change), >= 0


# ─── Enums ───────────────────────────────────────────────────────

class Category(str, Enum):
    """Fixed partition used for rollups and recommendations.

    Declaration order is the tie-break order for the highest category.
    """
    TRANSPORT = "transport"
    FOOD = "food"
    ENERGY = "energy"
    SHOPPING = "shopping"
    OTHER = "other"


class Trend(str, Enum):
    """Direction of change between two windows (±5% band is stable)."""
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class PeriodPreset(str, Enum):
    """Named dashboard windows."""
    SEVEN_DAYS = "7days"
    THIRTY_DAYS = "30days"
    THREE_MONTHS = "3months"
    SIX_MONTHS = "6months"
    ONE_YEAR = "1year"


class TransportMode(str, Enum):
    """Journey modes accepted by the transport log."""
    CAR = "car"
    ELECTRIC_CAR = "electric-car"
    BUS = "bus"
    TRAIN = "train"
    BIKE = "bike"
    WALK = "walk"
    PLANE = "plane"


class ReceiptAnalyzerKind(str, Enum):
    """Receipt analyzer selection — resolved once at startup."""
    AUTO = "auto"
    MOCK = "mock"
    ANTHROPIC = "anthropic"


CATEGORY_ORDER: tuple[Category, ...] = tuple(Category)
