"""Recommendations — static advice per category, chosen for the highest-impact category.

Invariants:
    - Every category maps to exactly 4 recommendations
    - Unknown/unmapped input falls through to the OTHER list (default branch)
    - Returned lists are fresh copies (callers may mutate)

Design Decisions:
    - match over Category instead of a dict lookup: one explicit case per member
      plus a wildcard default
"""

from ecosmart.core.domain_types import Category

_TRANSPORT = (
    "Consider using public transportation or carpooling",
    "Try biking or walking for short distances",
    "Look into electric or hybrid vehicles",
    "Work from home when possible to reduce commuting",
)

_FOOD = (
    "Reduce meat consumption and try plant-based alternatives",
    "Buy local and seasonal produce",
    "Minimize food waste by meal planning",
    "Choose organic options when available",
)

_ENERGY = (
    "Switch to LED light bulbs",
    "Unplug electronics when not in use",
    "Use a programmable thermostat",
    "Consider renewable energy sources",
)

_SHOPPING = (
    "Buy only what you need",
    "Choose products with minimal packaging",
    "Look for eco-friendly and sustainable brands",
    "Consider buying second-hand items",
)

_OTHER = (
    "Reduce, reuse, and recycle",
    "Choose digital receipts and bills",
    "Use reusable bags and containers",
    "Support environmentally conscious businesses",
)


def recommendations_for(category: Category | str) -> list[str]:
    """Return the 4 recommendations for a category (OTHER for anything unknown)."""
    match category:
        case Category.TRANSPORT:
            tips = _TRANSPORT
        case Category.FOOD:
            tips = _FOOD
        case Category.ENERGY:
            tips = _ENERGY
        case Category.SHOPPING:
            tips = _SHOPPING
        case Category.OTHER:
            tips = _OTHER
        case _:
            tips = _OTHER
    return list(tips)
