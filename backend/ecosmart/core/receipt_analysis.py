"""Receipt Analysis — result types, analyzer contract, and raw-result normalization.

Invariants:
    - Every item category is a Category value (unknown → "other")
    - quantity, price, carbon_impact are non-negative floats
    - total and carbon_impact are recomputed from items when missing
    - confidence clamped to 0.0–1.0

Design Decisions:
    - ReceiptAnalyzer is a one-method Protocol: mock and AI implementations are
      interchangeable and chosen once at startup
    - normalize_receipt is pure so AI output quirks are testable without a client
"""

from dataclasses import dataclass, field
from typing import Protocol

from ecosmart.core.domain_types import Category, ReceiptAnalyzerKind


@dataclass
class ReceiptItem:
    name: str
    quantity: float
    price: float
    category: Category
    carbon_impact: float
    subcategory: str | None = None


@dataclass
class ReceiptAnalysis:
    items: list[ReceiptItem] = field(default_factory=list)
    total: float = 0.0
    carbon_impact: float = 0.0
    category: Category = Category.OTHER
    confidence: float = 0.0


class ReceiptAnalyzer(Protocol):
    """Capability: turn a receipt image into itemized carbon estimates."""
    kind: ReceiptAnalyzerKind

    async def analyze(self, image: bytes, media_type: str) -> ReceiptAnalysis: ...


def _non_negative(value: object, default: float = 0.0) -> float:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return number if number >= 0 else default


def _coerce_category(value: object) -> Category:
    try:
        return Category(str(value).strip().lower())
    except ValueError:
        return Category.OTHER


def _dominant_category(items: list[ReceiptItem]) -> Category:
    """Category carrying the most carbon across items."""
    if not items:
        return Category.OTHER
    weights: dict[Category, float] = {}
    for item in items:
        weights[item.category] = weights.get(item.category, 0.0) + item.carbon_impact
    return max(weights, key=lambda c: weights[c])


def normalize_receipt(raw: dict) -> ReceiptAnalysis:
    """Build a ReceiptAnalysis from loosely-typed analyzer output."""
    items = []
    for entry in raw.get("items") or []:
        if not isinstance(entry, dict):
            continue
        name = str(entry.get("name") or "").strip()
        if not name:
            continue
        items.append(ReceiptItem(
            name=name,
            quantity=_non_negative(entry.get("quantity"), 1.0),
            price=_non_negative(entry.get("price")),
            category=_coerce_category(entry.get("category")),
            subcategory=entry.get("subcategory") or None,
            carbon_impact=_non_negative(
                entry.get("carbon_impact", entry.get("carbonImpact")),
            ),
        ))

    total = raw.get("total")
    impact = raw.get("carbon_impact", raw.get("carbonImpact"))
    category = raw.get("category")
    confidence = _non_negative(raw.get("confidence"))
    return ReceiptAnalysis(
        items=items,
        total=(
            _non_negative(total) if total is not None
            else sum(i.price for i in items)
        ),
        carbon_impact=(
            _non_negative(impact) if impact is not None
            else sum(i.carbon_impact for i in items)
        ),
        category=(
            _coerce_category(category) if category
            else _dominant_category(items)
        ),
        confidence=min(confidence, 1.0),
    )
