"""Receipt normalization — loosely-typed analyzer output → ReceiptAnalysis."""

from ecosmart.core.domain_types import Category
from ecosmart.core.receipt_analysis import normalize_receipt


def test_normalizes_items_and_keeps_given_totals():
    result = normalize_receipt({
        "items": [
            {"name": "Beef mince", "quantity": 1, "price": 7.5,
             "category": "food", "subcategory": "beef", "carbon_impact": 13.5},
        ],
        "total": 7.5,
        "carbon_impact": 13.5,
        "category": "food",
        "confidence": 0.8,
    })
    assert len(result.items) == 1
    assert result.items[0].category is Category.FOOD
    assert result.total == 7.5
    assert result.confidence == 0.8


def test_unknown_item_category_coerced_to_other():
    result = normalize_receipt({
        "items": [{"name": "Gift card", "price": 25, "category": "vouchers"}],
    })
    assert result.items[0].category is Category.OTHER


def test_missing_totals_computed_from_items():
    result = normalize_receipt({
        "items": [
            {"name": "Jeans", "price": 40, "category": "shopping", "carbonImpact": 20},
            {"name": "Apples", "price": 3, "category": "food", "carbon_impact": 0.5},
        ],
    })
    assert result.total == 43
    assert result.carbon_impact == 20.5
    assert result.category is Category.SHOPPING


def test_garbage_values_are_dropped_or_zeroed():
    result = normalize_receipt({
        "items": [
            "not a dict",
            {"name": "", "price": 1},
            {"name": "Milk", "quantity": "two", "price": -3, "carbon_impact": None},
        ],
        "confidence": 7,
    })
    assert [i.name for i in result.items] == ["Milk"]
    assert result.items[0].quantity == 1.0
    assert result.items[0].price == 0.0
    assert result.items[0].carbon_impact == 0.0
    assert result.confidence == 1.0


def test_empty_payload():
    result = normalize_receipt({})
    assert result.items == []
    assert result.category is Category.OTHER
    assert result.confidence == 0.0
