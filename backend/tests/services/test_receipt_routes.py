"""Receipt analysis route — upload validation and mock analysis."""

import pytest

from ecosmart.config import get_settings


async def test_analyze_image_returns_items(client):
    resp = await client.post(
        "/api/v1/receipts/analyze",
        files={"receipt": ("receipt.jpg", b"\xff\xd8fake-jpeg", "image/jpeg")},
    )

    assert resp.status_code == 200
    data = resp.json()
    assert [i["name"] for i in data["items"]] == [
        "Organic Bananas", "Almond Milk", "Whole Grain Bread",
    ]
    assert data["category"] == "food"
    assert data["confidence"] == 0.95
    assert data["carbon_impact"] == pytest.approx(2.9)


async def test_analysis_is_not_persisted(client):
    await client.post(
        "/api/v1/receipts/analyze",
        files={"receipt": ("receipt.png", b"png-bytes", "image/png")},
    )
    listing = await client.get("/api/v1/purchases")
    assert listing.json()["total"] == 0


async def test_non_image_rejected(client):
    resp = await client.post(
        "/api/v1/receipts/analyze",
        files={"receipt": ("notes.txt", b"hello", "text/plain")},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_RECEIPT"
    assert resp.json()["error"]["message"] == "File must be an image"


async def test_missing_file_rejected(client):
    resp = await client.post(
        "/api/v1/receipts/analyze",
        files={"attachment": ("receipt.jpg", b"bytes", "image/jpeg")},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "No file provided"


async def test_oversized_file_rejected(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "receipt_max_bytes", 8)
    resp = await client.post(
        "/api/v1/receipts/analyze",
        files={"receipt": ("big.jpg", b"0123456789", "image/jpeg")},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_RECEIPT"
