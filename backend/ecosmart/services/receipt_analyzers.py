"""Receipt Analyzers — mock and Anthropic implementations of the ReceiptAnalyzer protocol.

Invariants:
    - Analyzer chosen ONCE at startup by build_receipt_analyzer(settings)
    - Output always passes through normalize_receipt (categories coerced, totals filled)
    - Anthropic failures surface as ReceiptAnalysisError (never a silent mock fallback)
    - Non-JSON model output degrades to an empty analysis with confidence 0

Design Decisions:
    - Mock returns a fixed food receipt: local dev works with no API key
    - _parse_receipt_json has 3 fallback levels (direct, regex, empty)
"""

import base64
import json
import logging
import re

from ecosmart.config import Settings
from ecosmart.core.domain_types import ReceiptAnalyzerKind
from ecosmart.core.receipt_analysis import (
    ReceiptAnalysis, ReceiptAnalyzer, normalize_receipt,
)
from ecosmart.infrastructure.anthropic_client import ResilientAnthropicClient

logger = logging.getLogger(__name__)

_MOCK_RECEIPT = {
    "items": [
        {
            "name": "Organic Bananas", "quantity": 2, "price": 3.99,
            "category": "food", "subcategory": "fruits", "carbon_impact": 0.8,
        },
        {
            "name": "Almond Milk", "quantity": 1, "price": 4.49,
            "category": "food", "subcategory": "dairy", "carbon_impact": 1.2,
        },
        {
            "name": "Whole Grain Bread", "quantity": 1, "price": 2.99,
            "category": "food", "subcategory": "grains", "carbon_impact": 0.9,
        },
    ],
    "category": "food",
    "confidence": 0.95,
}

_SYSTEM_PROMPT = """You read shopping receipts and estimate their carbon footprint.
Return ONLY a JSON object. No markdown, no explanation.

Schema:
{
  "items": [
    {
      "name": "item name as printed",
      "quantity": <number>,
      "price": <line price as number>,
      "category": "transport" | "food" | "energy" | "shopping" | "other",
      "subcategory": "short lowercase label, e.g. fruits, dairy, clothing",
      "carbon_impact": <estimated kg CO2e for this line>
    }
  ],
  "total": <receipt total>,
  "carbon_impact": <sum of item carbon_impact>,
  "category": "dominant category",
  "confidence": <0.0-1.0, how legible the receipt was>
}

If the image is not a receipt, return {"items": [], "confidence": 0}."""


class MockReceiptAnalyzer:
    """Deterministic analyzer for development and tests."""

    kind = ReceiptAnalyzerKind.MOCK

    async def analyze(self, image: bytes, media_type: str) -> ReceiptAnalysis:
        return normalize_receipt(_MOCK_RECEIPT)


class AnthropicReceiptAnalyzer:
    """Vision analysis through Claude — one message per receipt."""

    kind = ReceiptAnalyzerKind.ANTHROPIC

    def __init__(
        self,
        client: ResilientAnthropicClient,
        model: str,
        max_tokens: int = 1500,
    ):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens

    async def analyze(self, image: bytes, media_type: str) -> ReceiptAnalysis:
        messages = [{
            "role": "user",
            "content": [
                {
                    "type": "image",
                    "source": {
                        "type": "base64",
                        "media_type": media_type,
                        "data": base64.b64encode(image).decode("ascii"),
                    },
                },
                {
                    "type": "text",
                    "text": "Analyze this receipt.",
                },
            ],
        }]
        response = await self.client.create_message(
            model=self.model,
            max_tokens=self.max_tokens,
            system=_SYSTEM_PROMPT,
            messages=messages,
        )
        text = "\n".join(
            b.text for b in response.content
            if getattr(b, "type", None) == "text"
        )
        return normalize_receipt(_parse_receipt_json(text))


def _parse_receipt_json(text: str) -> dict:
    """Extract JSON from model output. Handles markdown wrapping.

    Fallback levels:
    1. Direct json.loads
    2. Regex: extract first {...} block
    3. Empty analysis
    """
    text = text.strip()

    try:
        parsed = json.loads(text)
        if isinstance(parsed, dict):
            return parsed
    except json.JSONDecodeError:
        pass

    match = re.search(r"\{[\s\S]*\}", text)
    if match:
        try:
            return json.loads(match.group())
        except json.JSONDecodeError:
            pass

    logger.warning("Receipt model returned non-JSON response")
    return {"items": [], "confidence": 0}


def build_receipt_analyzer(settings: Settings) -> ReceiptAnalyzer:
    """Pick the analyzer implementation for this process."""
    kind = settings.receipt_analyzer
    if kind == ReceiptAnalyzerKind.AUTO:
        kind = (
            ReceiptAnalyzerKind.ANTHROPIC if settings.has_anthropic_key
            else ReceiptAnalyzerKind.MOCK
        )

    if kind == ReceiptAnalyzerKind.ANTHROPIC:
        logger.info("Using Anthropic receipt analyzer", extra={"analyzer": "anthropic"})
        client = ResilientAnthropicClient(
            api_key=settings.anthropic_api_key,
            max_retries=settings.anthropic_max_retries,
            base_delay_ms=settings.anthropic_base_delay_ms,
            max_delay_ms=settings.anthropic_max_delay_ms,
            timeout_seconds=settings.anthropic_timeout_seconds,
        )
        return AnthropicReceiptAnalyzer(
            client, settings.receipt_model, settings.receipt_max_tokens,
        )

    logger.info("Using mock receipt analyzer", extra={"analyzer": "mock"})
    return MockReceiptAnalyzer()
