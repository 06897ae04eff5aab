"""Receipt Schemas — analyzer output returned to the client for confirmation."""

from pydantic import BaseModel, ConfigDict

from ecosmart.core.domain_types import Category


class ReceiptItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    quantity: float
    price: float
    category: Category
    subcategory: str | None = None
    carbon_impact: float


class ReceiptAnalysisResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    items: list[ReceiptItemResponse]
    total: float
    carbon_impact: float
    category: Category
    confidence: float
