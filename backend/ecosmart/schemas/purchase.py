"""Purchase Schemas — manual purchases and transport journeys.

Invariants:
    - description: 1-500 chars, stripped, non-empty
    - amount >= 0 and finite; distance_km finite (> 0 checked by the domain)
    - category stays a plain string here: the engine raises INVALID_CATEGORY
      with its own error code instead of a generic validation error
"""

from datetime import date as Date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ecosmart.core.domain_types import TransportMode


class PurchaseCreate(BaseModel):
    """Manual purchase entry (or one confirmed receipt line)."""
    amount: float = Field(ge=0, allow_inf_nan=False)
    description: str = Field(min_length=1, max_length=500)
    category: str
    subcategory: str | None = Field(None, max_length=50)
    carbon_impact: float | None = None
    date: Date | None = None

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("description cannot be empty or whitespace")
        return v


class TransportCreate(BaseModel):
    """Journey entry — impact derived from the mode's per-km factor."""
    mode: TransportMode
    distance_km: float = Field(allow_inf_nan=False)
    origin: str = Field(min_length=1, max_length=200)
    destination: str = Field(min_length=1, max_length=200)
    date: Date | None = None


class PurchaseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    amount: float
    description: str
    category: str
    subcategory: str | None
    carbon_impact: float
    date: Date


class PurchaseListResponse(BaseModel):
    purchases: list[PurchaseResponse]
    total: int
    has_more: bool
