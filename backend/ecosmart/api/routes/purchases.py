"""Purchases & Transport — log activities and list them.

Invariants:
    - Every write goes through PurchaseLogger (purchase + footprint in one commit)
    - Entries without a date are logged on today's (UTC) date
    - has_more == offset + len(page) < total
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ecosmart.api.dependencies import get_current_user_id, get_today
from ecosmart.core.domain_types import UserId
from ecosmart.infrastructure.database import get_db
from ecosmart.schemas.purchase import (
    PurchaseCreate, PurchaseListResponse, PurchaseResponse, TransportCreate,
)
from ecosmart.services.purchase_logging import PurchaseLogger

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["purchases"])


@router.post(
    "/purchases", response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_purchase(
    body: PurchaseCreate,
    user_id: UserId = Depends(get_current_user_id),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Log a purchase and add its impact to the day's footprint."""
    purchase = await PurchaseLogger(db).log_purchase(
        user_id,
        amount=body.amount,
        description=body.description,
        category=body.category,
        subcategory=body.subcategory,
        carbon_impact=body.carbon_impact,
        on=body.date or today,
    )
    return PurchaseResponse.model_validate(purchase)


@router.get("/purchases", response_model=PurchaseListResponse)
async def list_purchases(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    category: str | None = Query(None),
    date_range: str | None = Query(None),
    user_id: UserId = Depends(get_current_user_id),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Newest-first page of purchases with optional category/date filters."""
    rows, total = await PurchaseLogger(db).list_purchases(
        user_id,
        today=today,
        category=category,
        date_range=date_range,
        limit=limit,
        offset=offset,
    )
    return PurchaseListResponse(
        purchases=[PurchaseResponse.model_validate(r) for r in rows],
        total=total,
        has_more=offset + len(rows) < total,
    )


@router.post(
    "/transport", response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_journey(
    body: TransportCreate,
    user_id: UserId = Depends(get_current_user_id),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Log a journey; impact = mode factor × distance."""
    purchase = await PurchaseLogger(db).log_journey(
        user_id,
        mode=body.mode,
        distance_km=body.distance_km,
        origin=body.origin.strip(),
        destination=body.destination.strip(),
        on=body.date or today,
    )
    return PurchaseResponse.model_validate(purchase)
