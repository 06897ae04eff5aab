"""Health & Readiness Checks — process liveness and footprint-store readiness.

Invariants:
    - GET /health/ is 200 whenever the process serves requests, and names the
      receipt analyzer this process resolved at startup
    - GET /health/ready is 503 unless the database answers AND the users,
      purchases, and carbon_footprints tables exist (migrations applied)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ecosmart.api.dependencies import get_receipt_analyzer
from ecosmart.core.receipt_analysis import ReceiptAnalyzer
from ecosmart.infrastructure import database
from ecosmart.models.carbon_footprint import CarbonFootprint
from ecosmart.models.purchase import Purchase
from ecosmart.models.user import User

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

REQUIRED_TABLES = tuple(
    model.__tablename__ for model in (User, Purchase, CarbonFootprint)
)


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(
    analyzer: ReceiptAnalyzer = Depends(get_receipt_analyzer),
):
    return {
        "status": "healthy",
        "service": "ecosmart-api",
        "receipt_analyzer": analyzer.kind.value,
    }


@router.get("/ready")
async def readiness_check():
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return _not_ready("database_unavailable")

    missing = await manager.missing_tables(REQUIRED_TABLES)
    if missing:
        logger.warning(f"Readiness: missing tables {missing}")
        return _not_ready("schema_missing", missing_tables=missing)

    return {
        "status": "ready",
        "checks": {"database": "healthy", "schema": "healthy"},
    }


def _not_ready(reason: str, **detail) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason, **detail},
    )
