"""Receipt Analysis — upload a receipt photo, get itemized carbon estimates back.

Invariants:
    - Only image/* uploads up to receipt_max_bytes are analyzed
    - Analysis is returned, not persisted (client confirms items via /purchases)
    - Analyzer failures surface as ReceiptAnalysisError (503)
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from ecosmart.api.dependencies import get_current_user_id, get_receipt_analyzer
from ecosmart.config import get_settings
from ecosmart.core.domain_types import UserId
from ecosmart.core.errors import ErrorContext, ReceiptValidationError
from ecosmart.core.receipt_analysis import ReceiptAnalyzer
from ecosmart.schemas.receipt import ReceiptAnalysisResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/receipts", tags=["receipts"])


@router.post("/analyze", response_model=ReceiptAnalysisResponse)
async def analyze_receipt(
    receipt: UploadFile | None = File(None),
    user_id: UserId = Depends(get_current_user_id),
    analyzer: ReceiptAnalyzer = Depends(get_receipt_analyzer),
):
    """Run the configured analyzer on one receipt image."""
    ctx = ErrorContext(user_id=user_id)
    if receipt is None:
        raise ReceiptValidationError("No file provided", ctx)

    media_type = receipt.content_type or ""
    if not media_type.startswith("image/"):
        raise ReceiptValidationError("File must be an image", ctx)

    max_bytes = get_settings().receipt_max_bytes
    image = await receipt.read(max_bytes + 1)
    if len(image) > max_bytes:
        raise ReceiptValidationError(
            f"File size must be less than {max_bytes // (1024 * 1024)}MB", ctx,
        )

    analysis = await analyzer.analyze(image, media_type)
    logger.info(
        f"Receipt analyzed: {len(analysis.items)} items",
        extra={"user_id": user_id},
    )
    return ReceiptAnalysisResponse.model_validate(analysis)
