"""Request Dependencies — identity, clock, and receipt analyzer injection.

Invariants:
    - Authentication happens upstream; this layer only reads X-User-Id
    - Missing or blank user id → UnauthorizedError (401), never an anonymous user
    - "today" is UTC and injectable, so period windows are testable
    - The resolved user id is bound to the logging context for the request

Design Decisions:
    - Analyzer read from app.state: built once in lifespan, shared by all requests
"""

from datetime import date, datetime, timezone

from fastapi import Header, Request

from ecosmart.core.domain_types import UserId
from ecosmart.core.errors import UnauthorizedError
from ecosmart.core.receipt_analysis import ReceiptAnalyzer
from ecosmart.infrastructure.observability import bind_user


async def get_current_user_id(
    x_user_id: str | None = Header(None, alias="X-User-Id"),
) -> UserId:
    if x_user_id is None or not x_user_id.strip():
        raise UnauthorizedError()
    user_id = UserId(x_user_id.strip())
    bind_user(user_id)
    return user_id


def get_today() -> date:
    return datetime.now(timezone.utc).date()


def get_receipt_analyzer(request: Request) -> ReceiptAnalyzer:
    return request.app.state.receipt_analyzer
