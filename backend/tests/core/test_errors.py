"""Error hierarchy — envelope shape and HTTP status per error."""

from ecosmart.core.errors import (
    DatabaseError, ErrorContext, InvalidCategoryError, ReceiptAnalysisError,
    UnauthorizedError,
)


def test_to_response_envelope():
    err = InvalidCategoryError("travel")
    body = err.to_response()["error"]
    assert body["code"] == "INVALID_CATEGORY"
    assert body["category"] == "validation"
    assert body["severity"] == "error"
    assert body["context"]["field"] == "category"
    assert "timestamp" in body


def test_user_message_overrides_message():
    err = UnauthorizedError(ErrorContext(user_message="Please sign in"))
    assert err.http_status == 401
    assert err.to_response()["error"]["message"] == "Please sign in"


def test_infrastructure_errors_are_critical_503():
    assert DatabaseError("down", "execute").http_status == 503
    err = ReceiptAnalysisError("slow", "rate_limit", retry_after_ms=2000)
    assert err.http_status == 503
    assert err.severity.value == "critical"
    assert err.to_response()["error"]["context"]["retry_after_ms"] == 2000
