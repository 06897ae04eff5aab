"""Error Hierarchy — typed, categorized exceptions for all EcoSmart failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are raised before any mutation
    - Infrastructure errors (500-level) are critical and never retried here
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EcoSmartError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    field: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None
    retry_after_ms: int | None = None


class EcoSmartError(Exception):
    """Base exception for all EcoSmart errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "field": self.context.field,
                    "retry_after_ms": self.context.retry_after_ms,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidCategoryError(EcoSmartError):
    """Category is not one of transport, food, energy, shopping, other."""
    def __init__(self, category: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = ctx.field or "category"
        super().__init__(
            f"Invalid category {category!r}. "
            "Expected one of: transport, food, energy, shopping, other",
            "INVALID_CATEGORY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.category = category


class InvalidImpactError(EcoSmartError):
    """Carbon impact is negative or not a finite number."""
    def __init__(self, impact: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = ctx.field or "carbon_impact"
        super().__init__(
            f"Invalid carbon impact {impact!r}. Must be a finite number >= 0",
            "INVALID_IMPACT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.impact = impact


class InvalidPeriodError(EcoSmartError):
    """Period bounds are not well ordered (start after end)."""
    def __init__(self, start: object, end: object, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid period: start {start} is after end {end}",
            "INVALID_PERIOD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class InvalidDistanceError(EcoSmartError):
    """Journey distance must be positive."""
    def __init__(self, distance_km: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = ctx.field or "distance_km"
        super().__init__(
            f"Invalid distance {distance_km!r}. Must be greater than 0 km",
            "INVALID_DISTANCE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class ReceiptValidationError(EcoSmartError):
    """Uploaded receipt failed type/size checks."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = ctx.field or "receipt"
        super().__init__(
            message, "INVALID_RECEIPT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class UnauthorizedError(EcoSmartError):
    """Request carries no authenticated user id."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized", "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ResourceNotFoundError(EcoSmartError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(EcoSmartError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class ReceiptAnalysisError(EcoSmartError):
    """Receipt analyzer (AI provider) call failed."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        retry_after_ms: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.retry_after_ms = retry_after_ms
        super().__init__(
            f"Receipt analysis failed ({api_error_type}): {message}",
            "RECEIPT_ANALYSIS_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.api_error_type = api_error_type
