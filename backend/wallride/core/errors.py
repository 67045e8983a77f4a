"""Error Hierarchy — typed, categorized exceptions for all WallRide failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - ValidationFailedError carries EVERY field failure, never just the first
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with WallrideError base: FastAPI global handler catches all (uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - FieldError as frozen dataclass: aggregated by assembly/builder, rendered as response details
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_id: int | None = None
    article_id: int | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


@dataclass(frozen=True)
class FieldError:
    """One field-level failure: which field, why, and the machine-readable code."""
    field: str
    reason: str
    code: str = "INVALID_VALUE"

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.reason, "code": self.code}


class WallrideError(Exception):
    """Base exception for all WallRide errors."""

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
                    "field_id": self.context.field_id,
                    "article_id": self.context.article_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class FieldNotFoundError(WallrideError):
    """Custom field definition is null or unknown."""
    def __init__(self, field_id: int | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_id = field_id
        super().__init__(
            f"Custom field '{field_id}' not found",
            "FIELD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.field_id = field_id

    def to_field_error(self) -> FieldError:
        return FieldError(str(self.field_id), self.message, self.code)


class InvalidValueError(WallrideError):
    """Raw value does not coerce to the field's declared type."""
    def __init__(
        self, field_id: int, reason: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_id = field_id
        super().__init__(
            f"Invalid value for field '{field_id}': {reason}",
            "INVALID_VALUE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field_id = field_id
        self.reason = reason

    def to_field_error(self) -> FieldError:
        return FieldError(str(self.field_id), self.reason, self.code)


class ValidationFailedError(WallrideError):
    """One or more fields failed validation — carries all of them."""
    def __init__(
        self, errors: list[FieldError], context: ErrorContext | None = None,
    ):
        fields = ", ".join(e.field for e in errors)
        super().__init__(
            f"Validation failed for: {fields}",
            "VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.errors = list(errors)

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [e.to_dict() for e in self.errors]
        return response


class ResourceNotFoundError(WallrideError):
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

class DatabaseError(WallrideError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
