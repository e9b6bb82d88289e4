"""Error Hierarchy — typed, categorized exceptions for all calendar API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by every error handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CalendarApiError base: FastAPI global handler catches all
    - EmptyInputError is the only error the quick-add parser raises
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
    CONFIGURATION = "configuration"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    event_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class CalendarApiError(Exception):
    """Base exception for all calendar API errors."""

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
            "ok": False,
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "path": self.context.path,
                    "event_id": self.context.event_id,
                },
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class EmptyInputError(CalendarApiError):
    """Quick-add text is empty after trimming."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Quick-add text is empty", "EMPTY_INPUT",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
        )


class MissingFieldsError(CalendarApiError):
    """Required request fields are missing or blank."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"{'/'.join(fields)} required", "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
        )
        self.fields = fields


class UnauthorizedError(CalendarApiError):
    """API key missing or wrong."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized", "UNAUTHORIZED",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


class GoogleNotConfiguredError(CalendarApiError):
    """OAuth client id, secret or redirect URI missing from settings."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Google OAuth is not configured (missing environment variables)",
            "GOOGLE_NOT_CONFIGURED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context, 400,
        )


class GoogleNotConnectedError(CalendarApiError):
    """No OAuth tokens stored yet."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Google Calendar is not connected (no tokens stored)",
            "GOOGLE_NOT_CONNECTED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class GoogleCalendarError(CalendarApiError):
    """Google Calendar API call failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Google Calendar {operation} failed: {message}",
            "GOOGLE_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.operation = operation


class DatabaseError(CalendarApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
