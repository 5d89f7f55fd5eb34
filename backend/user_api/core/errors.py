"""Error Hierarchy — typed, categorized exceptions for all User API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status it is surfaced with
    - to_response(path) produces the standard error body: timestamp, status, error, path
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UserApiError base: one FastAPI handler catches all
    - ErrorContext holds the timestamp and optional debug data, decoupled from logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error when it is raised."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    debug_info: dict[str, Any] | None = None


def build_error_body(
    status: int, error: str, path: str, timestamp: datetime | None = None,
) -> dict:
    """Standard error body shared by every error handler."""
    ts = timestamp or datetime.now(timezone.utc)
    return {
        "timestamp": ts.isoformat(),
        "status": status,
        "error": error,
        "path": path,
    }


class UserApiError(Exception):
    """Base exception for all User API errors."""

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

    def to_response(self, path: str) -> dict:
        """Convert to the standard REST error body."""
        return build_error_body(
            self.http_status, self.message, path, self.context.timestamp,
        )


# ─── Domain Errors (400-level) ──────────────────────────────────

class ObjectNotFoundError(UserApiError):
    """Lookup by id found nothing."""
    def __init__(
        self, message: str = "Object not found", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "OBJECT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class DataIntegrityViolationError(UserApiError):
    """Write would break a data invariant (email already taken)."""
    def __init__(
        self, message: str = "Email already used", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "DATA_INTEGRITY_VIOLATION", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UserApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
