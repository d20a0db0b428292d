"""Error Hierarchy: typed, categorized exceptions for every Shiptivity failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries a short message and a long_message for the client
    - Input errors (400/404) are raised before any reorder runs; storage errors are 503
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ShiptivityError base: one FastAPI handler catches all
    - ClientNotFoundError subclasses InvalidIdError: an unknown id is still an
      invalid id, but GET /clients/{id} answers it with 404
    - UnknownClientError keeps INVALID_ID/400 for a missing client on update
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


@dataclass
class ErrorContext:
    """Context attached to an error for logs and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    client_id: int | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class ShiptivityError(Exception):
    """Base exception for all Shiptivity errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        long_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.long_message = long_message or message
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
                "message": self.message,
                "long_message": self.long_message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class InvalidIdError(ShiptivityError):
    """Client id is not an integer."""
    def __init__(
        self,
        long_message: str = "Id can only be integer.",
        context: ErrorContext | None = None,
        code: str = "INVALID_ID",
        category: ErrorCategory = ErrorCategory.VALIDATION,
        http_status: int = 400,
    ):
        super().__init__(
            "Invalid id provided.", code, category,
            ErrorSeverity.WARNING, context, http_status, long_message,
        )


class ClientNotFoundError(InvalidIdError):
    """Client id is well-formed but no client has it."""
    def __init__(self, client_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.client_id = client_id
        super().__init__(
            "Cannot find client with that id.", ctx, "NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.client_id = client_id


class UnknownClientError(InvalidIdError):
    """Update targets an id no client has; reported as a bad id, not a 404."""
    def __init__(self, client_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.client_id = client_id
        super().__init__("Cannot find client with that id.", ctx)
        self.client_id = client_id


class InvalidStatusError(ShiptivityError):
    """Status token is not one of the three lanes."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = "status"
        super().__init__(
            "Invalid status provided.", "INVALID_STATUS",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, ctx, 400,
            "Status can only be one of the following: "
            "[backlog | in-progress | complete].",
        )
        self.value = value


class InvalidPriorityError(ShiptivityError):
    """Priority is not a number."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = "priority"
        super().__init__(
            "Invalid priority provided.", "INVALID_PRIORITY",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, ctx, 400,
            "Priority can only be positive integer.",
        )
        self.value = value


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ShiptivityError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
