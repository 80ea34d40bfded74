"""Error Hierarchy — typed, categorized exceptions for all Todo List failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are recoverable; infrastructure errors (5xx) are critical
    - to_response() produces the REST envelope
    - error_from_result() is the only bridge from a failed Result to an exception

Design Decisions:
    - Single hierarchy with TodoListError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - The aggregate never raises these; the shell translates failed Results at the
      HTTP boundary
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from todolist.core.domain_types import FailureKind
from todolist.core.result import Result


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    item_id: int | None = None
    debug_info: dict[str, Any] | None = None


class TodoListError(Exception):
    """Base exception for all Todo List errors."""

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
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "item_id": self.context.item_id,
                    "details": self.context.debug_info,
                },
            }
        }


# ─── Domain Errors (4xx) ─────────────────────────────────────────

class ItemNotFoundError(TodoListError):
    """Operation referenced an id absent from the todo list."""
    def __init__(self, item_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.item_id = item_id
        super().__init__(
            f"TodoItem with Id {item_id} was not found.",
            "ITEM_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.item_id = item_id


class InvalidCategoryError(TodoListError):
    """Category outside the admissible set."""
    def __init__(self, category: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"category": category}
        super().__init__(
            f"Category '{category}' is not valid.",
            "INVALID_CATEGORY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.invalid_category = category


class CannotModifyError(TodoListError):
    """Item progress exceeds the modification threshold."""
    def __init__(
        self,
        item_id: int,
        current_progress: Decimal,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.item_id = item_id
        ctx.debug_info = {"current_progress": str(current_progress)}
        super().__init__(
            f"TodoItem with Id {item_id} cannot be modified or removed because "
            f"it has {current_progress}% progress.",
            "CANNOT_MODIFY", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.item_id = item_id
        self.current_progress = current_progress


class InvalidProgressionError(TodoListError):
    """Progression violated percent bounds, chronology or the 100% ceiling."""
    def __init__(
        self, reason: str, rule: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.debug_info = {"rule": rule}
        super().__init__(
            reason, "INVALID_PROGRESSION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.reason = reason
        self.rule = rule


# ─── Infrastructure Errors (5xx) ─────────────────────────────────

class DatabaseError(TodoListError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


# ─── Result translation ──────────────────────────────────────────

def error_from_result(result: Result) -> TodoListError:
    """Map a failed aggregate Result onto the matching typed exception."""
    if result.is_success:
        raise ValueError("Cannot build an error from a successful result.")

    details = result.details
    if result.kind == FailureKind.ITEM_NOT_FOUND:
        return ItemNotFoundError(details["item_id"])
    if result.kind == FailureKind.INVALID_CATEGORY:
        return InvalidCategoryError(details["category"])
    if result.kind == FailureKind.CANNOT_MODIFY:
        return CannotModifyError(details["item_id"], details["current_progress"])
    if result.kind == FailureKind.INVALID_PROGRESSION:
        ctx = ErrorContext(item_id=details.get("item_id"))
        return InvalidProgressionError(
            details.get("reason", result.error), details.get("rule"), ctx,
        )
    return TodoListError(
        result.error, "BUSINESS_RULE_VIOLATION", ErrorCategory.BUSINESS_RULE,
        ErrorSeverity.ERROR, None, 400,
    )
