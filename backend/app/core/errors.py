"""Error Hierarchy — typed, categorized exceptions for every expense-tracker failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always produces the {"error": "<message>"} envelope
    - User-facing messages are fixed strings; internal details go to logs only

Design Decisions:
    - Single hierarchy with ExpenseTrackerError base: one FastAPI handler renders all of them
    - Not-found and not-owned share ExpenseNotFoundError so ownership is never revealed
"""

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Server-side context attached to an error for logging."""
    user_id: int | None = None
    expense_id: int | None = None


class ExpenseTrackerError(Exception):
    """Base exception for all expense tracker errors."""

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

    @property
    def headers(self) -> dict[str, str] | None:
        return None

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "user_id": self.context.user_id,
            "expense_id": self.context.expense_id,
        }


# ─── Authentication Errors ──────────────────────────────────────

class MissingCredentialError(ExpenseTrackerError):
    """No bearer token was presented."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Access denied. No token provided.",
            "MISSING_CREDENTIAL", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )

    @property
    def headers(self) -> dict[str, str]:
        return {"WWW-Authenticate": "Bearer"}


class InvalidCredentialError(ExpenseTrackerError):
    """Bearer token failed signature, structure or expiry checks."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            "Invalid or expired token.",
            "INVALID_CREDENTIAL", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.reason = reason


# ─── Domain Errors ──────────────────────────────────────────────

class ExpenseNotFoundError(ExpenseTrackerError):
    """Expense does not exist or belongs to someone else."""
    def __init__(self, expense_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.expense_id = expense_id
        super().__init__(
            "Expense not found or unauthorized",
            "EXPENSE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.expense_id = expense_id


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(ExpenseTrackerError):
    """Database operation failed. The driver's message stays in the logs."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "Server error",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    def log_extra(self) -> dict:
        return {**super().log_extra(), "operation": self.operation}
