"""Error Hierarchy — typed, categorized exceptions for all user-app failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error maps to HTTP 500 with its message as a plain-text body
    - to_response() produces the (status, body) pair the API layer writes

Design Decisions:
    - Single hierarchy with UserAppError base: one FastAPI handler catches all
    - Uniform 500 kept for every kind: a missing resource and a database outage
      look the same to the client (observed contract, see DESIGN.md)
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    MALFORMED_REQUEST = "malformed_request"
    STORAGE_VIOLATION = "storage_violation"
    DATABASE = "database"
    RENDERING = "rendering"
    UNSUPPORTED_METHOD = "unsupported_method"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    username: str | None = None


class UserAppError(Exception):
    """Base exception for all user-app errors."""

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

    def to_response(self) -> tuple[int, str]:
        """Status code and plain-text body for the HTTP response."""
        return self.http_status, self.message


# ─── Malformed Requests ─────────────────────────────────────────

class MalformedRequestError(UserAppError):
    """Request could not be mapped onto a CRUD operation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "MALFORMED_REQUEST", ErrorCategory.MALFORMED_REQUEST,
            ErrorSeverity.WARNING, context,
        )


class MissingIdentifierError(MalformedRequestError):
    """Path does not carry a username where one is required."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("no username provided", context)


class MalformedBodyError(MalformedRequestError):
    """Request body does not decode as a User record."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(f"invalid user body: {detail}", context)
        self.detail = detail


class IdentifierMismatchError(MalformedRequestError):
    """Path username and body username differ on update."""
    def __init__(
        self, path_username: str, body_username: str,
        context: ErrorContext | None = None,
    ):
        super().__init__("wrong user specified", context)
        self.path_username = path_username
        self.body_username = body_username


class UnsupportedMethodError(UserAppError):
    """HTTP method outside GET/POST/PUT/DELETE."""
    def __init__(self, method: str, context: ErrorContext | None = None):
        super().__init__(
            f"unsupported method: {method}",
            "UNSUPPORTED_METHOD", ErrorCategory.UNSUPPORTED_METHOD,
            ErrorSeverity.WARNING, context,
        )
        self.method = method


# ─── Storage ────────────────────────────────────────────────────

class RowCountError(UserAppError):
    """Mutating statement affected a number of rows other than one."""
    def __init__(
        self, message: str, rows_affected: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "ROW_COUNT_VIOLATION", ErrorCategory.STORAGE_VIOLATION,
            ErrorSeverity.ERROR, context,
        )
        self.rows_affected = rows_affected


class DatabaseError(UserAppError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation


# ─── Rendering ──────────────────────────────────────────────────

class TemplateMissingError(UserAppError):
    """Requested HTML template could not be located."""
    def __init__(self, template_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"template not found: {template_name}",
            "TEMPLATE_NOT_FOUND", ErrorCategory.RENDERING,
            ErrorSeverity.ERROR, context,
        )
        self.template_name = template_name
