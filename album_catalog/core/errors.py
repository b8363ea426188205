"""Error Hierarchy — typed, categorized exceptions for all catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) carry a message safe to show; internal errors
      (500-level) always answer with the generic "internal error" message
    - to_response() produces the REST envelope: {"message": ...}

Design Decisions:
    - Single hierarchy with CatalogError base: one global handler maps every
      error to its status code and body
    - AlbumNotFoundError doubles as the storage "no rows matched" signal
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    MALFORMED_REQUEST = "malformed_request"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class MalformedRequestError(CatalogError):
    """Request could not be parsed (body, path or query parameter)."""
    def __init__(self, message: str):
        super().__init__(
            message, "MALFORMED_REQUEST", ErrorCategory.MALFORMED_REQUEST,
            ErrorSeverity.WARNING, 400,
        )


class InvalidRequestError(CatalogError):
    """Request parsed but one or more fields failed validation."""
    def __init__(self, problems: dict[str, str]):
        super().__init__(
            "invalid request body", "INVALID_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.problems = problems

    def to_response(self) -> dict:
        return {"message": self.message, "problems": dict(self.problems)}


class AlbumNotFoundError(CatalogError):
    """No album matched the requested id (or page)."""
    def __init__(self):
        super().__init__(
            "album not found", "ALBUM_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class InternalError(CatalogError):
    """Unexpected failure while serving a request."""
    def __init__(
        self,
        operation: str,
        code: str = "INTERNAL_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
    ):
        super().__init__(
            "internal error", code, category, ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class DatabaseError(InternalError):
    """Database operation failed. Detail is kept for logs, never sent to clients."""
    def __init__(self, detail: str, operation: str):
        super().__init__(operation, "DATABASE_ERROR", ErrorCategory.DATABASE)
        self.detail = detail

    def __str__(self) -> str:
        return f"Database {self.operation} failed: {self.detail}"
