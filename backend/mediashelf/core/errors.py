"""Error Hierarchy - typed, categorized exceptions for all MediaShelf failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input and lookup errors (400-level) are recoverable; upstream and storage errors are 500-level
    - to_response() produces the REST envelope; details only when the caller allows them

Design Decisions:
    - Single hierarchy with MediaShelfError base: one global handler catches all (ADR: uniform error shape)
    - Uniqueness conflicts (slug, email, list membership) all map to 409
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any


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
    CONFLICT = "conflict"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class MediaShelfError(Exception):
    """Base exception for all MediaShelf errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self, include_details: bool = False) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
        }
        if include_details and self.details is not None:
            body["details"] = self.details
        return {"error": body}


# ─── Client Errors (400-level) ───────────────────────────────────

class InvalidInputError(MediaShelfError):
    """Request input is missing, malformed or out of range."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400,
        )
        self.field = field


class ResourceNotFoundError(MediaShelfError):
    """Requested resource does not exist."""
    def __init__(self, message: str, resource_type: str | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, 404,
        )
        self.resource_type = resource_type


class ConflictError(MediaShelfError):
    """Write would break a uniqueness rule."""
    def __init__(self, message: str):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )


# ─── Server Errors (500-level) ───────────────────────────────────

class UpstreamAPIError(MediaShelfError):
    """External provider call failed or returned an unusable payload."""
    def __init__(self, message: str, provider: str, details: Any = None):
        super().__init__(
            message, "UPSTREAM_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, 500, details,
        )
        self.provider = provider


class ConfigurationError(MediaShelfError):
    """Required setting (usually an API credential) is absent."""
    def __init__(self, message: str):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, 500,
        )


class DatabaseError(MediaShelfError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, details: Any = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500, details,
        )
        self.operation = operation
