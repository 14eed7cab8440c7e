"""Error Hierarchy: typed, categorized exceptions for all product-service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error knows the HTTP status it maps to
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical

Design Decisions:
    - Single hierarchy with ProductServiceError base: one FastAPI handler catches all
    - ErrorContext as dataclass: timestamp captured where the error is produced,
      not where it is rendered
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID


PRODUCT_NOT_FOUND_WITH_ID = "Product not found with id = {}"
VALIDATION_FAILED_PREFIX = "Validation failed:"


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


@dataclass
class ErrorContext:
    """Context captured when the error is produced."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    product_id: UUID | None = None


class ProductServiceError(Exception):
    """Base exception for all product-service errors."""

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


# ─── Domain Errors (400-level) ──────────────────────────────────

class RequestValidationFailed(ProductServiceError):
    """One or more request fields violated their constraints."""
    def __init__(self, violations: list[str], context: ErrorContext | None = None):
        super().__init__(
            format_validation_message(violations),
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.violations = violations


class ResourceNotFoundError(ProductServiceError):
    """Requested product does not exist."""
    def __init__(self, product_id: UUID, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.product_id = product_id
        super().__init__(
            PRODUCT_NOT_FOUND_WITH_ID.format(product_id),
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.product_id = product_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProductServiceError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            message,
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


def format_validation_message(violations: list[str]) -> str:
    """'Validation failed: [title must not be blank, ...]'."""
    return f"{VALIDATION_FAILED_PREFIX} [{', '.join(violations)}]"
