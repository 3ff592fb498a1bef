"""Error Hierarchy: typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - to_response() always produces the flat ErrorBody shape {"error": message}
    - InternalServerError carries a fixed message (no internal details leaked)

Design Decisions:
    - Single hierarchy with ApiError base: one FastAPI handler maps all of them
    - ResourceNotFoundError is declared but not raised by any current route
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class ApiError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the ErrorBody envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(ApiError):
    """Request input failed a validation rule."""
    def __init__(self, message: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )


class ResourceNotFoundError(ApiError):
    """Requested resource does not exist."""
    def __init__(self, message: str):
        super().__init__(
            message, "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class InternalServerError(ApiError):
    """Unexpected failure. The message is fixed."""
    def __init__(self):
        super().__init__(
            INTERNAL_ERROR_MESSAGE, "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, 500,
        )
