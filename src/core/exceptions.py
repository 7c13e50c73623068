"""
Custom Exceptions - Application-specific error classes.

Every exception carries an HTTP status code and an error code so the API
layer can turn it into the standard error envelope:

    {"success": false, "error": "<message>", "code": "<error_code>", "details": ...}
"""
from typing import Optional


class FleetAPIException(Exception):
    """
    Base exception for all application errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {
            "success": False,
            "error": self.message,
            "code": self.error_code,
            "details": self.details,
        }


class ValidationError(FleetAPIException):
    """Raised when a request is missing fields or carries invalid values."""
    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field


class NotFoundError(FleetAPIException):
    """Raised when the addressed record does not exist."""
    status_code = 404
    error_code = "not_found"

    def __init__(self, resource: str, identifier: Optional[str] = None):
        super().__init__(
            message=f"{resource} not found",
            details=f"id={identifier}" if identifier is not None else None
        )
        self.resource = resource
        self.identifier = identifier


class BookingError(FleetAPIException):
    """Raised when a tour registration violates a booking rule."""
    status_code = 400
    error_code = "booking_error"


class DatabaseError(FleetAPIException):
    """Raised when database operations fail."""
    status_code = 500
    error_code = "database_error"

    def __init__(self, message: str = "Database operation failed", details: Optional[str] = None):
        super().__init__(message, details)


class LLMError(FleetAPIException):
    """Raised when an AI wrapper without a fallback cannot get a valid answer."""
    status_code = 500
    error_code = "llm_error"

    def __init__(self, message: str = "LLM service unavailable", details: Optional[str] = None):
        super().__init__(message, details)
